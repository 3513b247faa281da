# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import os

from flask import Flask
from flask_cors import CORS

from blog_backend.infrastructure.container import Container
from blog_backend.infrastructure.db import init_db
from blog_backend.infrastructure.health import wait_for_database
from blog_backend.shared.config import load_config
from blog_backend.shared.logging import logger, setup_logging
from blog_backend.shared.middleware.error_handler import configure_error_handling
from blog_backend.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    config = load_config()
    setup_logging(debug_mode=config.debug_logging)

    wait_for_database()
    init_db()

    container = container or Container(config)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    app.config.update(
        SECRET_KEY=config.secret_key,
        MAX_CONTENT_LENGTH=config.storage.max_upload_bytes,
        UPLOAD_FOLDER=container.object_store.root,
    )

    CORS(
        app,
        origins=config.security.allowed_origins,
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Frame-Options", "DENY")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    port = int(os.environ.get("PORT") or 3000)
    create_app().run(host="0.0.0.0", port=port)
