# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, jsonify, send_from_directory

from blog_backend.infrastructure.health import check_database
from blog_backend.infrastructure.storage import PUBLIC_PREFIX


class MiscController:
    def __init__(self, *, upload_dir: Path) -> None:
        self._upload_dir = upload_dir

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule(
            f"{PUBLIC_PREFIX}/<path:name>", view_func=self.upload, methods=["GET"]
        )
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database()
            status["database"] = "ok"
        except Exception as exc:  # pragma: no cover
            status["ok"] = False
            status["database"] = f"error: {type(exc).__name__}"
        return jsonify(status)

    def upload(self, name: str):
        return send_from_directory(self._upload_dir.resolve(), name)
