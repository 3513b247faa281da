# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session token transport over an httpOnly cookie."""

from __future__ import annotations

from flask import Response, request

from blog_backend.shared.config import load_config


def read_session_token() -> str | None:
    config = load_config()
    token = request.cookies.get(config.security.cookie_name, "")
    return token or None


def set_session_cookie(response: Response, token: str) -> None:
    config = load_config()
    response.set_cookie(
        config.security.cookie_name,
        token,
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.cookie_secure(),
        max_age=config.security.token_ttl_seconds,
    )


def clear_session_cookie(response: Response) -> None:
    config = load_config()
    response.delete_cookie(
        config.security.cookie_name,
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.cookie_secure(),
    )


__all__ = ["clear_session_cookie", "read_session_token", "set_session_cookie"]
