# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed session tokens.

Tokens are HS256 JWTs carrying ``{id, name, iat, exp}``. Nothing is stored
server side, so a token stays usable until it expires; signing out only drops
the cookie on the client.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from blog_backend.application.interfaces import (
    TokenService,
    TokenVerification,
    VerificationFailure,
)
from blog_backend.domain.users.entities import SessionClaims
from blog_backend.shared.logging import logger

_JWT_ALG = "HS256"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret: str,
        ttl_seconds: int,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("jwt_secret_blank")
        self._secret = secret
        self._ttl = timedelta(seconds=max(1, int(ttl_seconds)))
        self._clock = clock

    def issue(self, claims: SessionClaims) -> str:
        now = self._clock()
        payload: dict[str, Any] = {
            "id": claims.user_id,
            "name": claims.user_name,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=_JWT_ALG)

    def verify(self, token: str | None) -> TokenVerification:
        if not token:
            return TokenVerification.rejected(VerificationFailure.ABSENT)

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[_JWT_ALG],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("tokens.verify: expired")
            return TokenVerification.rejected(VerificationFailure.INVALID)
        except jwt.InvalidTokenError as exc:
            logger.info(f"tokens.verify: rejected ({type(exc).__name__})")
            return TokenVerification.rejected(VerificationFailure.INVALID)

        user_id = payload.get("id")
        user_name = payload.get("name")
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            logger.info("tokens.verify: rejected (bad id claim)")
            return TokenVerification.rejected(VerificationFailure.INVALID)
        if not isinstance(user_name, str) or not user_name:
            logger.info("tokens.verify: rejected (bad name claim)")
            return TokenVerification.rejected(VerificationFailure.INVALID)

        return TokenVerification.valid(SessionClaims(user_id=user_id, user_name=user_name))
