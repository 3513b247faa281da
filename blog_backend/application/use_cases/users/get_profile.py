# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for reading the identity held in a session token."""

from __future__ import annotations

from blog_backend.application.interfaces import TokenService, VerificationFailure
from blog_backend.domain.users.entities import SessionClaims
from blog_backend.shared.errors.base import UnauthorizedError


class GetProfileUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> SessionClaims:
        result = self._tokens.verify(token)
        if result.failure is VerificationFailure.ABSENT:
            raise UnauthorizedError("no_token")
        if result.claims is None:
            raise UnauthorizedError("invalid_token")
        return result.claims
