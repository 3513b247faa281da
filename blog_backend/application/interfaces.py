# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from blog_backend.domain.users.entities import SessionClaims


class VerificationFailure(str, Enum):
    ABSENT = "absent"
    # Malformed, tampered and expired tokens are deliberately not told apart.
    INVALID = "invalid"


@dataclass(slots=True, frozen=True)
class TokenVerification:
    claims: SessionClaims | None = None
    failure: VerificationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.claims is not None

    @classmethod
    def valid(cls, claims: SessionClaims) -> TokenVerification:
        return cls(claims=claims)

    @classmethod
    def rejected(cls, failure: VerificationFailure) -> TokenVerification:
        return cls(failure=failure)


class TokenService(Protocol):
    def issue(self, claims: SessionClaims) -> str: ...

    def verify(self, token: str | None) -> TokenVerification: ...
