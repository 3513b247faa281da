# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Identity carried inside a session token."""

    user_id: int
    user_name: str

    def to_public(self) -> dict[str, object]:
        return {"id": self.user_id, "name": self.user_name}
