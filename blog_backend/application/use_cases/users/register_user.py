# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from blog_backend.domain.users.entities import User
from blog_backend.domain.users.exceptions import UserAlreadyExistsError
from blog_backend.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, name: str, password: str) -> User:
        existing = self._users.find_by_name(name)
        if existing:
            raise UserAlreadyExistsError()
        now = datetime.now(UTC)
        hashed = self._password_hasher.hash(password)
        user = User(id=0, name=name, password_hash=hashed, created_at=now)
        return self._users.add(user)
