# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog_backend.application.interfaces import TokenService
from blog_backend.domain.users.entities import SessionClaims, User
from blog_backend.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from blog_backend.domain.users.repositories import PasswordHasher, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, name: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_name(name)
        if user is None:
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        token = self._tokens.issue(SessionClaims(user_id=user.id, user_name=user.name))
        return user, token
