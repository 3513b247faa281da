# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_backend.domain.users.entities import User as DomainUser
from blog_backend.domain.users.exceptions import UserAlreadyExistsError
from blog_backend.domain.users.repositories import UserRepository
from blog_backend.infrastructure.db.models import User
from blog_backend.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_name(self, name: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.name == name).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with unit_of_work_scope(self._session_factory) as session:
            row = User(name=user.name, password_hash=user.password_hash, created_at=user.created_at)
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                # Lost a race with a concurrent signup for the same name.
                raise UserAlreadyExistsError() from exc
            session.refresh(row)
            return _to_domain(row)
