from __future__ import annotations

import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="blog-backend-tests-"))
os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'test.db'}"
os.environ["DATABASE_RETRY_DELAY"] = "0"
os.environ["UPLOAD_DIR"] = str(_TMP / "uploads")
os.environ["PUBLIC_BASE_URL"] = "http://localhost:3000"
os.environ["LOG_FILE"] = str(_TMP / "app.log")

import dataclasses  # noqa: E402
from collections.abc import Sequence  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import BinaryIO  # noqa: E402

import pytest  # noqa: E402

from blog_backend.application.services.authorization import AuthorizationGuard  # noqa: E402
from blog_backend.application.services.tokens import JwtTokenService  # noqa: E402
from blog_backend.domain.posts.entities import (  # noqa: E402
    PAGE_SIZE,
    NewPost,
    Post,
    PostChanges,
)
from blog_backend.domain.posts.exceptions import PostNotFoundError  # noqa: E402
from blog_backend.domain.posts.repositories import ObjectStore, PostRepository  # noqa: E402
from blog_backend.domain.users.entities import User  # noqa: E402
from blog_backend.domain.users.exceptions import UserAlreadyExistsError  # noqa: E402
from blog_backend.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402
from blog_backend.shared.errors.base import StorageError  # noqa: E402


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_name(self, name: str) -> User | None:
        return next((u for u in self._users.values() if u.name == name), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        if self.find_by_name(user.name):
            raise UserAlreadyExistsError()
        new_user = dataclasses.replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user


class InMemoryPostRepository(PostRepository):
    def __init__(self, users: InMemoryUserRepository) -> None:
        self._users = users
        self._posts: dict[int, Post] = {}
        self._seq = 1
        self._clock = datetime(2024, 1, 1, tzinfo=UTC)

    def list_recent(self, limit: int = PAGE_SIZE) -> Sequence[Post]:
        ordered = sorted(
            self._posts.values(), key=lambda p: (p.created_at, p.id), reverse=True
        )
        return ordered[:limit]

    def get(self, post_id: int) -> Post | None:
        return self._posts.get(post_id)

    def create(self, data: NewPost) -> Post:
        author = self._users.find_by_id(data.author_id)
        self._clock += timedelta(seconds=1)
        post = Post(
            id=self._seq,
            title=data.title,
            summary=data.summary,
            content=data.content,
            img_credit=data.img_credit,
            cover=data.cover,
            published=True,
            created_at=self._clock,
            author_id=data.author_id,
            author_name=author.name if author else None,
        )
        self._seq += 1
        self._posts[post.id] = post
        return post

    def update(self, post_id: int, changes: PostChanges) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        updated = dataclasses.replace(post, **changes.as_dict())
        self._posts[post_id] = updated
        return updated

    def delete(self, post_id: int) -> None:
        self._posts.pop(post_id, None)


class InMemoryObjectStore(ObjectStore):
    BASE_URL = "https://storage.test/bucket/"

    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.fail_delete = False

    def put(self, name: str, stream: BinaryIO) -> str:
        self.objects[name] = stream.read()
        return f"{self.BASE_URL}{name}"

    def delete(self, name_or_url: str) -> None:
        if self.fail_delete:
            raise StorageError("file_delete_error")
        name = name_or_url.removeprefix(self.BASE_URL)
        self.objects.pop(name, None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def posts(users: InMemoryUserRepository) -> InMemoryPostRepository:
    return InMemoryPostRepository(users)


@pytest.fixture()
def storage() -> InMemoryObjectStore:
    return InMemoryObjectStore()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret="unit-test-secret", ttl_seconds=3600)


@pytest.fixture()
def guard(
    tokens: JwtTokenService,
    users: InMemoryUserRepository,
    posts: InMemoryPostRepository,
) -> AuthorizationGuard:
    return AuthorizationGuard(tokens=tokens, users=users, posts=posts)


@pytest.fixture()
def make_user(users: InMemoryUserRepository, hasher: DeterministicHasher):
    def _make(name: str, password: str = "pw") -> User:
        return users.add(
            User(
                id=0,
                name=name,
                password_hash=hasher.hash(password),
                created_at=datetime.now(UTC),
            )
        )

    return _make


@pytest.fixture()
def token_for(tokens: JwtTokenService):
    from blog_backend.domain.users.entities import SessionClaims

    def _token(user: User) -> str:
        return tokens.issue(SessionClaims(user_id=user.id, user_name=user.name))

    return _token
