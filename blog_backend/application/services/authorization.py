# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Identity and ownership checks in front of every post mutation.

Failures are raised in a fixed order that clients observe through status
codes: unauthorized (401), then malformed id (400), then missing post (404),
then wrong author (403).
"""

from __future__ import annotations

from blog_backend.application.interfaces import TokenService, VerificationFailure
from blog_backend.domain.posts.entities import Post, parse_post_id
from blog_backend.domain.posts.exceptions import NotPostAuthorError, PostNotFoundError
from blog_backend.domain.posts.repositories import PostRepository
from blog_backend.domain.users.entities import User
from blog_backend.domain.users.repositories import UserRepository
from blog_backend.shared.errors.base import UnauthorizedError
from blog_backend.shared.logging import logger


class AuthorizationGuard:
    def __init__(
        self,
        *,
        tokens: TokenService,
        users: UserRepository,
        posts: PostRepository,
    ) -> None:
        self._tokens = tokens
        self._users = users
        self._posts = posts

    def authenticate(self, token: str | None) -> User:
        result = self._tokens.verify(token)
        if result.failure is VerificationFailure.ABSENT:
            raise UnauthorizedError("no_token")
        if not result.ok or result.claims is None:
            raise UnauthorizedError("invalid_token")

        user = self._users.find_by_id(result.claims.user_id)
        if user is None:
            logger.warning(f"guard: token for unknown user_id={result.claims.user_id}")
            raise UnauthorizedError("invalid_token")
        return user

    def authorize_create(self, token: str | None) -> User:
        # The post does not exist yet, so identity is the only check.
        return self.authenticate(token)

    def authorize_mutation(
        self, token: str | None, raw_post_id: int | str
    ) -> tuple[User, Post]:
        user = self.authenticate(token)
        post_id = parse_post_id(raw_post_id)

        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)

        if not post.is_authored_by(user.id):
            logger.info(
                f"guard: forbidden (user_id={user.id}, post_id={post_id}, "
                f"author_id={post.author_id})"
            )
            raise NotPostAuthorError(post_id)

        return user, post
