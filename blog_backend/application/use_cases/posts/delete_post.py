# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for removing a post together with its cover image."""

from __future__ import annotations

from blog_backend.application.services.authorization import AuthorizationGuard
from blog_backend.domain.posts.entities import Post
from blog_backend.domain.posts.repositories import ObjectStore, PostRepository
from blog_backend.shared.logging import logger


class DeletePostUseCase:
    def __init__(
        self,
        *,
        guard: AuthorizationGuard,
        posts: PostRepository,
        storage: ObjectStore,
    ) -> None:
        self._guard = guard
        self._posts = posts
        self._storage = storage

    def execute(self, token: str | None, raw_post_id: int | str) -> Post:
        _, post = self._guard.authorize_mutation(token, raw_post_id)

        self._release_cover(post)
        self._posts.delete(post.id)

        logger.info(f"posts.delete: removed post_id={post.id}")
        return post

    def _release_cover(self, post: Post) -> None:
        # A missing object is success for the store; anything else aborts
        # before the record is touched.
        if not post.cover:
            return
        self._storage.delete(post.cover)
        logger.debug(f"posts.delete: cover released post_id={post.id}")
