# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from blog_backend.application.services.authorization import AuthorizationGuard
from blog_backend.domain.posts.entities import Post, PostChanges
from blog_backend.domain.posts.repositories import ObjectStore, PostRepository

from .uploads import CoverUpload, store_cover


class UpdatePostUseCase:
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

    def execute(
        self,
        token: str | None,
        raw_post_id: int | str,
        read_changes: Callable[[], PostChanges],
        cover: CoverUpload | None = None,
    ) -> Post:
        _, post = self._guard.authorize_mutation(token, raw_post_id)
        changes = read_changes()

        if cover is not None:
            changes = changes.with_cover(store_cover(self._storage, cover))

        return self._posts.update(post.id, changes)
