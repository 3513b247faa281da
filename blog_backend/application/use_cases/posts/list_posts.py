# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from blog_backend.domain.posts.entities import PAGE_SIZE, Post
from blog_backend.domain.posts.repositories import PostRepository


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self) -> Sequence[Post]:
        return self._posts.list_recent(limit=PAGE_SIZE)
