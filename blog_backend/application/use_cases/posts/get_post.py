# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog_backend.domain.posts.entities import Post, parse_post_id
from blog_backend.domain.posts.exceptions import PostNotFoundError
from blog_backend.domain.posts.repositories import PostRepository


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, raw_post_id: int | str) -> Post:
        post_id = parse_post_id(raw_post_id)
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post
