# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from blog_backend.application.services.authorization import AuthorizationGuard
from blog_backend.domain.posts.entities import NewPost, Post
from blog_backend.domain.posts.repositories import ObjectStore, PostRepository
from blog_backend.shared.errors.base import NoFileUploadedError
from blog_backend.shared.logging import logger

from .uploads import CoverUpload, store_cover


@dataclass(slots=True, frozen=True)
class PostDraft:
    title: str
    summary: str
    content: str
    img_credit: str | None = None


class CreatePostUseCase:
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
        read_draft: Callable[[], PostDraft],
        cover: CoverUpload | None,
    ) -> Post:
        if cover is None:
            raise NoFileUploadedError()

        author = self._guard.authorize_create(token)
        draft = read_draft()
        cover_url = store_cover(self._storage, cover)

        try:
            return self._posts.create(
                NewPost(
                    title=draft.title,
                    summary=draft.summary,
                    content=draft.content,
                    img_credit=draft.img_credit,
                    cover=cover_url,
                    author_id=author.id,
                )
            )
        except Exception:
            # Upload and insert are not transactional; the object stays behind.
            logger.warning(f"posts.create: insert failed, cover orphaned url={cover_url}")
            raise
