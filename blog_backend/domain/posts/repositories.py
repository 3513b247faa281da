# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import BinaryIO, Protocol

from .entities import PAGE_SIZE, NewPost, Post, PostChanges


class PostRepository(Protocol):
    def list_recent(self, limit: int = PAGE_SIZE) -> Sequence[Post]: ...
    def get(self, post_id: int) -> Post | None: ...
    def create(self, data: NewPost) -> Post: ...
    def update(self, post_id: int, changes: PostChanges) -> Post: ...
    def delete(self, post_id: int) -> None: ...


class ObjectStore(Protocol):
    """Blob storage for cover images.

    ``delete`` accepts either the object name or the public URL returned by
    ``put`` and must treat an already missing object as success.
    """

    def put(self, name: str, stream: BinaryIO) -> str: ...
    def delete(self, name_or_url: str) -> None: ...
