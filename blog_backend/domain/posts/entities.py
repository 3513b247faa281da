# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Blog post records as seen by the application layer."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from .exceptions import InvalidPostIdError

PAGE_SIZE = 20


def parse_post_id(raw: object) -> int:
    """Accept positive integer ids given as int or decimal string."""
    if isinstance(raw, bool):
        raise InvalidPostIdError(raw)
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw or "").strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidPostIdError(raw)
        value = int(text)
    if value <= 0:
        raise InvalidPostIdError(raw)
    return value


@dataclass(slots=True, frozen=True)
class Post:
    """A persisted post joined with its author's name."""

    id: int
    title: str
    summary: str
    content: str
    img_credit: str | None
    cover: str
    published: bool
    created_at: datetime
    author_id: int
    author_name: str | None = None

    def is_authored_by(self, user_id: int) -> bool:
        return self.author_id == user_id


@dataclass(slots=True, frozen=True)
class NewPost:
    title: str
    summary: str
    content: str
    cover: str
    author_id: int
    img_credit: str | None = None


@dataclass(slots=True, frozen=True)
class PostChanges:
    """Partial update; ``None`` means "leave as is"."""

    title: str | None = None
    summary: str | None = None
    content: str | None = None
    img_credit: str | None = None
    cover: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def with_cover(self, cover: str) -> PostChanges:
        return PostChanges(
            title=self.title,
            summary=self.summary,
            content=self.content,
            img_credit=self.img_credit,
            cover=cover,
        )
