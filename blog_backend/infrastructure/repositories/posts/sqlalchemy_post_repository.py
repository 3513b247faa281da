# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session, joinedload

from blog_backend.domain.posts.entities import PAGE_SIZE, NewPost, PostChanges
from blog_backend.domain.posts.entities import Post as DomainPost
from blog_backend.domain.posts.exceptions import PostNotFoundError
from blog_backend.domain.posts.repositories import PostRepository
from blog_backend.infrastructure.db.models import Post
from blog_backend.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Post) -> DomainPost:
    return DomainPost(
        id=row.id,
        title=row.title,
        summary=row.summary,
        content=row.content,
        img_credit=row.img_credit,
        cover=row.cover,
        published=bool(row.published),
        created_at=row.created_at,
        author_id=row.author_id,
        author_name=row.author.name if row.author is not None else None,
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_recent(self, limit: int = PAGE_SIZE) -> Sequence[DomainPost]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Post)
                .options(joinedload(Post.author))
                .order_by(Post.created_at.desc(), Post.id.desc())
                .limit(limit)
                .all()
            )
            return [_to_domain(row) for row in rows]

    def get(self, post_id: int) -> DomainPost | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(Post)
                .options(joinedload(Post.author))
                .filter(Post.id == post_id)
                .first()
            )
            return _to_domain(row) if row else None

    def create(self, data: NewPost) -> DomainPost:
        with unit_of_work_scope(self._session_factory) as session:
            row = Post(
                title=data.title,
                summary=data.summary,
                content=data.content,
                img_credit=data.img_credit,
                cover=data.cover,
                published=True,
                author_id=data.author_id,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def update(self, post_id: int, changes: PostChanges) -> DomainPost:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Post, post_id)
            if row is None:
                raise PostNotFoundError(post_id)
            for field, value in changes.as_dict().items():
                setattr(row, field, value)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def delete(self, post_id: int) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.query(Post).filter(Post.id == post_id).delete()
