from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from blog_backend.application.use_cases.posts.create_post import PostDraft
from blog_backend.domain.posts.entities import Post, PostChanges


class PostCreateFormDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=256)
    summary: str = Field(min_length=1, max_length=1024)
    content: str = Field(min_length=1)
    img_credit: str | None = Field(None, alias="imgCredit", max_length=256)

    def to_draft(self) -> PostDraft:
        return PostDraft(
            title=self.title,
            summary=self.summary,
            content=self.content,
            img_credit=self.img_credit or None,
        )


class PostUpdateFormDTO(BaseModel):
    """Every field optional; absent or blank fields keep their stored value."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(None, max_length=256)
    summary: str | None = Field(None, max_length=1024)
    content: str | None = None
    img_credit: str | None = Field(None, alias="imgCredit", max_length=256)

    @field_validator("title", "summary", "content", "img_credit", mode="before")
    @classmethod
    def blank_as_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_changes(self) -> PostChanges:
        return PostChanges(
            title=self.title,
            summary=self.summary,
            content=self.content,
            img_credit=self.img_credit,
        )


class AuthorDTO(BaseModel):
    name: str | None


class PostDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    summary: str
    content: str
    img_credit: str | None
    cover: str
    published: bool
    created_at: datetime
    author_id: int
    author: AuthorDTO

    @classmethod
    def from_post(cls, post: Post) -> PostDTO:
        return cls(
            id=post.id,
            title=post.title,
            summary=post.summary,
            content=post.content,
            img_credit=post.img_credit,
            cover=post.cover,
            published=post.published,
            created_at=post.created_at,
            author_id=post.author_id,
            author=AuthorDTO(name=post.author_name),
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
