from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from blog_backend.domain.users.entities import SessionClaims, User


class CredentialsRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


class UserPublicDTO(BaseModel):
    id: int
    name: str

    @classmethod
    def from_user(cls, user: User) -> UserPublicDTO:
        return cls(id=user.id, name=user.name)

    @classmethod
    def from_claims(cls, claims: SessionClaims) -> UserPublicDTO:
        return cls.model_validate(claims.to_public())


class MessageDTO(BaseModel):
    message: str
