# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from blog_backend.shared.errors.base import DomainError


class PostNotFoundError(DomainError):
    code = "post_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, post_id: int) -> None:
        super().__init__(context={"post_id": post_id})


class NotPostAuthorError(DomainError):
    code = "not_post_author"
    status = HTTPStatus.FORBIDDEN

    def __init__(self, post_id: int) -> None:
        super().__init__(context={"post_id": post_id})


class InvalidPostIdError(DomainError):
    code = "invalid_post_id"
    status = HTTPStatus.BAD_REQUEST

    def __init__(self, raw_id: object) -> None:
        super().__init__(context={"post_id": str(raw_id)})
