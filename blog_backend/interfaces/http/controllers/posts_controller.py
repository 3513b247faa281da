# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from blog_backend.application.use_cases.posts.create_post import CreatePostUseCase, PostDraft
from blog_backend.application.use_cases.posts.delete_post import DeletePostUseCase
from blog_backend.application.use_cases.posts.get_post import GetPostUseCase
from blog_backend.application.use_cases.posts.list_posts import ListPostsUseCase
from blog_backend.application.use_cases.posts.update_post import UpdatePostUseCase
from blog_backend.application.use_cases.posts.uploads import CoverUpload
from blog_backend.domain.posts.entities import PostChanges
from blog_backend.interfaces.http.dto.auth import MessageDTO
from blog_backend.interfaces.http.dto.posts import (
    PostCreateFormDTO,
    PostDTO,
    PostUpdateFormDTO,
)
from blog_backend.interfaces.http.session_cookie import read_session_token
from blog_backend.shared.errors import AppError, NoFileUploadedError, StorageError
from blog_backend.shared.errors.validation import raise_validation_error
from blog_backend.shared.logging import logger


def _read_create_form() -> PostDraft:
    try:
        form = PostCreateFormDTO.model_validate(request.form.to_dict())
    except ValidationError as exc:
        raise_validation_error(exc)
    return form.to_draft()


def _read_update_form() -> PostChanges:
    try:
        form = PostUpdateFormDTO.model_validate(request.form.to_dict())
    except ValidationError as exc:
        raise_validation_error(exc)
    return form.to_changes()


def _uploaded_cover() -> CoverUpload | None:
    file = request.files.get("file")
    if file is None or not file.filename:
        return None
    return CoverUpload(filename=file.filename, stream=file.stream)


class PostsController:
    def __init__(
        self,
        *,
        list_use_case: ListPostsUseCase,
        get_use_case: GetPostUseCase,
        create_use_case: CreatePostUseCase,
        update_use_case: UpdatePostUseCase,
        delete_use_case: DeletePostUseCase,
    ) -> None:
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/posts")
        bp.add_url_rule("", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<post_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/<post_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/<post_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    def list_posts(self) -> tuple[Response, int]:
        t0 = perf_counter()
        try:
            posts = self._list_use_case.execute()
        except AppError:
            raise
        except Exception as exc:
            logger.exception("posts.list: err")
            raise StorageError("posts_list_failed") from exc
        dt = (perf_counter() - t0) * 1000
        logger.info(f"posts.list: ok (n={len(posts)}, dt_ms={dt:.0f})")
        return jsonify([PostDTO.from_post(post).to_json() for post in posts]), 200

    def get(self, post_id: str) -> tuple[Response, int]:
        post = self._get_use_case.execute(post_id)
        return jsonify(PostDTO.from_post(post).to_json()), 200

    def create(self) -> tuple[Response, int]:
        t0 = perf_counter()
        cover = _uploaded_cover()
        if cover is None:
            raise NoFileUploadedError()

        post = self._create_use_case.execute(read_session_token(), _read_create_form, cover)

        g.user_id = post.author_id
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"posts.create: ok (user_id={post.author_id}, post_id={post.id}, dt_ms={dt:.0f})"
        )
        return jsonify(PostDTO.from_post(post).to_json()), 201

    def update(self, post_id: str) -> tuple[Response, int]:
        t0 = perf_counter()
        post = self._update_use_case.execute(
            read_session_token(),
            post_id,
            _read_update_form,
            _uploaded_cover(),
        )

        g.user_id = post.author_id
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"posts.update: ok (user_id={post.author_id}, post_id={post.id}, dt_ms={dt:.0f})"
        )
        return jsonify(PostDTO.from_post(post).to_json()), 200

    def delete(self, post_id: str) -> tuple[Response, int]:
        post = self._delete_use_case.execute(read_session_token(), post_id)

        g.user_id = post.author_id
        logger.info(f"posts.delete: ok (user_id={post.author_id}, post_id={post.id})")
        return jsonify(MessageDTO(message="Post deleted successfully").model_dump()), 200
