# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from blog_backend.application.use_cases.users.get_profile import GetProfileUseCase
from blog_backend.application.use_cases.users.login_user import LoginUserUseCase
from blog_backend.application.use_cases.users.register_user import RegisterUserUseCase
from blog_backend.interfaces.http.dto.auth import (
    CredentialsRequestDTO,
    MessageDTO,
    UserPublicDTO,
)
from blog_backend.interfaces.http.session_cookie import (
    clear_session_cookie,
    read_session_token,
    set_session_cookie,
)
from blog_backend.shared.errors.validation import raise_validation_error
from blog_backend.shared.logging import logger


def _read_credentials() -> CredentialsRequestDTO:
    try:
        return CredentialsRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        profile_use_case: GetProfileUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._profile_use_case = profile_use_case

    def signup(self) -> tuple[Response, int]:
        dto = _read_credentials()

        user = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.signup: ok user_id={user.id}")
        return jsonify(UserPublicDTO.from_user(user).model_dump()), 200

    def signin(self) -> tuple[Response, int]:
        dto = _read_credentials()

        user, token = self._login_use_case.execute(dto.username, dto.password)
        g.user_id = user.id

        response = jsonify(UserPublicDTO.from_user(user).model_dump())
        set_session_cookie(response, token)
        logger.info(f"auth.signin: ok user_id={user.id}")
        return response, 200

    def profile(self) -> tuple[Response, int]:
        claims = self._profile_use_case.execute(read_session_token())
        g.user_id = claims.user_id
        return jsonify(UserPublicDTO.from_claims(claims).model_dump()), 200

    def signout(self) -> tuple[Response, int]:
        response = jsonify(MessageDTO(message="Success: User signed out").model_dump())
        clear_session_cookie(response)
        logger.info("auth.signout: ok")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/signin", view_func=self.signin, methods=["POST"])
        bp.add_url_rule("/profile", view_func=self.profile, methods=["GET"])
        bp.add_url_rule("/signout", view_func=self.signout, methods=["POST"])
        return bp
