# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from blog_backend.application.services.authorization import AuthorizationGuard
from blog_backend.application.services.password_hashing import WerkzeugPasswordHasher
from blog_backend.application.services.tokens import JwtTokenService
from blog_backend.application.use_cases.posts.create_post import CreatePostUseCase
from blog_backend.application.use_cases.posts.delete_post import DeletePostUseCase
from blog_backend.application.use_cases.posts.get_post import GetPostUseCase
from blog_backend.application.use_cases.posts.list_posts import ListPostsUseCase
from blog_backend.application.use_cases.posts.update_post import UpdatePostUseCase
from blog_backend.application.use_cases.users.get_profile import GetProfileUseCase
from blog_backend.application.use_cases.users.login_user import LoginUserUseCase
from blog_backend.application.use_cases.users.register_user import RegisterUserUseCase
from blog_backend.infrastructure.db import SessionLocal
from blog_backend.infrastructure.repositories.posts.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from blog_backend.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from blog_backend.infrastructure.storage import LocalObjectStore
from blog_backend.interfaces.http.controllers.auth_controller import AuthController
from blog_backend.interfaces.http.controllers.misc_controller import MiscController
from blog_backend.interfaces.http.controllers.posts_controller import PostsController
from blog_backend.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    # Collaborators

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.secret_key,
            ttl_seconds=self.config.security.token_ttl_seconds,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(SessionLocal)

    @cached_property
    def object_store(self) -> LocalObjectStore:
        return LocalObjectStore(
            self.config.storage.upload_dir,
            self.config.storage.public_base_url,
        )

    @cached_property
    def authorization_guard(self) -> AuthorizationGuard:
        return AuthorizationGuard(
            tokens=self.token_service,
            users=self.user_repository,
            posts=self.post_repository,
        )

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(tokens=self.token_service)

    # Post use cases

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_repository)

    @cached_property
    def get_post_use_case(self) -> GetPostUseCase:
        return GetPostUseCase(posts=self.post_repository)

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(
            guard=self.authorization_guard,
            posts=self.post_repository,
            storage=self.object_store,
        )

    @cached_property
    def update_post_use_case(self) -> UpdatePostUseCase:
        return UpdatePostUseCase(
            guard=self.authorization_guard,
            posts=self.post_repository,
            storage=self.object_store,
        )

    @cached_property
    def delete_post_use_case(self) -> DeletePostUseCase:
        return DeletePostUseCase(
            guard=self.authorization_guard,
            posts=self.post_repository,
            storage=self.object_store,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            profile_use_case=self.get_profile_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(upload_dir=self.object_store.root)

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            list_use_case=self.list_posts_use_case,
            get_use_case=self.get_post_use_case,
            create_use_case=self.create_post_use_case,
            update_use_case=self.update_post_use_case,
            delete_use_case=self.delete_post_use_case,
        )
