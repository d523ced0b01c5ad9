# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property, partial

from sqlalchemy.engine import Engine

from blogapi.application.services.password_hashing import WerkzeugPasswordHasher
from blogapi.application.services.session_gate import SessionGate
from blogapi.application.use_cases.blog.comments import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from blogapi.application.use_cases.blog.posts import (
    CreatePostUseCase,
    DeletePostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blogapi.application.use_cases.users.login_user import LoginUserUseCase
from blogapi.application.use_cases.users.logout_user import LogoutUserUseCase
from blogapi.application.use_cases.users.register_user import RegisterUserUseCase
from blogapi.domain.users.repositories import SessionStore
from blogapi.infrastructure.db import ENGINE, SessionLocal
from blogapi.infrastructure.health import check_database
from blogapi.infrastructure.repositories.blog.sqlalchemy_blog_repository import (
    SqlAlchemyCommentRepository,
    SqlAlchemyPostRepository,
)
from blogapi.infrastructure.repositories.users.memory_session_store import InMemorySessionStore
from blogapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository,
    SqlAlchemyUserRepository,
)
from blogapi.infrastructure.unit_of_work import SessionFactory
from blogapi.interfaces.http.controllers.auth_controller import AuthController
from blogapi.interfaces.http.controllers.comments_controller import CommentsController
from blogapi.interfaces.http.controllers.misc_controller import MiscController
from blogapi.interfaces.http.controllers.posts_controller import PostsController
from blogapi.shared.config import AppConfig, load_config


class Container:
    def __init__(self, *, config: AppConfig, engine: Engine, session_factory: SessionFactory) -> None:
        self.config = config
        self.engine = engine
        self.session_factory = session_factory

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(self.config.security.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def session_store(self) -> SessionStore:
        ttl = self.config.security.session_ttl
        if self.config.security.session_backend == "memory":
            return InMemorySessionStore(ttl_seconds=ttl)
        return SqlAlchemySessionTokenRepository(self.session_factory, ttl_seconds=ttl)

    @cached_property
    def session_gate(self) -> SessionGate:
        return SessionGate(sessions=self.session_store, users=self.user_repository)

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
            sessions=self.session_store,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_store)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            security=self.config.security,
        )

    # Blog

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.session_factory)

    @cached_property
    def comment_repository(self) -> SqlAlchemyCommentRepository:
        return SqlAlchemyCommentRepository(self.session_factory)

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            list_use_case=ListPostsUseCase(posts=self.post_repository),
            create_use_case=CreatePostUseCase(posts=self.post_repository),
            update_use_case=UpdatePostUseCase(posts=self.post_repository),
            delete_use_case=DeletePostUseCase(posts=self.post_repository),
        )

    @cached_property
    def comments_controller(self) -> CommentsController:
        return CommentsController(
            list_use_case=ListCommentsUseCase(comments=self.comment_repository),
            create_use_case=CreateCommentUseCase(
                comments=self.comment_repository, posts=self.post_repository
            ),
            update_use_case=UpdateCommentUseCase(comments=self.comment_repository),
            delete_use_case=DeleteCommentUseCase(comments=self.comment_repository),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database_probe=partial(check_database, self.engine))


def build_container() -> Container:
    return Container(config=load_config(), engine=ENGINE, session_factory=SessionLocal)
