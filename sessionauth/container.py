"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sessionauth.application.services.password_hashing import BcryptPasswordHasher
from sessionauth.application.services.session_tokens import JwtSessionIssuer
from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.infrastructure.repositories.users.json_user_repository import (
    JsonFileUserRepository,
)
from sessionauth.interfaces.http.controllers.auth_controller import AuthController
from sessionauth.interfaces.http.controllers.misc_controller import MiscController
from sessionauth.interfaces.http.controllers.pages_controller import PagesController
from sessionauth.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.hashing.bcrypt_rounds)

    @cached_property
    def user_repository(self) -> JsonFileUserRepository:
        return JsonFileUserRepository(self.config.storage.users_path)

    @cached_property
    def session_issuer(self) -> JwtSessionIssuer:
        return JwtSessionIssuer(
            self.config.jwt_secret,
            ttl=timedelta(seconds=self.config.session.ttl_seconds),
            algorithm=self.config.session.algorithm,
        )

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
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            sessions=self.session_issuer,
            config=self.config,
        )

    @cached_property
    def pages_controller(self) -> PagesController:
        return PagesController(
            sessions=self.session_issuer,
            cookie_name=self.config.session.cookie_name,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(users=self.user_repository)
