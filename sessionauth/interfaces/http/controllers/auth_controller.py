# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request

from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.domain.users.entities import PublicUser
from sessionauth.domain.users.repositories import SessionIssuer
from sessionauth.interfaces.http.dto.auth import (AuthSuccessDTO, LoginRequestDTO,
                                                  LogoutSuccessDTO, RegisterRequestDTO)
from sessionauth.shared.config import AppConfig, load_config
from sessionauth.shared.errors.base import DomainError
from sessionauth.shared.logging import logger

PROTECTED_PAGE = "/protected"


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        sessions: SessionIssuer,
        config: AppConfig | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._sessions = sessions
        self._config = config or load_config()

    @property
    def cookie_name(self) -> str:
        return self._config.session.cookie_name

    def _set_session_cookie(self, response: Response, user: PublicUser) -> None:
        token = self._sessions.issue(user.id, user.username)
        response.set_cookie(
            self.cookie_name,
            token,
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.secure_cookies(),
            max_age=self._config.session.ttl_seconds,
        )

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.from_request(request)
            user = self._register_use_case.execute(dto.username, dto.password)
        except DomainError as exc:
            if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
                raise
            logger.info(f"auth.register: rejected ({exc.code}) from {_get_client_ip()}")
            return jsonify(exc.to_dict()), HTTPStatus.BAD_REQUEST

        payload = AuthSuccessDTO(username=user.username).model_dump(exclude_none=True)
        response = jsonify(payload)
        self._set_session_cookie(response, user)
        logger.info(f"auth.register: ok user_id={user.id}")
        return response, HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.from_request(request)
            user = self._login_use_case.execute(dto.username, dto.password)
        except DomainError as exc:
            if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
                raise
            logger.info(f"auth.login: rejected ({exc.code}) from {_get_client_ip()}")
            return jsonify(exc.to_dict()), HTTPStatus.UNAUTHORIZED

        payload = AuthSuccessDTO(username=user.username, redirect=PROTECTED_PAGE).model_dump(
            exclude_none=True
        )
        response = jsonify(payload)
        self._set_session_cookie(response, user)
        logger.info(f"auth.login: ok user_id={user.id}")
        return response, HTTPStatus.OK

    def logout(self) -> tuple[Response, int]:
        response = jsonify(LogoutSuccessDTO().model_dump())
        response.delete_cookie(
            self.cookie_name,
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.secure_cookies(),
        )
        logger.info("auth.logout: ok")
        return response, HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
