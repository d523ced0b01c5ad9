# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from blogapi.application.use_cases.users.login_user import LoginUserUseCase
from blogapi.application.use_cases.users.logout_user import LogoutUserUseCase
from blogapi.application.use_cases.users.register_user import RegisterUserUseCase
from blogapi.auth import session_token_from_request
from blogapi.interfaces.http.dto.auth import LoginRequestDTO, MessageDTO, RegisterRequestDTO
from blogapi.shared.config import SecurityConfig
from blogapi.shared.errors import InfrastructureError, StorageUnavailableError
from blogapi.shared.errors.validation import raise_validation_error
from blogapi.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._security = security

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user = self._register_use_case.execute(dto.username, dto.password)
        except StorageUnavailableError as exc:
            raise InfrastructureError("Failed to register user", code="register_failed") from exc

        logger.info(f"auth.register: ok user_id={user.id}")
        payload = MessageDTO(message="User registered successfully").model_dump()
        return jsonify(payload), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            session = self._login_use_case.execute(dto.username, dto.password)
        except StorageUnavailableError as exc:
            raise InfrastructureError("Failed to log in", code="login_failed") from exc

        response = jsonify(MessageDTO(message="Authentication successful").model_dump())
        response.set_cookie(
            self._security.cookie_name,
            session.token,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
            max_age=self._security.session_ttl,
        )
        return response, HTTPStatus.OK

    def logout(self) -> tuple[Response, int]:
        token = session_token_from_request(self._security.cookie_name)
        try:
            self._logout_use_case.execute(token)
        except StorageUnavailableError as exc:
            raise InfrastructureError("Failed to log out", code="logout_failed") from exc

        response = jsonify(MessageDTO(message="Logged out successfully").model_dump())
        response.delete_cookie(
            self._security.cookie_name,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )
        logger.info("auth.logout: ok")
        return response, HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
