# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from blogapi.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    message = "Username already exists"
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    # Same body for unknown user and wrong password.
    message = "Invalid username or password"
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class UnauthorizedError(DomainError):
    message = "Unauthorized"
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
