# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    message: str
    status: HTTPStatus
    code: str = "app_error"
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        # Context is for logs only; clients get a single error string.
        return {"error": self.message}


class DomainError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_message = message or cast(str, getattr(self, "message", "Request failed"))
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(
            message=resolved_message,
            status=resolved_status,
            code=resolved_code,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        message: str = "Internal server error",
        *,
        code: str = "infrastructure_error",
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(message=message, status=resolved_status, code=code, context=context)


class StorageUnavailableError(InfrastructureError):
    def __init__(self, operation: str) -> None:
        super().__init__(
            "Storage unavailable",
            code="storage_unavailable",
            context={"operation": operation},
        )


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "Invalid request body",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            code="validation_error",
            context=context,
        )
