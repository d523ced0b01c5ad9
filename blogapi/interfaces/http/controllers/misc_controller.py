# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from http import HTTPStatus

from flask import Blueprint, jsonify

from blogapi.shared.logging import logger


class MiscController:
    def __init__(self, *, database_probe: Callable[[], bool]) -> None:
        self._database_probe = database_probe

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            self._database_probe()
            status["database"] = "ok"
        except Exception as exc:
            logger.error(f"health: database probe failed ({type(exc).__name__})")
            status["ok"] = False
            status["database"] = "error"
        code = HTTPStatus.OK if status["ok"] else HTTPStatus.SERVICE_UNAVAILABLE
        return jsonify(status), code
