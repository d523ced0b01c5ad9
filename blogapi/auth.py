# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import wraps

from flask import Flask, current_app, g, jsonify, request

from blogapi.application.services.session_gate import SessionGate
from blogapi.domain.users.entities import Identity
from blogapi.domain.users.exceptions import UnauthorizedError
from blogapi.shared.logging import logger

_GATE_KEY = "blogapi.session_gate"
_COOKIE_KEY = "blogapi.session_cookie"


def install_session_gate(app: Flask, gate: SessionGate, *, cookie_name: str) -> None:
    app.extensions[_GATE_KEY] = gate
    app.extensions[_COOKIE_KEY] = cookie_name


def session_token_from_request(cookie_name: str) -> str:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        token = auth[7:].strip()
        if token:
            return token
    return request.cookies.get(cookie_name, "")


def current_identity() -> Identity:
    """Identity attached by :func:`auth_required`; only valid inside a protected view."""
    return g.identity


def auth_required(f):
    @wraps(f)
    def inner(*a, **kw):
        gate: SessionGate = current_app.extensions[_GATE_KEY]
        token = session_token_from_request(current_app.extensions[_COOKIE_KEY])
        try:
            identity = gate.authorize(token)
        except UnauthorizedError as exc:
            logger.warning(
                f"Auth failed ({'no token' if not token else 'token not found/expired'}) "
                f"on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            return jsonify(exc.to_dict()), exc.status

        g.identity = identity
        g.user_id = identity.user_id
        logger.debug(f"Auth OK: user={identity.user_id} {request.method} {request.path}")
        return f(*a, **kw)

    return inner
