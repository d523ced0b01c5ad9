# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.users.entities import Identity
from blogapi.domain.users.exceptions import UnauthorizedError
from blogapi.domain.users.repositories import SessionStore, UserRepository
from blogapi.shared.logging import logger


class SessionGate:
    """Turns a session token into an :class:`Identity` or rejects the request."""

    def __init__(self, *, sessions: SessionStore, users: UserRepository) -> None:
        self._sessions = sessions
        self._users = users

    def authorize(self, token: str | None) -> Identity:
        if not token:
            raise UnauthorizedError()

        user_id = self._sessions.resolve(token)
        if user_id is None:
            logger.debug("auth.gate: token not found or expired")
            raise UnauthorizedError()

        user = self._users.find_by_id(user_id)
        if user is None:
            logger.warning(f"auth.gate: session for missing user={user_id}, invalidating")
            self._sessions.invalidate(token)
            raise UnauthorizedError()

        return Identity(user_id=user.id, username=user.username)
