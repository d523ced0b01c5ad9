# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from blogapi.domain.users.entities import SessionToken
from blogapi.domain.users.exceptions import InvalidCredentialsError
from blogapi.domain.users.repositories import PasswordHasher, SessionStore, UserRepository
from blogapi.shared.logging import logger


class LoginUserUseCase:
    """Verify credentials and open a session.

    Unknown usernames are checked against a throwaway hash so that both
    failure paths cost one hash verification. This narrows, but does not
    close, the timing gap between them.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionStore,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher
        # Hashed once here; no login request pays for it.
        self._decoy_hash = password_hasher.hash(secrets.token_urlsafe(16))

    def authenticate(self, username: str, password: str) -> int:
        user = self._users.find_by_username(username)
        if user is None:
            self._password_hasher.verify(password, self._decoy_hash)
            logger.info("users.login: rejected (invalid credentials)")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info("users.login: rejected (invalid credentials)")
            raise InvalidCredentialsError()

        return user.id

    def execute(self, username: str, password: str) -> SessionToken:
        user_id = self.authenticate(username, password)
        token = self._sessions.create(user_id)
        logger.info(f"users.login: ok user_id={user_id}")
        return token
