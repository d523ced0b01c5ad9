# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from blogapi.domain.users.entities import User
from blogapi.domain.users.exceptions import UserAlreadyExistsError
from blogapi.domain.users.repositories import PasswordHasher, UserRepository
from blogapi.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        # The repository enforces uniqueness too; this check only saves a hash.
        if self._users.find_by_username(username):
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        user = User(id=0, username=username, password_hash=hashed, created_at=datetime.now(UTC))
        persisted = self._users.add(user)
        logger.info(f"users.register: created user_id={persisted.id}")
        return persisted
