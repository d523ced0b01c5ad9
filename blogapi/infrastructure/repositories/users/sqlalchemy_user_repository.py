# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blogapi.domain.users.entities import SESSION_TOKEN_BYTES
from blogapi.domain.users.entities import SessionToken as DomainSessionToken
from blogapi.domain.users.entities import User as DomainUser
from blogapi.domain.users.exceptions import UserAlreadyExistsError
from blogapi.domain.users.repositories import SessionStore, UserRepository
from blogapi.infrastructure.db.models import SessionToken, User, token_default_exp
from blogapi.infrastructure.unit_of_work import SessionFactory, unit_of_work_scope
from blogapi.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.find_by_username") as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.find_by_id") as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with unit_of_work_scope(self._session_factory, "users.add") as session:
            row = User(
                username=user.username,
                password_hash=user.password_hash,
                created_at=user.created_at,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                # Lost a race with a concurrent registration of the same name.
                raise UserAlreadyExistsError() from exc
            return _to_domain(row)


class SqlAlchemySessionTokenRepository(SessionStore):
    def __init__(self, session_factory: SessionFactory, *, ttl_seconds: int) -> None:
        self._session_factory = session_factory
        self._ttl_seconds = ttl_seconds

    def create(self, user_id: int) -> DomainSessionToken:
        token_value = secrets.token_urlsafe(SESSION_TOKEN_BYTES)
        expires_at = token_default_exp(self._ttl_seconds)
        with unit_of_work_scope(self._session_factory, "sessions.create") as session:
            # Every login sweeps sessions that have already expired.
            removed = self._delete_expired(session)
            session.add(SessionToken(user_id=user_id, token=token_value, expires_at=expires_at))
        if removed:
            logger.info(f"sessions.create: swept {removed} expired sessions")
        logger.info(
            f"Issued session for user={user_id} exp={expires_at.isoformat()} tok={token_value[:8]}…"
        )
        return DomainSessionToken(user_id=user_id, token=token_value, expires_at=expires_at)

    def resolve(self, token: str) -> int | None:
        if not token or len(token) > 256:
            return None
        with unit_of_work_scope(self._session_factory, "sessions.resolve") as session:
            row = (
                session.query(SessionToken.user_id)
                .filter(
                    SessionToken.token == token,
                    SessionToken.expires_at > datetime.now(UTC),
                )
                .first()
            )
            return row.user_id if row else None

    def invalidate(self, token: str) -> None:
        if not token:
            return
        with unit_of_work_scope(self._session_factory, "sessions.invalidate") as session:
            session.query(SessionToken).filter(SessionToken.token == token).delete()

    @staticmethod
    def _delete_expired(session: Session) -> int:
        removed = (
            session.query(SessionToken)
            .filter(SessionToken.expires_at <= datetime.now(UTC))
            .delete(synchronize_session=False)
        )
        return int(removed)

    def purge_expired(self) -> int:
        with unit_of_work_scope(self._session_factory, "sessions.purge_expired") as session:
            removed = self._delete_expired(session)
        if removed:
            logger.info(f"sessions.purge_expired: removed {removed} sessions")
        return removed
