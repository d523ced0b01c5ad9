# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from datetime import UTC, datetime, timedelta
from threading import Lock

from blogapi.domain.users.entities import SESSION_TOKEN_BYTES, SessionToken
from blogapi.domain.users.repositories import SessionStore
from blogapi.shared.logging import logger


class InMemorySessionStore(SessionStore):
    """Process-local sessions. Lost on restart and not shared between workers."""

    def __init__(self, *, ttl_seconds: int) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._sessions: dict[str, SessionToken] = {}
        self._lock = Lock()

    def _drop_expired(self, now: datetime) -> int:
        # Caller holds the lock.
        expired = [t for t, s in self._sessions.items() if s.expires_at <= now]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def create(self, user_id: int) -> SessionToken:
        now = datetime.now(UTC)
        session = SessionToken(
            user_id=user_id,
            token=secrets.token_urlsafe(SESSION_TOKEN_BYTES),
            expires_at=now + self._ttl,
        )
        with self._lock:
            removed = self._drop_expired(now)
            self._sessions[session.token] = session
        if removed:
            logger.info(f"sessions.create: swept {removed} expired in-memory sessions")
        logger.info(f"Issued in-memory session for user={user_id} tok={session.token[:8]}…")
        return session

    def resolve(self, token: str) -> int | None:
        if not token:
            return None
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.expires_at <= datetime.now(UTC):
                del self._sessions[token]
                return None
            return session.user_id

    def invalidate(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        with self._lock:
            return self._drop_expired(datetime.now(UTC))
