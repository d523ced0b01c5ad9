from __future__ import annotations

from datetime import UTC, datetime

import pytest

from blogapi.application.services.session_gate import SessionGate
from blogapi.domain.users.entities import Identity, User
from blogapi.domain.users.exceptions import UnauthorizedError
from blogapi.infrastructure.repositories.users.memory_session_store import InMemorySessionStore


class StaticUsers:
    def __init__(self, *users: User) -> None:
        self._by_id = {user.id: user for user in users}

    def find_by_id(self, user_id: int) -> User | None:
        return self._by_id.get(user_id)

    def remove(self, user_id: int) -> None:
        self._by_id.pop(user_id, None)


@pytest.fixture()
def alice() -> User:
    return User(id=7, username="alice", password_hash="hash", created_at=datetime.now(UTC))


@pytest.fixture()
def sessions() -> InMemorySessionStore:
    return InMemorySessionStore(ttl_seconds=3600)


def test_valid_token_yields_identity(alice: User, sessions: InMemorySessionStore) -> None:
    gate = SessionGate(sessions=sessions, users=StaticUsers(alice))
    token = sessions.create(alice.id).token

    assert gate.authorize(token) == Identity(user_id=7, username="alice")


@pytest.mark.parametrize("token", [None, "", "not-a-session"])
def test_missing_or_unknown_token_is_rejected(
    alice: User, sessions: InMemorySessionStore, token: str | None
) -> None:
    gate = SessionGate(sessions=sessions, users=StaticUsers(alice))

    with pytest.raises(UnauthorizedError) as exc_info:
        gate.authorize(token)

    assert exc_info.value.status == 401
    assert exc_info.value.to_dict() == {"error": "Unauthorized"}


def test_expired_token_is_rejected(alice: User) -> None:
    sessions = InMemorySessionStore(ttl_seconds=-1)
    gate = SessionGate(sessions=sessions, users=StaticUsers(alice))
    token = sessions.create(alice.id).token

    with pytest.raises(UnauthorizedError):
        gate.authorize(token)


def test_logged_out_token_is_rejected(alice: User, sessions: InMemorySessionStore) -> None:
    gate = SessionGate(sessions=sessions, users=StaticUsers(alice))
    token = sessions.create(alice.id).token
    sessions.invalidate(token)

    with pytest.raises(UnauthorizedError):
        gate.authorize(token)


def test_session_of_deleted_user_is_invalidated(
    alice: User, sessions: InMemorySessionStore
) -> None:
    users = StaticUsers(alice)
    gate = SessionGate(sessions=sessions, users=users)
    token = sessions.create(alice.id).token
    users.remove(alice.id)

    with pytest.raises(UnauthorizedError):
        gate.authorize(token)

    assert sessions.resolve(token) is None
