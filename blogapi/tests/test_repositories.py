from __future__ import annotations

from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import OperationalError

from blogapi.domain.users.entities import User
from blogapi.domain.users.exceptions import UserAlreadyExistsError
from blogapi.infrastructure.repositories.blog.sqlalchemy_blog_repository import (
    SqlAlchemyCommentRepository,
    SqlAlchemyPostRepository,
)
from blogapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from blogapi.shared.errors import StorageUnavailableError


def _new_user(username: str) -> User:
    return User(id=0, username=username, password_hash="hash", created_at=datetime.now(UTC))


@pytest.fixture()
def users(session_factory) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(session_factory)


@pytest.fixture()
def posts(session_factory) -> SqlAlchemyPostRepository:
    return SqlAlchemyPostRepository(session_factory)


@pytest.fixture()
def comments(session_factory) -> SqlAlchemyCommentRepository:
    return SqlAlchemyCommentRepository(session_factory)


@pytest.fixture()
def author(users: SqlAlchemyUserRepository) -> User:
    return users.add(_new_user("alice"))


def test_add_user_assigns_id_and_is_findable(users: SqlAlchemyUserRepository) -> None:
    stored = users.add(_new_user("alice"))

    assert stored.id > 0
    found = users.find_by_username("alice")
    assert found is not None and found.id == stored.id
    assert found.password_hash == "hash"
    by_id = users.find_by_id(stored.id)
    assert by_id is not None and by_id.username == "alice"


def test_duplicate_username_raises(users: SqlAlchemyUserRepository) -> None:
    users.add(_new_user("alice"))

    with pytest.raises(UserAlreadyExistsError):
        users.add(_new_user("alice"))


def test_usernames_are_case_sensitive(users: SqlAlchemyUserRepository) -> None:
    users.add(_new_user("alice"))
    other = users.add(_new_user("Alice"))

    found = users.find_by_username("Alice")
    assert found is not None and found.id == other.id
    assert users.find_by_username("ALICE") is None


def test_post_crud(posts: SqlAlchemyPostRepository, author: User) -> None:
    created = posts.add("Hello", "First post", author.id)

    [listed] = posts.list_all()
    assert listed.to_dict() == {
        "id": created.id,
        "title": "Hello",
        "content": "First post",
        "author": {"id": author.id, "username": "alice"},
    }

    assert posts.update(created.id, title="Hello again", content=None) is True
    assert posts.list_all()[0].title == "Hello again"
    assert posts.list_all()[0].content == "First post"

    assert posts.delete(created.id) is True
    assert posts.list_all() == []


def test_post_update_and_delete_report_missing(posts: SqlAlchemyPostRepository) -> None:
    assert posts.exists(999) is False
    assert posts.update(999, title="x", content=None) is False
    assert posts.delete(999) is False


def test_comment_crud(
    posts: SqlAlchemyPostRepository, comments: SqlAlchemyCommentRepository, author: User
) -> None:
    post = posts.add("Hello", "body", author.id)
    created = comments.add("Nice post", post.id)

    [listed] = comments.list_all()
    assert listed.to_dict() == {
        "id": created.id,
        "content": "Nice post",
        "post": {"id": post.id, "title": "Hello"},
    }

    assert comments.update(created.id, content="Edited") is True
    assert comments.list_all()[0].content == "Edited"
    assert comments.update(999, content="x") is False

    assert comments.delete(created.id) is True
    assert comments.delete(created.id) is False


def test_deleting_post_keeps_comments_with_null_post(
    posts: SqlAlchemyPostRepository, comments: SqlAlchemyCommentRepository, author: User
) -> None:
    post = posts.add("Hello", "body", author.id)
    comments.add("Orphan soon", post.id)

    posts.delete(post.id)

    [orphan] = comments.list_all()
    assert orphan.post is None
    assert orphan.to_dict()["post"] is None


def test_driver_failure_surfaces_as_storage_error(
    posts: SqlAlchemyPostRepository, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _boom(*_args, **_kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    monkeypatch.setattr("sqlalchemy.orm.Query.all", _boom)

    with pytest.raises(StorageUnavailableError) as exc_info:
        posts.list_all()

    assert exc_info.value.context == {"operation": "posts.list"}
