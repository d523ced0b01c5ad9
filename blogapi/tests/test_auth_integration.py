from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask.testing import FlaskClient

from blogapi.app import create_app
from blogapi.infrastructure.container import Container
from blogapi.infrastructure.db import ENGINE, Base, SessionLocal
from blogapi.infrastructure.db.models import SessionToken, User
from blogapi.shared.config import AppConfig, SecurityConfig


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    SessionLocal.remove()
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def client() -> Iterator[FlaskClient]:
    app = create_app()
    with app.test_client() as client:
        yield client


def _register_and_login(client: FlaskClient, username: str = "alice") -> None:
    assert client.post("/register", json={"username": username, "password": "pw1"}).status_code == 201
    assert client.post("/login", json={"username": username, "password": "pw1"}).status_code == 200


def test_register_login_and_access_posts(client: FlaskClient) -> None:
    register = client.post("/register", json={"username": "alice", "password": "pw1"})
    assert register.status_code == 201
    assert register.get_json() == {"message": "User registered successfully"}

    wrong = client.post("/login", json={"username": "alice", "password": "nope"})
    assert wrong.status_code == 401
    assert wrong.get_json() == {"error": "Invalid username or password"}

    unknown = client.post("/login", json={"username": "bob", "password": "pw1"})
    assert unknown.status_code == 401
    assert unknown.get_json() == wrong.get_json()

    denied = client.get("/posts")
    assert denied.status_code == 401
    assert denied.get_json() == {"error": "Unauthorized"}

    login = client.post("/login", json={"username": "alice", "password": "pw1"})
    assert login.status_code == 200
    assert "blog_session=" in login.headers["Set-Cookie"]
    assert client.get_cookie("blog_session")

    posts = client.get("/posts")
    assert posts.status_code == 200
    assert posts.get_json() == []


def test_duplicate_registration_returns_409(client: FlaskClient) -> None:
    assert client.post("/register", json={"username": "alice", "password": "pw1"}).status_code == 201

    duplicate = client.post("/register", json={"username": "alice", "password": "other"})

    assert duplicate.status_code == 409
    assert duplicate.get_json() == {"error": "Username already exists"}
    assert client.post("/login", json={"username": "alice", "password": "pw1"}).status_code == 200


def test_password_is_stored_hashed(client: FlaskClient) -> None:
    client.post("/register", json={"username": "alice", "password": "pw1"})

    with SessionLocal() as session:
        user = session.query(User).filter_by(username="alice").one()
        assert user.password_hash != "pw1"
        assert "pw1" not in user.password_hash


def test_posts_crud(client: FlaskClient) -> None:
    _register_and_login(client)

    created = client.post("/posts", json={"title": "Hello", "content": "First"})
    assert created.status_code == 201
    post_id = created.get_json()["id"]
    assert created.get_json()["message"] == "Post created successfully"

    [post] = client.get("/posts").get_json()
    assert post["title"] == "Hello"
    assert post["author"]["username"] == "alice"

    updated = client.put(f"/posts/{post_id}", json={"content": "Edited"})
    assert updated.status_code == 200
    assert updated.get_json() == {"message": "Post updated successfully"}
    assert client.get("/posts").get_json()[0]["content"] == "Edited"

    deleted = client.delete(f"/posts/{post_id}")
    assert deleted.status_code == 200
    assert client.get("/posts").get_json() == []

    missing = client.delete(f"/posts/{post_id}")
    assert missing.status_code == 404
    assert missing.get_json() == {"error": "Post not found"}


def test_comments_crud(client: FlaskClient) -> None:
    _register_and_login(client)
    post_id = client.post("/posts", json={"title": "Hello", "content": "First"}).get_json()["id"]

    created = client.post("/comments", json={"content": "Nice", "post": post_id})
    assert created.status_code == 201
    comment_id = created.get_json()["id"]

    [comment] = client.get("/comments").get_json()
    assert comment == {"id": comment_id, "content": "Nice", "post": {"id": post_id, "title": "Hello"}}

    assert client.put(f"/comments/{comment_id}", json={"content": "Edited"}).status_code == 200
    assert client.get("/comments").get_json()[0]["content"] == "Edited"

    client.delete(f"/posts/{post_id}")
    assert client.get("/comments").get_json()[0]["post"] is None

    assert client.delete(f"/comments/{comment_id}").status_code == 200
    missing = client.put(f"/comments/{comment_id}", json={"content": "x"})
    assert missing.status_code == 404
    assert missing.get_json() == {"error": "Comment not found"}


def test_comment_on_unknown_post_returns_404(client: FlaskClient) -> None:
    _register_and_login(client)

    response = client.post("/comments", json={"content": "Nice", "post": 999})

    assert response.status_code == 404
    assert response.get_json() == {"error": "Post not found"}


def test_invalid_post_body_returns_422(client: FlaskClient) -> None:
    _register_and_login(client)

    response = client.post("/posts", json={"title": "Missing content"})

    assert response.status_code == 422
    assert response.get_json() == {"error": "Invalid request body"}


def test_logout_revokes_session(client: FlaskClient) -> None:
    _register_and_login(client)
    token = client.get_cookie("blog_session").value

    logout = client.post("/logout")
    assert logout.status_code == 200
    assert client.get("/posts").status_code == 401

    replayed = client.get("/posts", headers={"Authorization": f"Bearer {token}"})
    assert replayed.status_code == 401

    with SessionLocal() as session:
        assert session.query(SessionToken).count() == 0


def test_health_reports_database(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
    assert response.headers["X-Frame-Options"] == "DENY"


def test_empty_password_round_trip(client: FlaskClient) -> None:
    register = client.post("/register", json={"username": "carol", "password": ""})
    assert register.status_code == 201

    login = client.post("/login", json={"username": "carol", "password": ""})
    assert login.status_code == 200

    wrong = client.post("/login", json={"username": "carol", "password": "guess"})
    assert wrong.status_code == 401
    assert wrong.get_json() == {"error": "Invalid username or password"}


def test_app_uses_cookie_name_from_injected_config() -> None:
    config = AppConfig(security=SecurityConfig(cookie_name="alt_session"))
    app = create_app(Container(config=config, engine=ENGINE, session_factory=SessionLocal))

    with app.test_client() as client:
        _register_and_login(client)
        assert client.get_cookie("alt_session")
        assert client.get_cookie("blog_session") is None

        assert client.get("/posts").status_code == 200

        assert client.post("/logout").status_code == 200
        assert client.get("/posts").status_code == 401
