from __future__ import annotations

import pytest

from blogapi.application.services.password_hashing import WerkzeugPasswordHasher


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher("pbkdf2:sha256:1000")


def test_hash_is_salted_and_not_plaintext(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("secret123")
    second = hasher.hash("secret123")

    assert "secret123" not in first
    assert first != second
    assert first.startswith("pbkdf2:sha256:1000$")


def test_verify_accepts_match_and_rejects_mismatch(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("secret123")

    assert hasher.verify("secret123", hashed) is True
    assert hasher.verify("wrong", hashed) is False


@pytest.mark.parametrize(
    "bad_hash",
    ["", "not-a-hash", "nosuchmethod$salt$digest", "pbkdf2:sha256:notanumber$salt$abc"],
)
def test_verify_malformed_hash_returns_false(
    hasher: WerkzeugPasswordHasher, bad_hash: str
) -> None:
    assert hasher.verify("secret123", bad_hash) is False


def test_empty_password_is_hashable(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("")

    assert hasher.verify("", hashed) is True
    assert hasher.verify("x", hashed) is False


def test_default_method_is_scrypt() -> None:
    assert WerkzeugPasswordHasher().hash("pw").startswith("scrypt:")
