# tests/test_security.py

from datetime import timedelta
import time

import pytest
from jose import jwt

from taskdesk.core.config import Settings
from taskdesk.core.exceptions import InvalidToken, MissingToken
from taskdesk.core.security import (
    create_access_token,
    hash_password,
    verify_password,
    verify_token,
)


def test_hash_password_is_salted_and_verifiable() -> None:
    first = hash_password("Secret123", rounds=4)
    second = hash_password("Secret123", rounds=4)

    assert first != "Secret123"
    assert first != second  # different salt each time
    assert first.startswith("$2b$04$")
    assert verify_password("Secret123", first)
    assert verify_password("Secret123", second)
    assert not verify_password("secret123", first)


def test_verify_password_rejects_corrupted_hash() -> None:
    assert verify_password("Secret123", "not-a-bcrypt-hash") is False


def test_token_round_trip_carries_identity_claims(settings: Settings) -> None:
    token = create_access_token({"id": "u1", "role": "manager", "username": "alice"}, settings)

    claims = verify_token(token, settings)

    assert claims["id"] == "u1"
    assert claims["role"] == "manager"
    assert claims["username"] == "alice"


def test_token_expires_after_configured_lifetime(settings: Settings) -> None:
    issued_at = int(time.time())
    token = create_access_token({"id": "u1", "role": "employee", "username": "alice"}, settings)

    claims = jwt.get_unverified_claims(token)

    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 24 * 60
    assert abs(claims["exp"] - issued_at - 24 * 3600) <= 2


def test_verify_token_without_token_raises_missing(settings: Settings) -> None:
    with pytest.raises(MissingToken):
        verify_token(None, settings)
    with pytest.raises(MissingToken):
        verify_token("", settings)


def test_verify_token_rejects_garbage(settings: Settings) -> None:
    with pytest.raises(InvalidToken):
        verify_token("definitely.not.a-token", settings)


def test_verify_token_rejects_expired(settings: Settings) -> None:
    token = create_access_token(
        {"id": "u1", "role": "employee", "username": "alice"},
        settings,
        expires_delta=timedelta(seconds=-10),
    )
    with pytest.raises(InvalidToken):
        verify_token(token, settings)


def test_verify_token_rejects_foreign_signature(settings: Settings) -> None:
    other = Settings()
    other.SECRET_KEY = "someone-else"
    token = create_access_token({"id": "u1", "role": "employee", "username": "alice"}, other)

    with pytest.raises(InvalidToken):
        verify_token(token, settings)


def test_verify_token_requires_id_claim(settings: Settings) -> None:
    token = create_access_token({"role": "employee", "username": "alice"}, settings)
    with pytest.raises(InvalidToken):
        verify_token(token, settings)
