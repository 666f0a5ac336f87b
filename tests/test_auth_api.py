# tests/test_auth_api.py

from taskdesk.core.security import verify_token
from taskdesk.models import User, UserRole


def test_register_stores_hashed_password(client, db) -> None:
    response = client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "alice@example.com", "password": "Secret123"},
    )

    assert response.status_code == 201
    assert response.json() == {"message": "User registered successfully"}

    user = db.query(User).filter(User.email == "alice@example.com").one()
    assert user.username == "alice"
    assert user.role == UserRole.EMPLOYEE
    assert user.password_hash != "Secret123"
    assert user.password_hash.startswith("$2b$")
    assert len(user.id) == 24


def test_register_accepts_explicit_role(register_user, db) -> None:
    register_user(username="maria", role="manager")

    user = db.query(User).filter(User.username == "maria").one()
    assert user.role == UserRole.MANAGER


def test_register_duplicate_email_conflicts(client, register_user) -> None:
    register_user(username="alice", email="shared@example.com")

    response = client.post(
        "/api/auth/register",
        json={"username": "bob", "email": "shared@example.com", "password": "Secret123"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "User already exists"}


def test_register_duplicate_username_conflicts(client, register_user) -> None:
    register_user(username="alice")

    response = client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "other@example.com", "password": "Secret123"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "User already exists"


def test_register_rejects_unknown_role(client) -> None:
    response = client.post(
        "/api/auth/register",
        json={"username": "eve", "email": "eve@example.com", "password": "Secret123", "role": "owner"},
    )

    assert response.status_code == 400
    body = response.json()
    assert "body.role" in body["message"]
    assert body["errors"][0]["field"] == "body.role"


def test_register_requires_password(client) -> None:
    response = client.post(
        "/api/auth/register",
        json={"username": "eve", "email": "eve@example.com"},
    )

    assert response.status_code == 400
    assert "password" in response.json()["message"]


def test_login_returns_token_with_identity_claims(client, register_user, db, settings) -> None:
    register_user(username="alice", role="admin")
    stored = db.query(User).filter(User.username == "alice").one()

    response = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "Secret123"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["user"] == {
        "id": stored.id,
        "username": "alice",
        "email": "alice@example.com",
        "role": "admin",
    }

    claims = verify_token(body["token"], settings)
    assert claims["id"] == stored.id
    assert claims["role"] == "admin"
    assert claims["username"] == "alice"


def test_login_wrong_password_is_invalid_credentials(client, register_user) -> None:
    register_user(username="alice")

    response = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "wrong"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid credentials"}


def test_login_unknown_email_is_invalid_credentials(client) -> None:
    response = client.post(
        "/api/auth/login",
        json={"email": "nobody@example.com", "password": "Secret123"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid credentials"}


def test_login_with_mixed_case_email_as_registered(client, register_user) -> None:
    register_user(username="carol", email="Carol@Example.COM")

    response = client.post(
        "/api/auth/login",
        json={"email": "Carol@Example.COM", "password": "Secret123"},
    )

    assert response.status_code == 200, response.text
    assert response.json()["user"]["username"] == "carol"
