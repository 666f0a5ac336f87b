# tests/conftest.py

import os

# Must be set before taskdesk is imported: the engine and settings are built at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from taskdesk.core.config import get_settings
from taskdesk.database import Base, SessionLocal, engine
from taskdesk.main import app


@pytest.fixture(autouse=True)
def database():
    """Fresh schema for every test (in-memory SQLite shared through StaticPool)"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def settings():
    return get_settings()


@pytest.fixture()
def client() -> TestClient:
    # Not used as a context manager: lifespan startup is not needed with the test schema
    return TestClient(app)


@pytest.fixture()
def register_user(client):
    """Register a user through the API and return the payload that was sent."""

    def _register(username="alice", email=None, password="Secret123", role=None):
        payload = {
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        }
        if role is not None:
            payload["role"] = role
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        return payload

    return _register


@pytest.fixture()
def make_user(client, register_user):
    """
    Register and log in a user.

    Returns (headers, user) where headers carry the bearer token and
    user is the login response's user object.
    """

    def _make(username="alice", role=None):
        payload = register_user(username=username, role=role)
        response = client.post(
            "/api/auth/login",
            json={"email": payload["email"], "password": payload["password"]},
        )
        assert response.status_code == 200, response.text
        body = response.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user"]

    return _make
