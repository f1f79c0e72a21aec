"""
Shared test configuration.

Environment is set BEFORE any app module is imported so the settings
singleton and the engine pick up the in-memory SQLite database.
"""

import os

os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"  # Lower rounds for faster tests
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

import app.db.base  # noqa: F401
from app.db.session import engine
from app.main import app as fastapi_app


@pytest.fixture
def db_session():
    """Fresh schema per test."""
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client(db_session):
    with TestClient(fastapi_app) as c:
        yield c


def _register_and_login(client: TestClient, email: str, password: str = "secret123") -> dict[str, str]:
    response = client.post("/api/v1/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    response = client.post("/api/v1/auth/token", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client) -> dict[str, str]:
    return _register_and_login(client, "alice@mail.com")


@pytest.fixture
def make_user(client):
    """Factory: create an account and return bearer auth headers for it."""
    def _make(email: str, password: str = "secret123") -> dict[str, str]:
        return _register_and_login(client, email, password)
    return _make
