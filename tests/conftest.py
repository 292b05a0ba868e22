"""Shared fixtures: an app on a private in-memory SQLite store."""

import pytest
from fastapi.testclient import TestClient

from feedback_service.core.config import Settings
from feedback_service.main import create_app


@pytest.fixture
def settings():
    # cheap hash so the suite stays fast; ignore any local .env
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        password_hash_method="pbkdf2:sha256:1000",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    """ORM session on the same store the client talks to."""
    session = app.state.db.SessionLocal()
    yield session
    session.close()


def signup(client, username="alice", email="a@x.com", password="secret123"):
    return client.post(
        "/api/signup",
        json={"username": username, "email": email, "password": password},
    )


def login(client, email="a@x.com", password="secret123"):
    return client.post("/api/login", json={"email": email, "password": password})


@pytest.fixture
def lenient_client(app):
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
