"""Shared fixtures: an in-memory database and helpers to obtain credentials."""
import os

# Must be set before the application settings are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["COOKIE_SECURE"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session

import sparkboard.models  # noqa: F401
from sparkboard.db.session import get_engine
from sparkboard.main import app

DEFAULT_PASSWORD = "secret1"


@pytest.fixture
def client():
    engine = get_engine()
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client):
    with Session(get_engine()) as session:
        yield session


def register(client, email, password=DEFAULT_PASSWORD, **extra):
    return client.post("/api/auth/register", json={"email": email, "password": password, **extra})


def login(client, email, password=DEFAULT_PASSWORD):
    response = client.post("/api/login", json={"email": email, "password": password})
    # Keep the cookie jar empty so each request states its own credential
    client.cookies.clear()
    return response


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(client):
    """Register and log in a user, returning (user json, auth headers)."""
    def _make_user(email, password=DEFAULT_PASSWORD, **extra):
        created = register(client, email, password, **extra)
        assert created.status_code == 201, created.text
        token = login(client, email, password).json()["token"]
        return created.json(), bearer(token)
    return _make_user


@pytest.fixture
def alice(make_user):
    return make_user("alice@example.com")


@pytest.fixture
def bob(make_user):
    return make_user("bob@example.com")
