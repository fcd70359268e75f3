"""Shared fixtures: a fresh SQLite file and FastAPI test client per test.

The client is entered as a context manager so that the application
lifespan runs and the schema bootstrap (tables + admin seed) happens
before the first request, as it does in production.
"""

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.core.db import Store
from catalog_api.app.main import create_app

SECRET = "test-secret"
ADMIN_USERNAME = "root"
ADMIN_PASSWORD = "rootpass"


def make_settings(tmp_path, **overrides) -> Settings:
    values = dict(
        database_url=str(tmp_path / "catalog-test.db"),
        secret_key=SECRET,
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        enforce_admin_guard=False,
        cors_origins="*",
        frontend_dir=str(tmp_path / "no-frontend"),
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def store(settings):
    return Store(settings.database_url)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def guarded_client(tmp_path):
    """Client for an app with the admin guard wired to admin-only routes."""
    with TestClient(create_app(make_settings(tmp_path, enforce_admin_guard=True))) as c:
        yield c


def admin_token(client) -> str:
    res = client.post(
        "/api/admin/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert res.status_code == 200
    return res.json()["token"]


def user_token(client, username="alice", password="p1", role="user") -> str:
    client.post("/api/auth/register", json={"username": username, "password": password, "role": role})
    res = client.post("/api/auth/login", json={"username": username, "password": password})
    assert res.status_code == 200
    return res.json()["token"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
