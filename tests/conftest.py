"""Pytest fixtures: a fresh app and in-memory SQLite database per test."""

from __future__ import annotations

import pytest

from api import create_app
from api.config import TestingConfig
from services.auth_service import AuthService


@pytest.fixture()
def app():
    """Flask app on TestingConfig; the StaticPool keeps the in-memory db alive."""
    app = create_app(TestingConfig)
    yield app
    app.extensions["storage"].dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def app_ctx(app):
    with app.app_context():
        yield


@pytest.fixture()
def storage(app, app_ctx):
    return app.extensions["storage"]


@pytest.fixture()
def auth_service(storage) -> AuthService:
    return AuthService(storage)


@pytest.fixture()
def registered_user(client):
    """Create alice/secret1 through the API and return the credentials."""
    creds = {"login": "alice", "senha": "secret1"}
    resp = client.post("/api/criar-conta", json=creds)
    assert resp.status_code == 201
    return {**creds, "id": resp.get_json()["id"]}


@pytest.fixture()
def tokens(client, registered_user):
    resp = client.post(
        "/api/login",
        json={"login": registered_user["login"], "senha": registered_user["senha"]},
    )
    assert resp.status_code == 200
    return resp.get_json()


@pytest.fixture()
def auth_headers(tokens):
    return {"Authorization": f"Bearer {tokens['token']}"}
