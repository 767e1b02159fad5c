"""Fixtures for API tests.

Each ``client`` runs the real application lifespan against the cached
in-memory SQLite database. Closing the client disposes the engine, which
discards the in-memory data, so every test starts with empty tables.
"""

import pytest
from fastapi.testclient import TestClient

from src.main import app

ANN = {"name": "Ann", "email": "ann@example.com", "password": "Secret123"}


@pytest.fixture
def client():
    """TestClient for the real app with lifespan."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register an account and return the response JSON."""

    def _register(**overrides):
        payload = {**ANN, **overrides}
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers(client, register):
    """Register (if needed) and log in; return a bearer header dict."""

    def _auth_headers(email=ANN["email"], password=ANN["password"], **overrides):
        register(email=email, password=password, **overrides)
        response = client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['data']['token']}"}

    return _auth_headers
