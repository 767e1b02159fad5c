"""API tests for credential endpoints.

Tests the complete HTTP request/response cycle:
- POST /api/auth/register
- POST /api/auth/login
- POST /api/auth/forgot-password
- POST /api/auth/reset-password

Architecture:
- Real app, real services, in-memory SQLite, bcrypt cost 4
- Envelope format: {"success", "message", "code"?, "data"?}
"""

import pytest

from tests.api.conftest import ANN


@pytest.mark.api
class TestRegister:
    """Tests for POST /api/auth/register."""

    def test_register_returns_public_account(self, client):
        response = client.post("/api/auth/register", json=ANN)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        account = body["data"]["account"]
        assert account["email"] == "ann@example.com"
        assert account["name"] == "Ann"
        assert account["id"]
        assert "password" not in response.text
        assert "password_hash" not in account

    def test_duplicate_email_differing_in_case_and_whitespace(self, client, register):
        register()

        response = client.post(
            "/api/auth/register",
            json={**ANN, "email": "  ANN@Example.com "},
        )

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "message": "Email already exists. Please use a different email.",
            "code": "email_already_exists",
        }

    def test_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "ann@example.com"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "missing_fields"
        assert body["message"] == "All fields are required (name, email, password)"

    def test_invalid_email(self, client):
        response = client.post("/api/auth/register", json={**ANN, "email": "ann"})

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_email"

    def test_malformed_body_is_enveloped(self, client):
        response = client.post("/api/auth/register", json={**ANN, "name": ["Ann"]})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "validation_failed"
        assert "error" not in body


@pytest.mark.api
class TestLogin:
    """Tests for POST /api/auth/login."""

    def test_login_returns_token(self, client, register):
        register()

        response = client.post(
            "/api/auth/login",
            json={"email": "Ann@Example.com", "password": "Secret123"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["token"].count(".") == 2
        assert data["expires_at"]
        assert data["account"]["email"] == "ann@example.com"

    @pytest.mark.parametrize(
        ("registered", "entered"),
        [
            ("ann@xn--bcher-kva.com", "ann@xn--bcher-kva.com"),
            ("ann@xn--bcher-kva.com", "ann@b\u00fccher.com"),
            ("e\u0301ve@example.com", "e\u0301ve@example.com"),
            ("e\u0301ve@example.com", "\u00e9ve@example.com"),
        ],
    )
    def test_login_with_internationalized_email(
        self, client, register, registered, entered
    ):
        register(email=registered)

        response = client.post(
            "/api/auth/login", json={"email": entered, "password": "Secret123"}
        )

        assert response.status_code == 200, response.text

    def test_forgot_password_finds_internationalized_email(self, client, register):
        register(email="ann@xn--bcher-kva.com")

        response = client.post(
            "/api/auth/forgot-password", json={"email": "ann@xn--bcher-kva.com"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["reset_token"]

    def test_unknown_email_and_wrong_password_are_indistinguishable(
        self, client, register
    ):
        register()

        wrong_password = client.post(
            "/api/auth/login",
            json={"email": "ann@example.com", "password": "Wrong123"},
        )
        unknown_email = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "Secret123"},
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["code"] == "invalid_credentials"

    def test_missing_password(self, client):
        response = client.post("/api/auth/login", json={"email": "ann@example.com"})

        assert response.status_code == 400
        assert response.json()["code"] == "missing_fields"


@pytest.mark.api
class TestPasswordReset:
    """Tests for forgot-password and reset-password."""

    def test_forgot_password_unknown_email_looks_like_success(self, client, register):
        register()

        known = client.post("/api/auth/forgot-password", json={"email": ANN["email"]})
        unknown = client.post(
            "/api/auth/forgot-password", json={"email": "nobody@example.com"}
        )

        assert known.status_code == unknown.status_code == 200
        assert known.json()["message"] == unknown.json()["message"]
        assert "data" not in unknown.json()
        assert len(known.json()["data"]["reset_token"]) == 64

    def test_reset_with_unknown_token(self, client):
        response = client.post(
            "/api/auth/reset-password",
            json={"token": "0" * 64, "new_password": "NewPass1"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "reset_token_invalid"

    def test_reset_missing_fields(self, client):
        response = client.post("/api/auth/reset-password", json={"token": "abc"})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "missing_fields"
        assert body["message"] == "All fields are required (token, new_password)"

    def test_full_reset_flow(self, client, register):
        """Register, fail and pass login, reset, then only the new password works."""
        # Register
        register()

        # Wrong password
        wrong = client.post(
            "/api/auth/login", json={"email": ANN["email"], "password": "Nope1234"}
        )
        assert wrong.status_code == 401

        # Correct password
        ok = client.post(
            "/api/auth/login", json={"email": ANN["email"], "password": "Secret123"}
        )
        assert ok.status_code == 200
        assert ok.json()["data"]["token"]

        # Forgot password
        forgot = client.post("/api/auth/forgot-password", json={"email": ANN["email"]})
        assert forgot.status_code == 200
        token = forgot.json()["data"]["reset_token"]

        # Reset (camelCase field accepted)
        reset = client.post(
            "/api/auth/reset-password",
            json={"token": token, "newPassword": "NewPass1"},
        )
        assert reset.status_code == 200
        assert reset.json()["success"] is True

        # Old password fails, new password works
        old = client.post(
            "/api/auth/login", json={"email": ANN["email"], "password": "Secret123"}
        )
        new = client.post(
            "/api/auth/login", json={"email": ANN["email"], "password": "NewPass1"}
        )
        assert old.status_code == 401
        assert new.status_code == 200

        # Token cannot be replayed
        replay = client.post(
            "/api/auth/reset-password",
            json={"token": token, "new_password": "Another1"},
        )
        assert replay.status_code == 400
        assert replay.json()["code"] == "reset_token_invalid"

    def test_second_forgot_password_invalidates_first_token(self, client, register):
        register()
        first = client.post("/api/auth/forgot-password", json={"email": ANN["email"]})
        second = client.post("/api/auth/forgot-password", json={"email": ANN["email"]})

        stale = client.post(
            "/api/auth/reset-password",
            json={
                "token": first.json()["data"]["reset_token"],
                "new_password": "NewPass1",
            },
        )
        fresh = client.post(
            "/api/auth/reset-password",
            json={
                "token": second.json()["data"]["reset_token"],
                "new_password": "NewPass1",
            },
        )

        assert stale.status_code == 400
        assert fresh.status_code == 200
