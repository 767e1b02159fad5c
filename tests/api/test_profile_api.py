"""API tests for profile endpoints and the bearer-token dependency.

Tests cover:
- 401 without token, 403 with invalid or expired token
- Profile read/update, avatar update
- Address create/list/update and cross-account isolation
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from uuid_extensions import uuid7

from src.core.config import settings
from src.core.container import get_credential_service, get_token_service
from src.infrastructure.security.jwt_service import JWTService
from src.main import app

ADDRESS = {
    "type": "home",
    "name": "Ann",
    "phone": "555-0100",
    "address_line1": "1 Main St",
    "city": "Springfield",
    "state": "IL",
    "pincode": "62701",
}


@pytest.mark.api
class TestIdentityMiddleware:
    """Bearer token handling on protected routes."""

    def test_missing_token_is_401(self, client):
        response = client.get("/api/auth/profile")

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Access token required",
            "code": "token_missing",
        }

    def test_non_bearer_scheme_is_401(self, client):
        response = client.get(
            "/api/auth/profile", headers={"Authorization": "Basic abc"}
        )

        assert response.status_code == 401

    def test_garbage_token_is_403(self, client):
        response = client.get(
            "/api/auth/profile", headers={"Authorization": "Bearer not.a.token"}
        )

        assert response.status_code == 403
        assert response.json()["code"] == "token_invalid"
        assert response.json()["message"] == "Invalid or expired token"

    def test_token_signed_with_other_key_is_403(self, client):
        forged = JWTService(secret_key="x" * 32).issue_session_token(
            uuid7(), "ann@example.com"
        )

        response = client.get(
            "/api/auth/profile",
            headers={"Authorization": f"Bearer {forged.token}"},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "token_invalid"

    def test_expired_token_is_403(self, client):
        issued_at = datetime.now(UTC) - timedelta(days=2)
        expired = jwt.encode(
            {
                "sub": str(uuid7()),
                "email": "ann@example.com",
                "iat": int(issued_at.timestamp()),
                "exp": int((issued_at + timedelta(days=1)).timestamp()),
            },
            settings.signing_key,
            algorithm="HS256",
        )

        response = client.get(
            "/api/auth/profile",
            headers={"Authorization": f"Bearer {expired}"},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "token_expired"

    def test_valid_token_for_deleted_account_is_404(self, client):
        orphan = get_token_service().issue_session_token(uuid7(), "ghost@example.com")

        response = client.get(
            "/api/auth/profile",
            headers={"Authorization": f"Bearer {orphan.token}"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "account_not_found"

    def test_token_check_does_not_build_credential_service(self, client, auth_headers):
        headers = auth_headers()

        def _unavailable():
            raise AssertionError("credential service resolved for a token check")

        app.dependency_overrides[get_credential_service] = _unavailable

        response = client.get("/api/auth/profile", headers=headers)

        assert response.status_code == 200
        assert response.json()["data"]["account"]["email"] == "ann@example.com"


@pytest.mark.api
class TestProfile:
    """Tests for /api/auth/profile and /profile/avatar."""

    def test_get_profile(self, client, auth_headers):
        headers = auth_headers()

        response = client.get("/api/auth/profile", headers=headers)

        assert response.status_code == 200
        account = response.json()["data"]["account"]
        assert account["email"] == "ann@example.com"
        assert "password_hash" not in account

    def test_update_profile_fields(self, client, auth_headers):
        headers = auth_headers()

        response = client.put(
            "/api/auth/profile",
            headers=headers,
            json={"name": "Ann Lee", "phone": "555-0199"},
        )

        assert response.status_code == 200
        account = response.json()["data"]["account"]
        assert account["name"] == "Ann Lee"
        assert account["phone"] == "555-0199"
        assert account["email"] == "ann@example.com"

    def test_update_profile_email_taken(self, client, register, auth_headers):
        register(name="Bob", email="bob@example.com")
        headers = auth_headers()

        response = client.put(
            "/api/auth/profile", headers=headers, json={"email": "BOB@example.com"}
        )

        assert response.status_code == 409
        assert response.json()["code"] == "email_already_exists"

    def test_update_profile_empty_body(self, client, auth_headers):
        response = client.put("/api/auth/profile", headers=auth_headers(), json={})

        assert response.status_code == 400
        assert response.json()["code"] == "missing_fields"

    def test_update_avatar(self, client, auth_headers):
        response = client.put(
            "/api/auth/profile/avatar",
            headers=auth_headers(),
            json={"avatar": "avatars/ann.png"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["account"]["avatar"] == "avatars/ann.png"


@pytest.mark.api
class TestAddresses:
    """Tests for /api/auth/profile/addresses."""

    def test_create_and_list(self, client, auth_headers):
        headers = auth_headers()

        created = client.post(
            "/api/auth/profile/addresses", headers=headers, json=ADDRESS
        )
        listed = client.get("/api/auth/profile/addresses", headers=headers)

        assert created.status_code == 201
        address = created.json()["data"]["address"]
        assert address["type"] == "home"
        assert listed.status_code == 200
        assert [a["id"] for a in listed.json()["data"]["addresses"]] == [address["id"]]

    def test_update_own_address(self, client, auth_headers):
        headers = auth_headers()
        created = client.post(
            "/api/auth/profile/addresses", headers=headers, json=ADDRESS
        ).json()["data"]["address"]

        response = client.put(
            f"/api/auth/profile/addresses/{created['id']}",
            headers=headers,
            json={**ADDRESS, "city": "Chicago"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["address"]["city"] == "Chicago"

    def test_cannot_touch_another_accounts_address(self, client, auth_headers):
        # Arrange: Ann creates an address
        ann_headers = auth_headers()
        ann_address = client.post(
            "/api/auth/profile/addresses", headers=ann_headers, json=ADDRESS
        ).json()["data"]["address"]
        bob_headers = auth_headers(
            email="bob@example.com", password="BobPass1", name="Bob"
        )

        # Act: Bob tries to update it
        response = client.put(
            f"/api/auth/profile/addresses/{ann_address['id']}",
            headers=bob_headers,
            json={**ADDRESS, "city": "Hijacked"},
        )

        # Assert: reported as not found; Ann's data unchanged, Bob sees nothing
        assert response.status_code == 404
        assert response.json()["code"] == "address_not_found"
        ann_list = client.get("/api/auth/profile/addresses", headers=ann_headers)
        assert ann_list.json()["data"]["addresses"][0]["city"] == "Springfield"
        bob_list = client.get("/api/auth/profile/addresses", headers=bob_headers)
        assert bob_list.json()["data"]["addresses"] == []

    def test_invalid_type(self, client, auth_headers):
        response = client.post(
            "/api/auth/profile/addresses",
            headers=auth_headers(),
            json={**ADDRESS, "type": "castle"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "validation_failed"
