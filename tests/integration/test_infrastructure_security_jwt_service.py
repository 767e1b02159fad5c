"""Integration tests for JWTService (real PyJWT).

Tests cover:
- Issue/verify round trip with claims
- Expiry (freezegun), tampering, wrong key, missing token
- Constructor key length check
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.security.jwt_service import JWTService

SECRET = "s" * 32


@pytest.fixture
def token_service():
    return JWTService(secret_key=SECRET, expiration_hours=24)


@pytest.mark.integration
class TestIssueAndVerify:
    def test_verify_returns_issued_identity(self, token_service):
        account_id = uuid7()

        issued = token_service.issue_session_token(account_id, "ann@example.com")
        result = token_service.verify_session_token(issued.token)

        assert isinstance(result, Success)
        assert result.value.account_id == account_id
        assert result.value.email == "ann@example.com"
        assert result.value.expires_at == issued.expires_at

    def test_token_carries_unique_jti(self, token_service):
        account_id = uuid7()

        first = token_service.issue_session_token(account_id, "ann@example.com")
        second = token_service.issue_session_token(account_id, "ann@example.com")

        first_claims = jwt.decode(first.token, SECRET, algorithms=["HS256"])
        second_claims = jwt.decode(second.token, SECRET, algorithms=["HS256"])
        assert first_claims["jti"] != second_claims["jti"]
        assert first_claims["exp"] - first_claims["iat"] == 24 * 3600

    def test_expired_token(self, token_service):
        # Arrange
        with freeze_time("2026-01-01 12:00:00"):
            issued = token_service.issue_session_token(uuid7(), "ann@example.com")

        # Act
        with freeze_time("2026-01-02 12:00:01"):
            result = token_service.verify_session_token(issued.token)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_EXPIRED

    def test_token_valid_just_before_expiry(self, token_service):
        with freeze_time("2026-01-01 12:00:00"):
            issued = token_service.issue_session_token(uuid7(), "ann@example.com")

        with freeze_time("2026-01-02 11:59:59"):
            result = token_service.verify_session_token(issued.token)

        assert isinstance(result, Success)


@pytest.mark.integration
class TestRejectedTokens:
    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token(self, token_service, token):
        result = token_service.verify_session_token(token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_MISSING
        assert result.error.message == "Access token required"

    def test_tampered_payload(self, token_service):
        # Arrange
        issued = token_service.issue_session_token(uuid7(), "ann@example.com")
        header, _, signature = issued.token.split(".")
        forged_payload = jwt.encode(
            {"sub": str(uuid7()), "email": "eve@example.com", "iat": 0, "exp": 2**31},
            "another-key-another-key-another-key",
            algorithm="HS256",
        ).split(".")[1]

        # Act
        result = token_service.verify_session_token(
            f"{header}.{forged_payload}.{signature}"
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_token_signed_with_other_key(self, token_service):
        other = JWTService(secret_key="o" * 32)
        issued = other.issue_session_token(uuid7(), "ann@example.com")

        result = token_service.verify_session_token(issued.token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_garbage_token(self, token_service):
        result = token_service.verify_session_token("not.a.jwt")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_missing_email_claim(self, token_service):
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": str(uuid7()),
                "iat": int(now.timestamp()),
                "exp": int((now + timedelta(hours=1)).timestamp()),
            },
            SECRET,
            algorithm="HS256",
        )

        result = token_service.verify_session_token(token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_non_uuid_subject(self, token_service):
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "email": "ann@example.com",
                "iat": int(now.timestamp()),
                "exp": int((now + timedelta(hours=1)).timestamp()),
            },
            SECRET,
            algorithm="HS256",
        )

        result = token_service.verify_session_token(token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID


@pytest.mark.integration
class TestConstruction:
    def test_short_key_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService(secret_key="short")
