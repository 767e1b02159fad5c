"""Integration tests for PasswordResetTokenService against SQLite.

Tests cover:
- Token format and entropy
- Issue overwrites previous token
- Consume: success, replay, unknown, blank, expired (freezegun)
"""

from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from freezegun import freeze_time

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.security.password_reset_token_service import (
    PasswordResetTokenService,
)


@pytest_asyncio.fixture
async def account_repository(db_session):
    return AccountRepository(session=db_session)


@pytest_asyncio.fixture
async def account(account_repository):
    return await account_repository.create(
        name="Ann", email="ann@example.com", password_hash="$2b$04$original"
    )


@pytest.fixture
def reset_service(account_repository):
    return PasswordResetTokenService(account_repository, expiration_minutes=30)


@pytest.mark.integration
class TestTokenGeneration:
    def test_token_is_64_hex_chars(self, reset_service):
        token = reset_service.generate_token()

        assert len(token) == 64
        int(token, 16)

    def test_tokens_are_unique(self, reset_service):
        tokens = {reset_service.generate_token() for _ in range(100)}

        assert len(tokens) == 100


@pytest.mark.integration
class TestIssueAndConsume:
    @pytest.mark.asyncio
    async def test_consume_live_token(self, reset_service, account):
        token = await reset_service.issue(account.id)

        result = await reset_service.consume(token, "$2b$04$new")

        assert isinstance(result, Success)
        assert result.value.id == account.id
        assert result.value.password_hash == "$2b$04$new"

    @pytest.mark.asyncio
    async def test_replay_fails(self, reset_service, account):
        # Arrange
        token = await reset_service.issue(account.id)
        await reset_service.consume(token, "$2b$04$new")

        # Act
        result = await reset_service.consume(token, "$2b$04$again")

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESET_TOKEN_INVALID

    @pytest.mark.asyncio
    async def test_reissue_invalidates_previous_token(self, reset_service, account):
        old = await reset_service.issue(account.id)
        new = await reset_service.issue(account.id)

        stale = await reset_service.consume(old, "$2b$04$stale")
        fresh = await reset_service.consume(new, "$2b$04$fresh")

        assert isinstance(stale, Failure)
        assert isinstance(fresh, Success)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["", "   ", "0" * 64])
    async def test_unknown_or_blank_token(self, reset_service, account, token):
        result = await reset_service.consume(token, "$2b$04$new")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESET_TOKEN_INVALID
        assert result.error.message == "Invalid or expired reset token"

    @pytest.mark.asyncio
    async def test_token_with_surrounding_whitespace_does_not_match(
        self, reset_service, account
    ):
        token = await reset_service.issue(account.id)

        padded = await reset_service.consume(f" {token}\n", "$2b$04$padded")
        exact = await reset_service.consume(token, "$2b$04$exact")

        assert isinstance(padded, Failure)
        assert padded.error.code == ErrorCode.RESET_TOKEN_INVALID
        assert isinstance(exact, Success)

    @pytest.mark.asyncio
    async def test_expired_token(self, reset_service, account_repository, account):
        # Arrange: token issued 31 minutes ago with a 30 minute lifetime
        token = reset_service.generate_token()
        with freeze_time(datetime.now(UTC) - timedelta(minutes=31)):
            expires_at = reset_service.calculate_expiration()
        await account_repository.set_reset_token(account.id, token, expires_at)

        # Act
        result = await reset_service.consume(token, "$2b$04$late")

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESET_TOKEN_INVALID
        stored = await account_repository.find_by_id(account.id)
        assert stored.password_hash == "$2b$04$original"

    def test_expiration_uses_configured_lifetime(self, reset_service):
        with freeze_time("2026-03-01 10:00:00"):
            expires_at = reset_service.calculate_expiration()

        assert expires_at == datetime(2026, 3, 1, 10, 30, tzinfo=UTC)
