"""Password reset token service.

Generates, stores and consumes password reset tokens held on the account
row.

Token Strategy:
    - 32-byte random hex string (64 characters, 256 bits of entropy)
    - Stored in plain text (already unguessable), unique per account row
    - Issuing overwrites any previous token (one live token per account)
    - Single use: consumption clears the token in the same UPDATE that
      installs the new password hash
    - Time limited (RESET_TOKEN_EXPIRE_MINUTES, default 30)
"""

import secrets
from datetime import UTC, datetime, timedelta
from uuid import UUID

from src.core.constants import RESET_TOKEN_EXPIRE_MINUTES_DEFAULT, TOKEN_BYTES
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.protocols.account_repository import AccountRepository


class PasswordResetTokenService:
    """Reset token issuance and consumption.

    Usage:
        service = PasswordResetTokenService(account_repo, expiration_minutes=30)

        token = await service.issue(account.id)
        # ... token delivered out of band ...
        result = await service.consume(token, new_password_hash)
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        expiration_minutes: int = RESET_TOKEN_EXPIRE_MINUTES_DEFAULT,
    ) -> None:
        """Initialize password reset token service.

        Args:
            account_repo: Store holding reset token state.
            expiration_minutes: Token lifetime in minutes (default: 30).
        """
        self._account_repo = account_repo
        self._expiration_minutes = expiration_minutes

    def generate_token(self) -> str:
        """Generate password reset token.

        Returns:
            64-character hex string (32 bytes of entropy).

        Example:
            >>> token = service.generate_token()
            >>> len(token)
            64
        """
        return secrets.token_hex(TOKEN_BYTES)

    def calculate_expiration(self) -> datetime:
        """Expiration timestamp (UTC) for a token issued now."""
        return datetime.now(UTC) + timedelta(minutes=self._expiration_minutes)

    async def issue(self, account_id: UUID) -> str:
        """Generate a token and store it on the account, replacing any old one.

        Raises:
            StorageError: If the token cannot be stored.
        """
        token = self.generate_token()
        await self._account_repo.set_reset_token(
            account_id, token, self.calculate_expiration()
        )
        return token

    async def consume(
        self, token: str, new_password_hash: str
    ) -> Result[Account, AuthenticationError]:
        """Install a new password hash if and only if the token is live.

        Blank tokens fail without a database round-trip. Other tokens are
        matched exactly as given (no trimming).

        Returns:
            Success(Account) on a live match, otherwise
            Failure(AuthenticationError) with RESET_TOKEN_INVALID.

        Raises:
            StorageError: If the database operation fails.
        """
        if not token or not token.strip():
            return Failure(error=self._invalid_token())

        account = await self._account_repo.consume_reset_token(
            token, new_password_hash, datetime.now(UTC)
        )
        if account is None:
            return Failure(error=self._invalid_token())
        return Success(value=account)

    @staticmethod
    def _invalid_token() -> AuthenticationError:
        return AuthenticationError(
            code=ErrorCode.RESET_TOKEN_INVALID,
            message="Invalid or expired reset token",
        )
