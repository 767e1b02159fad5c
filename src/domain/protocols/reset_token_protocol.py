"""Password reset token protocol for domain layer.

Reset tokens are 32 random bytes, hex encoded (64 characters), stored on
the account row, single use and time limited.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.core.errors import AuthenticationError
from src.core.result import Result
from src.domain.entities.account import Account


class ResetTokenProtocol(Protocol):
    """Reset token issuance and consumption interface."""

    def generate_token(self) -> str:
        """Return a new unguessable token (64 hex characters)."""
        ...

    def calculate_expiration(self) -> datetime:
        """Return the expiry instant for a token issued now (UTC)."""
        ...

    async def issue(self, account_id: UUID) -> str:
        """Generate a token, store it on the account (overwriting), return it.

        Raises:
            StorageError: If the token cannot be stored.
        """
        ...

    async def consume(
        self, token: str, new_password_hash: str
    ) -> Result[Account, AuthenticationError]:
        """Atomically install a new password hash and retire the token.

        Returns:
            Success(Account) if the token was live, otherwise
            Failure(AuthenticationError) with code RESET_TOKEN_INVALID.

        Raises:
            StorageError: If the database operation fails.
        """
        ...
