"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture. Infrastructure layer
implements this protocol (SQLAlchemy adapter).

All lookups are exact match. Callers normalize email before querying.
Implementations never retry and raise StorageError on backend failure.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.account import Account


class AccountRepository(Protocol):
    """Account repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def create(self, name: str, email: str, password_hash: str) -> Account:
        """Insert a new account.

        Args:
            name: Display name (already trimmed).
            email: Normalized email.
            password_hash: Bcrypt hash (never empty).

        Returns:
            The stored Account with id and timestamps.

        Raises:
            EmailAlreadyStoredError: If the unique email constraint fires.
            StorageError: If the database operation fails.
        """
        ...

    async def find_by_email(self, email: str) -> Account | None: ...

    async def find_by_id(self, account_id: UUID) -> Account | None: ...

    async def find_by_reset_token(self, token: str) -> Account | None: ...

    async def exists_by_email(self, email: str) -> bool: ...

    async def set_reset_token(
        self, account_id: UUID, token: str, expires_at: datetime
    ) -> None:
        """Store a reset token, overwriting any previous one."""
        ...

    async def clear_reset_token(self, account_id: UUID) -> None: ...

    async def update_password_hash(self, account_id: UUID, password_hash: str) -> None: ...

    async def update_profile(
        self,
        account_id: UUID,
        *,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> Account | None:
        """Update the given profile fields (None leaves a field unchanged).

        Returns:
            The updated Account, or None if the account does not exist.

        Raises:
            EmailAlreadyStoredError: If the new email collides with another account.
            StorageError: If the database operation fails.
        """
        ...

    async def update_avatar(self, account_id: UUID, avatar: str) -> Account | None: ...

    async def consume_reset_token(
        self, token: str, password_hash: str, now: datetime
    ) -> Account | None:
        """Atomically swap the password hash and clear a live reset token.

        Runs as one conditional UPDATE matching the token and an expiry later
        than ``now``. Of two concurrent calls with the same token, exactly one
        gets the account back.

        Returns:
            The updated Account, or None if no live token matched.
        """
        ...
