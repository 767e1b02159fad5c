"""AddressRepository protocol for address persistence.

Every method is scoped by the owning account id. A row owned by another
account is indistinguishable from a missing row.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.address import Address


class AddressRepository(Protocol):
    """Address repository protocol (port)."""

    async def create(self, address: Address) -> Address:
        """Insert a new address for ``address.account_id``.

        Raises:
            StorageError: If the database operation fails.
        """
        ...

    async def update_for_account(self, address: Address) -> Address | None:
        """Overwrite an owned address.

        Returns:
            Updated Address, or None if no row with that id is owned by
            ``address.account_id``.
        """
        ...

    async def list_for_account(self, account_id: UUID) -> list[Address]:
        """All addresses of an account, oldest first."""
        ...
