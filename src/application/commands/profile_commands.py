"""Profile commands (write operations scoped to the authenticated account).

``account_id`` always comes from identity resolution, never from the
request body.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class UpdateProfile:
    """Change name, email and/or phone. At least one must be supplied."""

    account_id: UUID
    name: str | None = None
    email: str | None = None
    phone: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateAvatar:
    """Persist an avatar reference produced by the file-storage collaborator.

    Attributes:
        account_id: Authenticated account.
        avatar: Opaque reference (URL or storage key); must be non-blank.
    """

    account_id: UUID
    avatar: str | None = None


@dataclass(frozen=True, kw_only=True)
class SaveAddress:
    """Create (address_id is None) or update an address owned by the account."""

    account_id: UUID
    address_id: UUID | None = None
    type: str | None = None
    name: str | None = None
    phone: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
