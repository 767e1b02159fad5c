"""Account domain entity for the identity service.

Pure business logic, no framework dependencies.

Reset Token State:
    - reset_token / reset_token_expires_at are either both absent or both set
    - Issuing a new token overwrites the previous one (at most one live token)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass
class Account:
    """Account domain entity holding credentials and profile data.

    Business Rules:
        - Email is unique across accounts, stored trimmed and lowercase
        - password_hash is never empty once the account exists
        - At most one live reset token per account

    Attributes:
        id: Unique account identifier (UUIDv7)
        name: Display name
        email: Normalized email address
        password_hash: Bcrypt hash (never plaintext)
        created_at: Timestamp when account was registered
        updated_at: Timestamp when account was last updated
        avatar: Opaque avatar reference (URL or storage key)
        phone: Optional phone number
        reset_token: Live password reset token, if any
        reset_token_expires_at: Expiry of the live reset token, if any

    Example:
        >>> account = Account(
        ...     id=uuid7(),
        ...     name="Ann",
        ...     email="ann@x.com",
        ...     password_hash="$2b$10$...",
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> "password_hash" in account.to_public()
        False
    """

    id: UUID
    name: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime
    avatar: str | None = None
    phone: str | None = None
    reset_token: str | None = None
    reset_token_expires_at: datetime | None = None

    def to_public(self) -> dict[str, Any]:
        """Profile payload safe to return to clients.

        Never includes the password hash or reset token state.

        Returns:
            dict: JSON-serializable public fields.
        """
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "avatar": self.avatar,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    def __repr__(self) -> str:
        # Keeps password_hash and reset_token out of logs and tracebacks
        return f"Account(id={self.id!r}, email={self.email!r})"
