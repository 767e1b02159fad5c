"""Account database model for the identity service.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - reset_token: 64-char hex, unique, cleared on use
    - reset_token_expires_at: tokens are rejected after this instant
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel


class AccountModel(BaseMutableModel):
    """Account model for credentials and profile data.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when account registered (from BaseMutableModel)
        updated_at: Timestamp when account last updated (from BaseMutableModel)
        name: Display name (trimmed)
        email: Unique email address (trimmed, lowercase, indexed)
        password_hash: Bcrypt hash (NEVER plaintext, never empty)
        avatar: Opaque avatar reference (URL or storage key), nullable
        phone: Phone number, nullable
        reset_token: Live password reset token (unique, nullable)
        reset_token_expires_at: Expiry of the live reset token (nullable)

    Relationships:
        - addresses: One-to-many (cascade delete)
    """

    __tablename__ = "accounts"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Account email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    avatar: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
        default=None,
        comment="Avatar reference (URL or storage key)",
    )

    phone: Mapped[str | None] = mapped_column(
        String(32),
        nullable=True,
        default=None,
    )

    reset_token: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        default=None,
        unique=True,
        index=True,
        comment="Live password reset token (hex, single use)",
    )

    reset_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    addresses = relationship(
        "AddressModel",
        back_populates="account",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, email={self.email!r})>"
