"""Address database model (shipping/billing addresses owned by an account)."""

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel


class AddressModel(BaseMutableModel):
    """Address row scoped to a single owning account.

    Foreign Keys:
        - account_id: References accounts(id) ON DELETE CASCADE
    """

    __tablename__ = "account_addresses"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        comment="Address kind (home, work, other)",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    address_line1: Mapped[str] = mapped_column(String(255), nullable=False)
    address_line2: Mapped[str | None] = mapped_column(
        String(255), nullable=True, default=None
    )
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    pincode: Mapped[str] = mapped_column(String(20), nullable=False)

    account = relationship("AccountModel", back_populates="addresses")

    def __repr__(self) -> str:
        return (
            f"<AddressModel(id={self.id}, account_id={self.account_id}, "
            f"type={self.type!r})>"
        )
