"""Address domain entity.

An address belongs to exactly one account. Every read and write goes
through calls scoped to the owning account id.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass
class Address:
    """Shipping/billing address owned by an account.

    Attributes:
        id: Unique address identifier
        account_id: Owning account
        type: Address kind (home, work, other)
        name: Recipient name
        phone: Recipient phone
        address_line1: First street line
        city: City
        state: State or region
        pincode: Postal code
        address_line2: Optional second street line
        created_at: Creation timestamp (None until persisted)
        updated_at: Last update timestamp (None until persisted)
    """

    id: UUID
    account_id: UUID
    type: str
    name: str
    phone: str
    address_line1: str
    city: str
    state: str
    pincode: str
    address_line2: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_public(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "type": self.type,
            "name": self.name,
            "phone": self.phone,
            "address_line1": self.address_line1,
            "address_line2": self.address_line2,
            "city": self.city,
            "state": self.state,
            "pincode": self.pincode,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
