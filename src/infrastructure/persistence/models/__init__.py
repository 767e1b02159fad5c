"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and must not be imported by the domain layer.

Models Organization:
    - account.py: Account credentials and profile (table ``accounts``)
    - address.py: Addresses owned by an account (table ``account_addresses``)

Note:
    Domain entities (dataclasses) live in src/domain/entities/ and are mapped
    to and from these models in the repository layer.
"""

from src.infrastructure.persistence.models.account import AccountModel
from src.infrastructure.persistence.models.address import AddressModel

__all__ = [
    "AccountModel",
    "AddressModel",
]
