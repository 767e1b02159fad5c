"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of repository protocols defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.address_repository import (
    AddressRepository,
)

__all__ = [
    "AccountRepository",
    "AddressRepository",
]
