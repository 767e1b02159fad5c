"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.account import Account
from src.domain.entities.address import Address

__all__ = [
    "Account",
    "Address",
]
