"""Domain errors package.

Exceptions raised across the port boundary by adapters. Value-style errors
returned inside ``Failure`` live in src.core.errors.

Usage:
    from src.domain.errors import CorruptHashError, StorageError
"""

from src.domain.errors.credential_error import CorruptHashError
from src.domain.errors.storage_error import EmailAlreadyStoredError, StorageError

__all__ = [
    "CorruptHashError",
    "EmailAlreadyStoredError",
    "StorageError",
]
