"""Infrastructure layer error types.

Infrastructure errors represent failures in backing systems (database,
stored credential data) once they have been turned into values.

Architecture:
- Repositories and hashers raise exceptions (StorageError, CorruptHashError)
- Services catch them and return Failure(DatabaseError(...))
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode is kept for internal tracking and logs
"""

from dataclasses import dataclass

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode (drives the HTTP status).
        message: Human-readable message, safe for clients.
        infrastructure_code: Original infrastructure error code.
        details: Underlying error text under "reason" (development only).
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """Database and stored-data failures (STORAGE_FAILED, HASH_CORRUPT)."""

    pass
