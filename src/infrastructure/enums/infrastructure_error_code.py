"""Infrastructure-specific error codes.

Internal codes for tracking infrastructure failures. They travel alongside
the domain ErrorCode on DatabaseError so logs can tell failure kinds apart.

Categories:
- Database errors (DATABASE_*)
- Credential storage integrity (PASSWORD_HASH_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Database errors
    DATABASE_CONNECTION_FAILED = "database_connection_failed"
    DATABASE_CONSTRAINT_VIOLATION = "database_constraint_violation"
    DATABASE_ERROR = "database_error"

    # Stored credential integrity
    PASSWORD_HASH_INVALID = "password_hash_invalid"
