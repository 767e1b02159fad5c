"""Infrastructure errors package.

Usage:
    from src.infrastructure.errors import DatabaseError
"""

from src.infrastructure.errors.infrastructure_error import (
    DatabaseError,
    InfrastructureError,
)

__all__ = [
    "InfrastructureError",
    "DatabaseError",
]
