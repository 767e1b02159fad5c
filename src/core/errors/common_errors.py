"""Common error classes used across the identity service.

Error Types:
- ValidationError: Missing or malformed input
- NotFoundError: Resource not found (or not visible to the caller)
- ConflictError: Duplicate resource (email already registered)
- AuthenticationError: Credential and token failures

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Please provide a valid email address",
        field="email",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation, if a single one did.
        fields: All offending field names (used for missing-field errors).
    """

    field: str | None = None
    fields: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Account, Address).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate value on a unique field).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict (email).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, bad or expired token)."""

    pass
