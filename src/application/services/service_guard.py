"""Failure helpers shared by application services.

``guard_operation`` is the single place where exceptions escaping an
operation become Failure values:

- StorageError -> DatabaseError(STORAGE_FAILED)
- CorruptHashError -> DatabaseError(HASH_CORRUPT)
- any other exception -> DomainError(UNEXPECTED_ERROR)

The underlying exception text is kept in ``details["reason"]``; the HTTP
layer shows it only in development.
"""

from collections.abc import Awaitable
from typing import TypeVar

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result
from src.domain.errors import CorruptHashError, StorageError
from src.domain.protocols import LoggerProtocol
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import DatabaseError

T = TypeVar("T")


async def guard_operation(
    operation: str,
    pending: Awaitable[Result[T, DomainError]],
    logger: LoggerProtocol,
) -> Result[T, DomainError]:
    """Await a service operation, converting escaped exceptions to Failures.

    Args:
        operation: Service operation name (logged).
        pending: The operation's coroutine.
        logger: Logger for the failure event.

    Returns:
        The operation's own Result, or a Failure describing the exception.
    """
    try:
        return await pending
    except StorageError as e:
        logger.error(
            "storage_failed",
            error=e,
            operation=operation,
            repository_operation=e.operation,
        )
        return Failure(
            error=DatabaseError(
                code=ErrorCode.STORAGE_FAILED,
                message="A storage error occurred. Please try again later.",
                infrastructure_code=InfrastructureErrorCode.DATABASE_ERROR,
                details={"reason": str(e)},
            )
        )
    except CorruptHashError as e:
        logger.critical("password_hash_corrupt", error=e, operation=operation)
        return Failure(
            error=DatabaseError(
                code=ErrorCode.HASH_CORRUPT,
                message="Stored credentials are unreadable. Please contact support.",
                infrastructure_code=InfrastructureErrorCode.PASSWORD_HASH_INVALID,
                details={"reason": str(e)},
            )
        )
    except Exception as e:
        logger.error("unexpected_error", error=e, operation=operation)
        return Failure(
            error=DomainError(
                code=ErrorCode.UNEXPECTED_ERROR,
                message="Internal server error",
                details={"reason": str(e)},
            )
        )


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def missing_fields(**fields: str | None) -> ValidationError | None:
    """MISSING_FIELDS error naming every absent or blank field, or None.

    Example:
        >>> missing_fields(email="a@b.co", password="").fields
        ('password',)
    """
    missing = tuple(name for name, value in fields.items() if is_blank(value))
    if not missing:
        return None
    return ValidationError(
        code=ErrorCode.MISSING_FIELDS,
        message=f"All fields are required ({', '.join(fields)})",
        fields=missing,
    )


def invalid_email() -> ValidationError:
    return ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Please provide a valid email address",
        field="email",
    )


def duplicate_email() -> ConflictError:
    return ConflictError(
        code=ErrorCode.EMAIL_ALREADY_EXISTS,
        message="Email already exists. Please use a different email.",
        resource_type="Account",
        conflicting_field="email",
    )
