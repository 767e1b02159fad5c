"""Translate SQLAlchemy failures into domain storage exceptions.

Repositories wrap each database round-trip in ``storage_guard`` so services
only ever see StorageError (or EmailAlreadyStoredError for the unique email
index), never driver exceptions.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.errors import EmailAlreadyStoredError, StorageError


@asynccontextmanager
async def storage_guard(
    session: AsyncSession,
    operation: str,
    *,
    email: str | None = None,
) -> AsyncIterator[None]:
    """Roll back and re-raise database errors as StorageError.

    Args:
        session: Session to roll back on failure.
        operation: Repository method name (kept on the exception for logs).
        email: Email being written; when set, an IntegrityError is reported
            as EmailAlreadyStoredError.

    Raises:
        EmailAlreadyStoredError: Unique email constraint violated.
        StorageError: Any other SQLAlchemy failure.
    """
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        if email is not None:
            raise EmailAlreadyStoredError(email, operation=operation) from e
        raise StorageError(_describe(e), operation=operation) from e
    except SQLAlchemyError as e:
        await session.rollback()
        raise StorageError(_describe(e), operation=operation) from e


def _describe(error: SQLAlchemyError) -> str:
    """Driver error class and first message line, without SQL or bound parameters.

    Bound parameters carry reset tokens and password hashes, and some drivers
    append key values on later lines (e.g. PostgreSQL DETAIL).
    """
    source: BaseException = getattr(error, "orig", None) or error
    lines = str(source).splitlines()
    first_line = lines[0] if lines else ""
    return f"{type(source).__name__}: {first_line}"
