"""Storage exceptions raised by repository adapters.

Repositories wrap every SQLAlchemy failure in StorageError so services
never depend on the database driver. These are real exceptions (unlike
DomainError values); services catch them and return a Failure.
"""


class StorageError(Exception):
    """A persistence operation failed (connection, timeout, SQL error).

    Attributes:
        operation: Repository method that failed.
    """

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class EmailAlreadyStoredError(StorageError):
    """Insert or update collided with the unique index on account email."""

    def __init__(self, email: str, *, operation: str) -> None:
        super().__init__("email already stored", operation=operation)
        self.email = email
