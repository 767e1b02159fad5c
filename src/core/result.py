"""Result types for railway-oriented programming.

Service operations return a Result instead of raising, so every failure a
caller can see (duplicate email, bad credentials, expired token) is an
explicit value the HTTP layer maps to a response.

Usage:
    def find_account(email: str) -> Result[Account, NotFoundError]:
        account = store.get(email)
        if account is None:
            return Failure(error=NotFoundError(...))
        return Success(value=account)

    match find_account("ann@x.com"):
        case Success(value=account):
            print(account.id)
        case Failure(error=error):
            print(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
