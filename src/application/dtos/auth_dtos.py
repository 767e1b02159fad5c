"""Credential DTOs (Data Transfer Objects).

Result dataclasses that carry data from CredentialService back to the
presentation layer.

DTOs:
    - LoginResult: Result of a successful login
    - PasswordResetRequested: Result of a forgot-password request
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.entities.account import Account


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Response from successful login.

    Attributes:
        account: Authenticated account (serialize with to_public()).
        token: Signed session token.
        expires_at: Session token expiry (UTC).
    """

    account: Account
    token: str
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequested:
    """Response from a forgot-password request.

    Attributes:
        reset_token: Raw token, populated only when the service is configured
            to expose it (development). None for unknown emails and when
            exposure is off.
    """

    reset_token: str | None = None
