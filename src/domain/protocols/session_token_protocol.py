"""Session token protocol for domain layer.

Port for issuing and verifying bearer (session) tokens.

Token Strategy:
    - Signed JWT (HS256), default lifetime 24 hours
    - Stateless validation: signature and expiry only, no revocation list
    - Claims: sub (account id), email, iat, exp, jti
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.core.errors import AuthenticationError
from src.core.result import Result


@dataclass(frozen=True, slots=True, kw_only=True)
class IssuedSessionToken:
    """A freshly signed session token and the instant it stops being valid."""

    token: str
    expires_at: datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionClaims:
    """Identity carried by a verified session token.

    Attributes:
        account_id: Account the token was issued to (``sub`` claim).
        email: Email at issuance time.
        expires_at: Token expiry (``exp`` claim).
    """

    account_id: UUID
    email: str
    expires_at: datetime


class SessionTokenProtocol(Protocol):
    """Session token issuance and verification interface.

    Usage:
        issued = token_service.issue_session_token(account.id, account.email)

        match token_service.verify_session_token(issued.token):
            case Success(value=claims):
                account_id = claims.account_id
            case Failure(error=error):
                # error.code is TOKEN_MISSING, TOKEN_INVALID or TOKEN_EXPIRED
                ...
    """

    def issue_session_token(self, account_id: UUID, email: str) -> IssuedSessionToken:
        """Sign a new session token for an account."""
        ...

    def verify_session_token(
        self, token: str | None
    ) -> Result[SessionClaims, AuthenticationError]:
        """Verify signature and expiry and extract identity.

        Args:
            token: Raw token (without "Bearer " prefix), or None if absent.

        Returns:
            Success(SessionClaims) if valid, otherwise Failure with code
            TOKEN_MISSING (absent or blank), TOKEN_EXPIRED (past exp) or
            TOKEN_INVALID (bad signature, malformed, missing claims).
        """
        ...
