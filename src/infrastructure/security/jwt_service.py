"""JWT session token service (adapter).

Implements SessionTokenProtocol using PyJWT with HMAC-SHA256.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum, injected (never read from ambient state)
    - 24-hour default lifetime
    - Unique JWT ID (jti) per token

Performance:
    - Stateless validation (no database lookup)
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.constants import (
    JWT_ALGORITHM,
    MIN_SECRET_KEY_LENGTH,
    SESSION_TOKEN_EXPIRE_HOURS_DEFAULT,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.protocols.session_token_protocol import (
    IssuedSessionToken,
    SessionClaims,
)

_REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


class JWTService:
    """JWT session token issuance and verification.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        issued = token_service.issue_session_token(account.id, account.email)
        result = token_service.verify_session_token(issued.token)
    """

    def __init__(
        self,
        secret_key: str,
        expiration_hours: int = SESSION_TOKEN_EXPIRE_HOURS_DEFAULT,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing (>= 32 bytes).
            expiration_hours: Token lifetime in hours (default: 24).

        Raises:
            ValueError: If secret_key is too short or expiration is not positive.
        """
        if len(secret_key.encode("utf-8")) < MIN_SECRET_KEY_LENGTH:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if expiration_hours <= 0:
            msg = "Session token expiration must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration = timedelta(hours=expiration_hours)
        self._algorithm = JWT_ALGORITHM

    def issue_session_token(self, account_id: UUID, email: str) -> IssuedSessionToken:
        """Sign a session token for an account.

        Args:
            account_id: Account identifier (``sub`` claim).
            email: Account email at issuance.

        Returns:
            IssuedSessionToken with the compact JWT and its expiry.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> issued = service.issue_session_token(uuid7(), "ann@x.com")
            >>> len(issued.token.split("."))
            3
        """
        now = datetime.now(UTC)
        exp = int((now + self._expiration).timestamp())

        payload = {
            "sub": str(account_id),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": exp,
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedSessionToken(
            token=token,
            expires_at=datetime.fromtimestamp(exp, UTC),
        )

    def verify_session_token(
        self, token: str | None
    ) -> Result[SessionClaims, AuthenticationError]:
        """Verify signature and expiry, then extract identity.

        Args:
            token: Compact JWT, or None when the request carried none.

        Returns:
            Success(SessionClaims), or Failure with TOKEN_MISSING,
            TOKEN_EXPIRED or TOKEN_INVALID.
        """
        if token is None or not token.strip():
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_MISSING,
                    message="Access token required",
                )
            )

        try:
            payload = jwt.decode(
                token.strip(),
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
            claims = SessionClaims(
                account_id=UUID(str(payload["sub"])),
                email=str(payload["email"]),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), UTC),
            )
        except ExpiredSignatureError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Invalid or expired token",
                )
            )
        except (InvalidTokenError, ValueError, TypeError):
            # Bad signature, malformed token, missing claims, or sub not a UUID
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid or expired token",
                )
            )

        return Success(value=claims)
