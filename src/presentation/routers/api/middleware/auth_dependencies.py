"""Bearer-token identity dependency.

Protects the profile routes. The dependency reads the
``Authorization: Bearer <token>`` header and resolves it to the account
identity embedded in the session token.

- No header (or a blank token): 401 TOKEN_MISSING
- Bad signature, malformed token: 403 TOKEN_INVALID
- Expired token: 403 TOKEN_EXPIRED

Usage:
    @router.get("/profile")
    async def get_profile(
        current: CurrentAccount = Depends(get_current_account),
    ):
        return {"account_id": str(current.account_id)}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.protocols import SessionTokenProtocol
from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)

# auto_error=False: a missing header must produce our own 401 envelope
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentAccount:
    """Authenticated account identity from the session token.

    Attributes:
        account_id: Account identifier (from 'sub' claim).
        email: Account email at token issue time (from 'email' claim).
    """

    account_id: UUID
    email: str


async def get_current_account(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[SessionTokenProtocol, Depends(get_token_service)],
) -> CurrentAccount:
    """Resolve the bearer token to the calling account.

    Raises:
        HTTPException: 401 or 403 with an envelope body as ``detail``.
    """
    token = credentials.credentials if credentials is not None else None

    match token_service.verify_session_token(token):
        case Success(value=claims):
            return CurrentAccount(account_id=claims.account_id, email=claims.email)
        case Failure(error=error):
            raise HTTPException(
                status_code=ErrorResponseBuilder.get_status_code(error.code),
                detail=ErrorResponseBuilder.failure_content(error.message, error.code),
                headers={"WWW-Authenticate": "Bearer"},
            )
