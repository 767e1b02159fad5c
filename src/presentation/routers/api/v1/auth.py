"""Credential router.

Endpoints:
    POST /api/auth/register         - Create account (201)
    POST /api/auth/login            - Issue session token (200)
    POST /api/auth/forgot-password  - Issue password reset token (200)
    POST /api/auth/reset-password   - Reset password with token (200)

Each handler builds a command from the request body, calls the credential
service and translates the Result into a response envelope.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    LoginAccount,
    RegisterAccount,
    RequestPasswordReset,
    ResetPassword,
)
from src.application.services import CredentialService
from src.core.container import get_credential_service
from src.core.result import Failure, Success
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)

auth_router = APIRouter(tags=["Auth"])

FORGOT_PASSWORD_MESSAGE = (
    "If an account exists for this email, password reset instructions have been sent"
)


@auth_router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register account",
    responses={
        400: {"description": "Missing fields or invalid email"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    data: RegisterRequest,
    service: CredentialService = Depends(get_credential_service),
) -> JSONResponse:
    """Create an account.

    POST /api/auth/register → 201 Created

    The response carries the public account fields; the password hash is
    never included.
    """
    command = RegisterAccount(
        name=data.name,
        email=data.email,
        password=data.password,
    )

    match await service.register(command):
        case Success(value=account):
            return ErrorResponseBuilder.success(
                "Account registered successfully",
                {"account": account.to_public()},
                status_code=status.HTTP_201_CREATED,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@auth_router.post(
    "/login",
    summary="Log in",
    responses={
        400: {"description": "Missing fields"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(
    data: LoginRequest,
    service: CredentialService = Depends(get_credential_service),
) -> JSONResponse:
    """Authenticate and issue a session token.

    POST /api/auth/login → 200 OK

    Unknown email and wrong password produce the same 401 response.
    """
    command = LoginAccount(email=data.email, password=data.password)

    match await service.login(command):
        case Success(value=result):
            return ErrorResponseBuilder.success(
                "Login successful",
                {
                    "token": result.token,
                    "token_type": "bearer",
                    "expires_at": result.expires_at.isoformat(),
                    "account": result.account.to_public(),
                },
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@auth_router.post(
    "/forgot-password",
    summary="Request password reset",
    responses={400: {"description": "Missing email"}},
)
async def forgot_password(
    data: ForgotPasswordRequest,
    service: CredentialService = Depends(get_credential_service),
) -> JSONResponse:
    """Issue a reset token.

    POST /api/auth/forgot-password → 200 OK

    The response is identical for registered and unknown emails unless
    PASSWORD_RESET_REVEAL_UNKNOWN_EMAIL is set. ``data.reset_token`` is
    present only when reset-token exposure is enabled.
    """
    command = RequestPasswordReset(email=data.email)

    match await service.forgot_password(command):
        case Success(value=requested):
            payload = None
            if requested.reset_token is not None:
                payload = {"reset_token": requested.reset_token}
            return ErrorResponseBuilder.success(FORGOT_PASSWORD_MESSAGE, payload)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@auth_router.post(
    "/reset-password",
    summary="Reset password",
    responses={400: {"description": "Missing fields or invalid/expired token"}},
)
async def reset_password(
    data: ResetPasswordRequest,
    service: CredentialService = Depends(get_credential_service),
) -> JSONResponse:
    """Set a new password using a reset token.

    POST /api/auth/reset-password → 200 OK

    The token is single use; replaying it fails with RESET_TOKEN_INVALID.
    """
    command = ResetPassword(token=data.token, new_password=data.new_password)

    match await service.reset_password(command):
        case Success(value=_):
            return ErrorResponseBuilder.success("Password has been reset successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
