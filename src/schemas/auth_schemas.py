"""Authentication request schemas.

Pydantic models for API request parsing. Kept separate from domain
entities - these are HTTP-layer concerns.

Every field is optional at this layer: presence, blankness and email
syntax are checked by the credential service so that a missing field is
reported as MISSING_FIELDS with the same message on every endpoint.

Endpoints:
    POST /api/auth/register         - Create account
    POST /api/auth/login            - Issue session token
    POST /api/auth/forgot-password  - Issue reset token
    POST /api/auth/reset-password   - Set new password with reset token
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for account registration.

    POST /api/auth/register
    Returns: 201 Created
    """

    name: str | None = Field(
        default=None,
        description="Display name",
        examples=["Ann"],
    )
    email: str | None = Field(
        default=None,
        description="Email address (stored trimmed and lowercased)",
        examples=["ann@example.com"],
    )
    password: str | None = Field(
        default=None,
        description="Plaintext password",
        examples=["Secret123"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ann",
                "email": "ann@example.com",
                "password": "Secret123",
            }
        }
    )


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/auth/login
    Returns: 200 OK with session token
    """

    email: str | None = Field(default=None, examples=["ann@example.com"])
    password: str | None = Field(default=None, examples=["Secret123"])


# =============================================================================
# Password reset
# =============================================================================


class ForgotPasswordRequest(BaseModel):
    """Request schema for issuing a password reset token.

    POST /api/auth/forgot-password
    Returns: 200 OK
    """

    email: str | None = Field(default=None, examples=["ann@example.com"])


class ResetPasswordRequest(BaseModel):
    """Request schema for resetting a password.

    POST /api/auth/reset-password
    Returns: 200 OK

    ``newPassword`` is accepted as an alias of ``new_password``.
    """

    token: str | None = Field(
        default=None,
        description="Reset token from the forgot-password step",
    )
    new_password: str | None = Field(
        default=None,
        validation_alias=AliasChoices("new_password", "newPassword"),
        description="New plaintext password",
        examples=["NewPass1"],
    )
