"""Request schemas for API endpoints.

Pydantic models for HTTP request parsing. Schemas are kept separate from
domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import RegisterRequest, AddressRequest
"""

from src.schemas.auth_schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from src.schemas.profile_schemas import (
    AddressRequest,
    AvatarUpdateRequest,
    ProfileUpdateRequest,
)

__all__ = [
    # Auth
    "ForgotPasswordRequest",
    "LoginRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    # Profile
    "AddressRequest",
    "AvatarUpdateRequest",
    "ProfileUpdateRequest",
]
