"""Profile request schemas.

Endpoints (all require a bearer token):
    PUT  /api/auth/profile                        - Update name/email/phone
    PUT  /api/auth/profile/avatar                 - Set avatar reference
    POST /api/auth/profile/addresses              - Create address
    PUT  /api/auth/profile/addresses/{address_id} - Update owned address
"""

from pydantic import BaseModel, Field


class ProfileUpdateRequest(BaseModel):
    """Partial profile update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, examples=["Ann Lee"])
    email: str | None = Field(default=None, examples=["ann.lee@example.com"])
    phone: str | None = Field(default=None, examples=["+1 555 0100"])


class AvatarUpdateRequest(BaseModel):
    """Avatar reference (URL or storage key). The file itself is stored elsewhere."""

    avatar: str | None = Field(
        default=None,
        max_length=512,
        examples=["avatars/0191f0e4-ann.png"],
    )


class AddressRequest(BaseModel):
    """Address payload for create and update.

    ``type`` is one of home, work, other (case-insensitive).
    """

    type: str | None = Field(default=None, examples=["home"])
    name: str | None = Field(default=None, examples=["Ann"])
    phone: str | None = Field(default=None, examples=["+1 555 0100"])
    address_line1: str | None = Field(default=None, examples=["1 Main St"])
    address_line2: str | None = Field(default=None, examples=["Apt 4"])
    city: str | None = Field(default=None, examples=["Springfield"])
    state: str | None = Field(default=None, examples=["IL"])
    pincode: str | None = Field(default=None, examples=["62701"])
