"""Profile router (bearer token required on every route).

Endpoints:
    GET  /api/auth/profile                         - Read profile
    PUT  /api/auth/profile                         - Update name/email/phone
    PUT  /api/auth/profile/avatar                  - Set avatar reference
    GET  /api/auth/profile/addresses               - List own addresses
    POST /api/auth/profile/addresses               - Create address (201)
    PUT  /api/auth/profile/addresses/{address_id}  - Update own address

The account id always comes from the verified token. Addresses of other
accounts answer 404 ADDRESS_NOT_FOUND, the same as ids that do not exist.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.commands.profile_commands import (
    SaveAddress,
    UpdateAvatar,
    UpdateProfile,
)
from src.application.services import ProfileService
from src.core.container import get_profile_service
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentAccount,
    get_current_account,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.profile_schemas import (
    AddressRequest,
    AvatarUpdateRequest,
    ProfileUpdateRequest,
)

profile_router = APIRouter(
    prefix="/profile",
    tags=["Profile"],
    responses={
        401: {"description": "Access token required"},
        403: {"description": "Invalid or expired token"},
    },
)


@profile_router.get("", summary="Get profile")
async def get_profile(
    current: CurrentAccount = Depends(get_current_account),
    service: ProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """GET /api/auth/profile → 200 OK with ``data.account``."""
    match await service.get_profile(current.account_id):
        case Success(value=account):
            return ErrorResponseBuilder.success(
                "Profile retrieved successfully",
                {"account": account.to_public()},
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@profile_router.put("", summary="Update profile")
async def update_profile(
    data: ProfileUpdateRequest,
    current: CurrentAccount = Depends(get_current_account),
    service: ProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """Update any of name, email, phone.

    PUT /api/auth/profile → 200 OK

    Changing the email to one held by another account fails with 409.
    """
    command = UpdateProfile(
        account_id=current.account_id,
        name=data.name,
        email=data.email,
        phone=data.phone,
    )

    match await service.update_profile(command):
        case Success(value=account):
            return ErrorResponseBuilder.success(
                "Profile updated successfully",
                {"account": account.to_public()},
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@profile_router.put("/avatar", summary="Update avatar")
async def update_avatar(
    data: AvatarUpdateRequest,
    current: CurrentAccount = Depends(get_current_account),
    service: ProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """PUT /api/auth/profile/avatar → 200 OK"""
    command = UpdateAvatar(account_id=current.account_id, avatar=data.avatar)

    match await service.update_avatar(command):
        case Success(value=account):
            return ErrorResponseBuilder.success(
                "Avatar updated successfully",
                {"account": account.to_public()},
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@profile_router.get("/addresses", summary="List addresses")
async def list_addresses(
    current: CurrentAccount = Depends(get_current_account),
    service: ProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """GET /api/auth/profile/addresses → 200 OK, oldest first."""
    match await service.list_addresses(current.account_id):
        case Success(value=addresses):
            return ErrorResponseBuilder.success(
                "Addresses retrieved successfully",
                {"addresses": [address.to_public() for address in addresses]},
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@profile_router.post(
    "/addresses",
    status_code=status.HTTP_201_CREATED,
    summary="Create address",
)
async def create_address(
    data: AddressRequest,
    current: CurrentAccount = Depends(get_current_account),
    service: ProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """POST /api/auth/profile/addresses → 201 Created"""
    return await _save_address(service, _to_command(data, current.account_id))


@profile_router.put("/addresses/{address_id}", summary="Update address")
async def update_address(
    address_id: UUID,
    data: AddressRequest,
    current: CurrentAccount = Depends(get_current_account),
    service: ProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """PUT /api/auth/profile/addresses/{address_id} → 200 OK"""
    return await _save_address(
        service, _to_command(data, current.account_id, address_id)
    )


def _to_command(
    data: AddressRequest,
    account_id: UUID,
    address_id: UUID | None = None,
) -> SaveAddress:
    return SaveAddress(
        account_id=account_id,
        address_id=address_id,
        type=data.type,
        name=data.name,
        phone=data.phone,
        address_line1=data.address_line1,
        address_line2=data.address_line2,
        city=data.city,
        state=data.state,
        pincode=data.pincode,
    )


async def _save_address(service: ProfileService, command: SaveAddress) -> JSONResponse:
    created = command.address_id is None

    match await service.save_address(command):
        case Success(value=address):
            return ErrorResponseBuilder.success(
                "Address saved successfully",
                {"address": address.to_public()},
                status_code=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
