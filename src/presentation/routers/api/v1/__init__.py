"""API v1 routers.

All identity endpoints live under ``/api/auth``:

    /api/auth/register, /login, /forgot-password, /reset-password
    /api/auth/profile, /profile/avatar, /profile/addresses[/{address_id}]
"""

from fastapi import APIRouter

from src.presentation.routers.api.v1.auth import auth_router
from src.presentation.routers.api.v1.profile import profile_router

v1_router = APIRouter(prefix="/api/auth")
v1_router.include_router(auth_router)
v1_router.include_router(profile_router)

__all__ = [
    "v1_router",
]
