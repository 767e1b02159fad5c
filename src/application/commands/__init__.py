"""Application commands (write operations)."""

from src.application.commands.auth_commands import (
    LoginAccount,
    RegisterAccount,
    RequestPasswordReset,
    ResetPassword,
)
from src.application.commands.profile_commands import (
    SaveAddress,
    UpdateAvatar,
    UpdateProfile,
)

__all__ = [
    "LoginAccount",
    "RegisterAccount",
    "RequestPasswordReset",
    "ResetPassword",
    "SaveAddress",
    "UpdateAvatar",
    "UpdateProfile",
]
