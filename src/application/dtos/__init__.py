"""Application DTOs returned by services."""

from src.application.dtos.auth_dtos import LoginResult, PasswordResetRequested

__all__ = [
    "LoginResult",
    "PasswordResetRequested",
]
