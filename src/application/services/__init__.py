"""Application services (orchestrators over domain protocols)."""

from src.application.services.credential_service import CredentialService
from src.application.services.profile_service import ProfileService

__all__ = [
    "CredentialService",
    "ProfileService",
]
