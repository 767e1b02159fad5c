"""Application service dependency factories.

Request-scoped service instances. Each request gets fresh repositories bound
to its own database session; hasher, token service, email and logger are
the app-scoped singletons from infrastructure.py.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import (
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_service,
)

if TYPE_CHECKING:
    from src.application.services import CredentialService, ProfileService


async def get_credential_service(
    session: AsyncSession = Depends(get_db_session),
) -> "CredentialService":
    """Get CredentialService (request-scoped).

    Wires:
    - AccountRepository (request-scoped, uses session)
    - PasswordResetTokenService (request-scoped, wraps the repository)
    - BcryptPasswordService, JWTService, StubEmailService, logger (app-scoped)

    Returns:
        CredentialService instance.

    Usage:
        @router.post("/login")
        async def login(
            service: CredentialService = Depends(get_credential_service),
        ):
            result = await service.login(command)
    """
    from src.application.services import CredentialService
    from src.infrastructure.persistence.repositories import AccountRepository
    from src.infrastructure.security import PasswordResetTokenService

    account_repo = AccountRepository(session=session)

    return CredentialService(
        account_repo=account_repo,
        password_service=get_password_service(),
        token_service=get_token_service(),
        reset_token_service=PasswordResetTokenService(
            account_repo=account_repo,
            expiration_minutes=settings.reset_token_expire_minutes,
        ),
        email_service=get_email_service(),
        logger=get_logger(),
        reveal_unknown_reset_email=settings.password_reset_reveal_unknown_email,
        expose_reset_token=settings.should_expose_reset_token,
    )


async def get_profile_service(
    session: AsyncSession = Depends(get_db_session),
) -> "ProfileService":
    """Get ProfileService (request-scoped).

    Returns:
        ProfileService bound to the request's database session.
    """
    from src.application.services import ProfileService
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        AddressRepository,
    )

    return ProfileService(
        account_repo=AccountRepository(session=session),
        address_repo=AddressRepository(session=session),
        logger=get_logger(),
    )
