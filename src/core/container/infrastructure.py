"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLAlchemy async engine)
- Password hashing (bcrypt)
- Session tokens (JWT)
- Email (stub notifier)
- Logging (structlog console/JSON)

Request-scoped:
- Database session (commit on success, rollback on error)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.email_service_protocol import EmailServiceProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.session_token_protocol import SessionTokenProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.

    Usage:
        @router.get("/profile")
        async def get_profile(
            session: AsyncSession = Depends(get_db_session)
        ):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from BCRYPT_ROUNDS (default 10, ~60-100ms per hash).

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "SessionTokenProtocol":
    """Get JWT session token service singleton (app-scoped).

    Signs with SECRET_KEY. Outside production an unset key falls back to the
    development key, and a warning is logged once when the service is built.

    Returns:
        Session token service implementing SessionTokenProtocol.
    """
    from src.infrastructure.security import JWTService

    if settings.uses_fallback_signing_key:
        get_logger().warning(
            "secret_key_not_configured",
            environment=settings.environment.value,
            detail="using development signing key; set SECRET_KEY",
        )

    return JWTService(
        secret_key=settings.signing_key,
        expiration_hours=settings.session_token_expire_hours,
    )


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailServiceProtocol":
    """Get email service singleton (app-scoped).

    All environments currently use StubEmailService, which logs the
    password-reset delivery instead of sending mail.

    Returns:
        Email service implementing EmailServiceProtocol.
    """
    from src.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger())


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - everything else: ConsoleAdapter (JSON)

    LOG_JSON overrides the environment default.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.render_json_logs,
        log_level=settings.log_level,
    )
