"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_credential_service, ...

Organization:
- infrastructure: App-scoped singletons (database, hasher, tokens, email,
  logging) and the request-scoped database session
- services: Request-scoped application services
"""

from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.services import (
    get_credential_service,
    get_profile_service,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Services
    "get_credential_service",
    "get_profile_service",
]
