"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement these protocols without inheritance.

Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, SessionTokenProtocol
    from src.domain.protocols import AccountRepository, AddressRepository
"""

# Service protocols
from src.domain.protocols.email_service_protocol import EmailServiceProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.reset_token_protocol import ResetTokenProtocol
from src.domain.protocols.session_token_protocol import (
    IssuedSessionToken,
    SessionClaims,
    SessionTokenProtocol,
)

# Repository protocols
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.address_repository import AddressRepository

__all__ = [
    # Service protocols
    "EmailServiceProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "ResetTokenProtocol",
    "SessionTokenProtocol",
    "IssuedSessionToken",
    "SessionClaims",
    # Repository protocols
    "AccountRepository",
    "AddressRepository",
]
