"""Credential commands (write operations).

Commands carry raw user input. All commands are immutable (frozen=True) and
use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- CredentialService validates and executes them
- Fields are optional: an absent or blank value is reported as
  MISSING_FIELDS by the service, not rejected at parse time
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RegisterAccount:
    """Register a new account.

    Attributes:
        name: Display name (trimmed before storage).
        email: Email address (trimmed and lowercased before storage).
        password: Plaintext password (hashed, never stored).

    Example:
        >>> command = RegisterAccount(name="Ann", email="ann@x.com", password="secret1")
        >>> result = await credential_service.register(command)
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoginAccount:
    """Authenticate credentials and obtain a session token."""

    email: str | None = None
    password: str | None = None


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Start the password reset flow for an email address."""

    email: str | None = None


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Complete the password reset flow.

    Attributes:
        token: Reset token delivered out of band.
        new_password: Plaintext replacement password.
    """

    token: str | None = None
    new_password: str | None = None
