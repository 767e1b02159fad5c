"""Centralized constants for internal implementation details.

These are fixed implementation details, NOT environment-specific
configuration. For environment-specific settings use `src/core/config.py`.

Example:
    >>> from src.core.constants import TOKEN_BYTES
    >>> token = secrets.token_hex(TOKEN_BYTES)
"""

# =============================================================================
# Token and Key Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes for reset token generation (32 bytes = 256 bits)."""

MIN_SECRET_KEY_LENGTH: int = 32
"""Minimum session-token signing key length in bytes (HS256)."""

TOKEN_LOG_PREFIX_LENGTH: int = 8
"""Characters of a token kept when it appears in logs."""


# =============================================================================
# Password Hashing
# =============================================================================

BCRYPT_ROUNDS_DEFAULT: int = 10
"""Default bcrypt work factor (~60-100ms per hash on commodity hardware)."""

BCRYPT_ROUNDS_MIN: int = 4
"""Lowest work factor accepted (test configurations only)."""

BCRYPT_ROUNDS_MAX: int = 20
"""Highest work factor accepted (above this login latency is unusable)."""

BCRYPT_ROUNDS_PRODUCTION_MIN: int = 10
"""Lowest work factor accepted when running in production."""


# =============================================================================
# Token Lifetimes
# =============================================================================

SESSION_TOKEN_EXPIRE_HOURS_DEFAULT: int = 24
"""Session (bearer) token lifetime."""

RESET_TOKEN_EXPIRE_MINUTES_DEFAULT: int = 30
"""Password reset token lifetime."""

JWT_ALGORITHM: str = "HS256"
"""Session token signing algorithm."""


# =============================================================================
# Signing Key Fallback
# =============================================================================

DEVELOPMENT_SECRET_KEY: str = "development-only-signing-key-change-me-0123456789"
"""Fallback signing key used outside production when SECRET_KEY is unset.

Publicly known. Any deployment that relies on it accepts forged tokens.
"""


# =============================================================================
# Address Book
# =============================================================================

ADDRESS_TYPES: frozenset[str] = frozenset({"home", "work", "other"})
"""Accepted address type tags."""
