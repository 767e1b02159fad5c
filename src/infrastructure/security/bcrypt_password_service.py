"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Cost factor from BCRYPT_ROUNDS (default 10, ~60-100ms per hash)
    - Adaptive algorithm (cost can increase over time)
    - Self-describing hashes: $2b$<cost>$<22-char salt><31-char digest>
    - Only the first 72 bytes of a password are significant (bcrypt limit)

Performance:
    - Cost factor is logarithmic: each +1 doubles computation time
    - 4 is accepted so test suites stay fast; production config requires >= 10
"""

import bcrypt

from src.core.constants import BCRYPT_ROUNDS_DEFAULT, BCRYPT_ROUNDS_MAX, BCRYPT_ROUNDS_MIN
from src.domain.errors import CorruptHashError

# bcrypt ignores input past 72 bytes; newer releases raise instead of truncating
_BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("secret1")
        password_service.verify_password("secret1", password_hash)  # True
    """

    def __init__(self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (4..20, default 10).

        Raises:
            ValueError: If cost_factor is outside the accepted range.
        """
        if cost_factor < BCRYPT_ROUNDS_MIN:
            msg = f"Cost factor must be at least {BCRYPT_ROUNDS_MIN}"
            raise ValueError(msg)
        if cost_factor > BCRYPT_ROUNDS_MAX:
            msg = f"Cost factor above {BCRYPT_ROUNDS_MAX} is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor
        # Verified against when the account does not exist, so unknown-email
        # logins cost the same as wrong-password logins
        self._dummy_hash = bcrypt.hashpw(
            b"timing-equalizer", bcrypt.gensalt(rounds=cost_factor)
        )

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (60 characters, $2b$...).

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> service.hash_password("secret1") != service.hash_password("secret1")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Comparison is constant time (bcrypt.checkpw).

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from database.

        Returns:
            True if password matches hash, False otherwise.

        Raises:
            CorruptHashError: If password_hash is not a bcrypt hash. A damaged
                stored hash is a server fault, not a wrong password.
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError as e:
            raise CorruptHashError("stored password hash is not a valid bcrypt hash") from e

    def dummy_verify(self, password: str) -> None:
        """Spend one verification's worth of work without a real hash."""
        bcrypt.checkpw(_encode(password), self._dummy_hash)
