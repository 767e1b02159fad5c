"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - No framework dependencies in domain
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("secret1")
        is_valid = password_service.verify_password("secret1", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Self-describing hash string (bcrypt format: $2b$10$...).
            The same password yields a different hash each call (random salt).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hash previously produced by hash_password.

        Returns:
            True if password matches hash, False otherwise.

        Raises:
            CorruptHashError: If password_hash is not a valid hash string.
        """
        ...

    def dummy_verify(self, password: str) -> None:
        """Do the work of one verification against an internal throwaway hash.

        Called when the account does not exist so the response time does
        not reveal whether an email is registered.
        """
        ...
