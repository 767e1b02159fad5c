"""Security infrastructure adapters.

- Password hashing (bcrypt)
- Session token issuance/verification (JWT)
- Password reset token issuance/consumption (hex tokens on the account row)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.password_reset_token_service import (
    PasswordResetTokenService,
)

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "PasswordResetTokenService",
]
