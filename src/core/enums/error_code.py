"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming where it reads naturally.
The presentation layer maps each code to an HTTP status code.

Categories:
- Validation errors (MISSING_FIELDS, INVALID_*, VALIDATION_FAILED)
- Conflict errors (EMAIL_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*, RESET_TOKEN_INVALID)
- Resource errors (*_NOT_FOUND)
- Integrity and storage errors (HASH_CORRUPT, STORAGE_FAILED)
- Catch-all (UNEXPECTED_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    MISSING_FIELDS = "missing_fields"
    INVALID_EMAIL = "invalid_email"
    VALIDATION_FAILED = "validation_failed"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    RESET_TOKEN_INVALID = "reset_token_invalid"
    TOKEN_MISSING = "token_missing"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"

    # Resource errors
    ACCOUNT_NOT_FOUND = "account_not_found"
    ADDRESS_NOT_FOUND = "address_not_found"

    # Integrity and storage errors
    HASH_CORRUPT = "hash_corrupt"
    STORAGE_FAILED = "storage_failed"

    # Catch-all
    UNEXPECTED_ERROR = "unexpected_error"
