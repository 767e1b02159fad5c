"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.email import Email, normalize_email

__all__ = [
    "Email",
    "normalize_email",
]
