"""Email value object with validation.

Accounts are keyed by email, so every path that reads or writes an email
goes through ``normalize_email`` first. Storage and lookup share one
canonical form: surrounding whitespace removed, email-validator's
normalization applied (NFC local part, Unicode domain for IDNA labels) and
the whole address lowercased.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


def _canonical(raw: str) -> str:
    validated = validate_email(raw.strip(), check_deliverability=False)
    # email-validator only lowercases the domain part
    return validated.normalized.lower()


def normalize_email(raw: str) -> str:
    """Return the canonical lookup form of an email.

    Input that fails validation cannot match a stored account, so it is
    only trimmed and lowercased.
    """
    try:
        return _canonical(raw)
    except EmailNotValidError:
        return raw.strip().lower()


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses email-validator for syntax checks (no deliverability lookup).

    Attributes:
        value: The email address string (validated, canonical form)

    Raises:
        ValueError: If email format is invalid

    Example:
        >>> str(Email("  Ann@X.com "))
        'ann@x.com'
        >>> Email("not-an-email")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email: ...
    """

    value: str

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "value", _canonical(self.value))
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
