"""Credential integrity exceptions."""


class CorruptHashError(Exception):
    """Stored password hash is not a valid bcrypt string.

    Raised by the password hasher instead of answering ``False`` so a damaged
    row is reported as a server fault rather than a wrong password.
    """
