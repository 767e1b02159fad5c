"""Email service implementations.

- StubEmailService: structured-log delivery for development and tests
"""

from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "StubEmailService",
]
