"""EmailServiceProtocol - Domain protocol for email operations.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)
- Application layer uses protocol, not concrete implementation
"""

from typing import Protocol


class EmailServiceProtocol(Protocol):
    """Protocol for account notification emails.

    Implementations:
        - StubEmailService: src/infrastructure/email/stub_email_service.py
    """

    async def send_password_reset_email(self, to_email: str, token: str) -> None:
        """Deliver a password reset token out of band.

        Args:
            to_email: Recipient email address.
            token: Raw reset token (the only place it leaves the service
                besides an explicitly exposed API response).
        """
        ...

    async def send_password_changed_notification(self, to_email: str) -> None:
        """Tell the account owner their password was just changed."""
        ...
