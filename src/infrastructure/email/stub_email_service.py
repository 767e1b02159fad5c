"""Stub email adapter.

Logs deliveries instead of sending them. The reset token is truncated to a
short prefix so logs never hold a usable token.
"""

from src.core.constants import TOKEN_LOG_PREFIX_LENGTH
from src.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """Email service that writes structured log events.

    Args:
        logger: Structured logger.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def send_password_reset_email(self, to_email: str, token: str) -> None:
        self._logger.info(
            "password_reset_email_sent",
            to_email=to_email,
            token_prefix=token[:TOKEN_LOG_PREFIX_LENGTH],
            transport="stub",
        )

    async def send_password_changed_notification(self, to_email: str) -> None:
        self._logger.info(
            "password_changed_email_sent",
            to_email=to_email,
            transport="stub",
        )
