"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Services receive a logger through
their constructor and never import structlog directly.

Security:
    - NEVER log passwords, password hashes, or full tokens
    - Reset and session tokens may be logged only as an 8-character prefix

Usage:
    logger: LoggerProtocol = get_logger()
    logger.info("account_registered", account_id=str(account.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("login_succeeded")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: event name plus key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance is unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
