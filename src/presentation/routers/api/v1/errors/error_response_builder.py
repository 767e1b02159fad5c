"""Response envelope builder.

Every endpoint answers with the same JSON envelope:

    {"success": true, "message": "...", "data": {...}}
    {"success": false, "message": "...", "code": "invalid_credentials"}

Failures carry the ErrorCode value in ``code``. In development (or with
DEBUG on) the raw failure detail is added as ``error``.

Usage:
    match result:
        case Success(value=account):
            return ErrorResponseBuilder.success("Profile updated", {...})
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    # Request validation
    ErrorCode.MISSING_FIELDS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.RESET_TOKEN_INVALID: status.HTTP_400_BAD_REQUEST,
    # Conflicts
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    # Authentication
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_MISSING: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID: status.HTTP_403_FORBIDDEN,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_403_FORBIDDEN,
    # Lookups
    ErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ADDRESS_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # Server side
    ErrorCode.HASH_CORRUPT: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.STORAGE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.UNEXPECTED_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ErrorResponseBuilder:
    """Builds envelope responses from application results."""

    @staticmethod
    def success(
        message: str,
        data: dict[str, Any] | None = None,
        status_code: int = status.HTTP_200_OK,
    ) -> JSONResponse:
        """Build a success envelope.

        Args:
            message: Human-readable outcome.
            data: Payload placed under ``data`` (omitted when None).
            status_code: HTTP status (200 or 201).

        Returns:
            JSONResponse with ``success: true``.
        """
        content: dict[str, Any] = {"success": True, "message": message}
        if data is not None:
            content["data"] = data
        return JSONResponse(
            status_code=status_code,
            content=content,
            headers=_trace_headers(),
        )

    @staticmethod
    def failure(
        status_code: int,
        message: str,
        code: ErrorCode | str,
        error: str | None = None,
    ) -> JSONResponse:
        """Build a failure envelope.

        ``error`` is dropped unless error details are enabled.
        """
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponseBuilder.failure_content(message, code, error),
            headers=_trace_headers(),
        )

    @staticmethod
    def failure_content(
        message: str,
        code: ErrorCode | str,
        error: str | None = None,
    ) -> dict[str, Any]:
        content: dict[str, Any] = {
            "success": False,
            "message": message,
            "code": code.value if isinstance(code, ErrorCode) else code,
        }
        if error is not None and settings.show_error_details:
            content["error"] = error
        return content

    @staticmethod
    def from_domain_error(error: DomainError) -> JSONResponse:
        """Convert a DomainError into a failure envelope.

        Args:
            error: Failure value returned by an application service.

        Returns:
            JSONResponse with the status mapped from ``error.code``.
        """
        reason = None
        if error.details:
            reason = error.details.get("reason")

        return ErrorResponseBuilder.failure(
            status_code=ErrorResponseBuilder.get_status_code(error.code),
            message=error.message,
            code=error.code,
            error=reason,
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _trace_headers() -> dict[str, str] | None:
    trace_id = get_trace_id()
    return {"X-Trace-Id": trace_id} if trace_id else None
