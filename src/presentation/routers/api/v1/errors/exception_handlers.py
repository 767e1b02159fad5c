"""Global exception handlers for FastAPI application.

Anything that escapes a route is rendered in the standard envelope
(``{"success": false, "message", "code"}``) instead of FastAPI's default
``{"detail": ...}`` body.

Handlers:
    http_exception_handler: HTTPException (identity middleware, 404 routes)
    validation_exception_handler: RequestValidationError -> 400
    generic_exception_handler: Any other exception -> 500

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from src.core.container import get_logger
from src.core.enums import ErrorCode
from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)

# Codes for HTTPExceptions raised outside the application services
_HTTP_STATUS_CODES: dict[int, str] = {
    400: "bad_request",
    401: ErrorCode.TOKEN_MISSING.value,
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    415: "unsupported_media_type",
}


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render HTTPException as an envelope.

    Dependencies that already built an envelope put it in ``exc.detail``
    as a dict; that dict is returned unchanged.
    """
    if not isinstance(exc, HTTPException):
        return await generic_exception_handler(request, exc)

    headers = getattr(exc, "headers", None)

    if isinstance(exc.detail, dict):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
            headers=headers,
        )

    response = ErrorResponseBuilder.failure(
        status_code=exc.status_code,
        message=str(exc.detail),
        code=_HTTP_STATUS_CODES.get(exc.status_code, "http_error"),
    )
    if headers:
        response.headers.update(headers)
    return response


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render request-body validation failures as 400 VALIDATION_FAILED.

    Field paths are reported without the ``body`` prefix, e.g.
    ``"email: Input should be a valid string"``.
    """
    if not isinstance(exc, RequestValidationError):
        return await generic_exception_handler(request, exc)

    problems: list[str] = []
    for error in exc.errors():
        loc = [str(p) for p in error.get("loc", ()) if p != "body"]
        field = ".".join(loc) if loc else "body"
        problems.append(f"{field}: {error.get('msg', 'invalid value')}")

    return ErrorResponseBuilder.failure(
        status_code=status.HTTP_400_BAD_REQUEST,
        message="Invalid request body",
        code=ErrorCode.VALIDATION_FAILED,
        error="; ".join(problems) or None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and answers 500 UNEXPECTED_ERROR. The exception
    text is only included when error details are enabled.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )

    return ErrorResponseBuilder.failure(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="Internal server error",
        code=ErrorCode.UNEXPECTED_ERROR,
        error=str(exc),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
