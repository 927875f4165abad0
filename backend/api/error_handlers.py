"""
API error handling.

Maps application exceptions onto HTTP responses with the common
ErrorResponse envelope, so every route answers failures the same way.

Dependencies: fastapi, backend.core.exceptions, backend.models.common
System role: Exception to HTTP response translation
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.core.exceptions import MonkeyCodeException
from backend.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, details: dict | None = None) -> JSONResponse:
    """Build a JSON error response."""
    body = ErrorResponse(error=message, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_monkeycode_exception(request: Request, exc: MonkeyCodeException) -> JSONResponse:
    """Answer an application exception with its status and message."""
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}",
            extra={"error_type": type(exc).__name__},
        )
    else:
        logger.warning(
            f"{request.method} {request.url.path} rejected: {exc}",
            extra={"error_type": type(exc).__name__},
        )
    # Upstream details (URLs, provider messages) stay in the logs
    details = exc.details if exc.status_code < 500 else None
    return error_response(exc.status_code, exc.message, details)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies/queries with 400."""
    errors = [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    logger.warning(f"{request.method} {request.url.path} invalid request: {errors}")
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", {"errors": errors})


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """Answer any unhandled exception with a generic 500."""
    logger.exception(
        f"{request.method} {request.url.path} unhandled: {type(exc).__name__}: {exc}",
        extra={"error_type": type(exc).__name__},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the application's exception handlers."""
    app.add_exception_handler(MonkeyCodeException, handle_monkeycode_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_exception)
