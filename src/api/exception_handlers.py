"""Centralized exception handlers for the FastAPI application.

Domain exceptions raised by services are mapped to HTTP responses here so
route handlers stay free of status-code plumbing.

Error Response Format:
    {"error": "Human-readable message"}
    {"errors": ["message", ...]}          (validation failures)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.model.errors import (
    DuplicateError,
    EmptyPayloadError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ENDPOINT_NOT_FOUND = "Endpoint not found"
INTERNAL_SERVER_ERROR = "Internal server error"


# Single-message domain errors and their status codes. Anything else,
# including an unmapped DomainError, falls through to the 500 handler.
ERROR_TO_STATUS: dict[type[Exception], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateError: status.HTTP_409_CONFLICT,
    EmptyPayloadError: status.HTTP_400_BAD_REQUEST,
}


def _get_status_for_exception(exc: Exception) -> int:
    for error_type, status_code in ERROR_TO_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    raise LookupError(f"No status mapped for {type(exc).__name__}")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application."""

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("Validation failed", extra={
            "method": request.method,
            "path": request.url.path,
            "errors": exc.errors,
        })
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": exc.errors},
        )

    async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        status_code = _get_status_for_exception(exc)
        logger.warning("Domain exception", extra={
            "method": request.method,
            "path": request.url.path,
            "error": str(exc),
            "status_code": status_code,
        })
        return _error_response(status_code, str(exc))

    for error_type in ERROR_TO_STATUS:
        app.add_exception_handler(error_type, domain_exception_handler)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and unsupported methods on known paths look the same to clients
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _error_response(status.HTTP_404_NOT_FOUND, ENDPOINT_NOT_FOUND)
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            exc_info=exc,
            extra={"method": request.method, "path": request.url.path},
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)
