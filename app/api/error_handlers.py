"""Error Handlers — global exception handlers for the Users API.

Invariants:
    - ApiError → structured JSON with error code, message, severity
    - Unknown route / wrong method → same envelope (404 / 405), never Starlette's plain detail
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ApiError), HTTP/validation, catch-all (Exception)
    - Kept out of main.py so the app factory stays a list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import (
    ApiError, ErrorCategory, ErrorSeverity, MethodNotAllowedError,
    RouteNotFoundError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        """Handle all typed API errors."""
        return _api_error_response(request, exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404 / 405 raised by the router)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Map router HTTP errors onto the ApiError envelope."""
        path = request.url.path
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            err: ApiError = RouteNotFoundError(path)
        elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            err = MethodNotAllowedError(request.method, path)
        else:
            return JSONResponse(
                status_code=exc.status_code,
                content={"error": {
                    "code": "HTTP_ERROR",
                    "message": str(exc.detail),
                    "category": ErrorCategory.ROUTING.value,
                    "severity": ErrorSeverity.ERROR.value,
                }},
                headers=getattr(exc, "headers", None),
            )
        return _api_error_response(
            request, err, headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _api_error_response(
    request: Request, exc: ApiError, headers: dict | None = None,
) -> JSONResponse:
    """Log an ApiError at its severity and render the envelope."""
    if exc.context.path is None:
        exc.context.path = request.url.path
    level = (
        logging.WARNING
        if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
        else logging.ERROR
    )
    logger.log(
        level, f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code, "path": request.url.path,
            "method": request.method, "status_code": exc.http_status,
        },
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(),
        headers=headers,
    )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
