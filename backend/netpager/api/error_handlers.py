"""Error Handlers: global exception handlers for the netpager API.

Invariants:
    - NetPagerError → its own to_response() envelope and http_status
    - RequestValidationError → 400 with one entry per offending field
    - Exception (catch-all) → 500, never leaks internal details
    - 4xx logged as warning, 5xx as error

Design Decisions:
    - Kept out of main.py so tests can build a bare app with the same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from netpager.core.errors import ErrorCategory, ErrorSeverity, NetPagerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(NetPagerError, _handle_netpager_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _error_body(code: str, message: str, category: ErrorCategory,
                severity: ErrorSeverity, **extra) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


async def _handle_netpager_error(request: Request, exc: NetPagerError):
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code, "path": request.url.path,
            "capture_id": exc.context.capture_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True, extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
