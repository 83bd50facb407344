"""Error Handlers — global exception handlers rendering the response envelope.

Invariants:
    - StorefrontError kinds map exhaustively: VALIDATION → 400, NOT_FOUND → 404,
      PERSISTENCE → 500; data carries the error message verbatim
    - HTTPException → envelope with the detail's status/data (route-level 400s, 404/405)
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details
    - StorefrontError is logged at the level of its severity, with to_dict() attached

Design Decisions:
    - match on ErrorKind with assert_never: adding a kind without a mapping is a
      type-check failure, not a silent 500
    - Extracted from main.py to keep the entry point small
"""

import logging
from http import HTTPStatus
from typing import assert_never

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.api.responses import envelope
from storefront.core.errors import ErrorKind, ErrorSeverity, StorefrontError
from storefront.core.validation import to_violation

logger = logging.getLogger(__name__)

_LOG_LEVEL_BY_SEVERITY = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def status_for(kind: ErrorKind) -> tuple[int, str]:
    """HTTP status code and status text for a service error kind."""
    match kind:
        case ErrorKind.VALIDATION:
            return status.HTTP_400_BAD_REQUEST, "Bad Request"
        case ErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND, "Not Found"
        case ErrorKind.PERSISTENCE:
            return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        case _:
            assert_never(kind)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_storefront_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_storefront_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        code, status_text = status_for(exc.kind)
        logger.log(
            _LOG_LEVEL_BY_SEVERITY[exc.severity],
            f"StorefrontError: {exc.message}",
            extra={
                "error_code": exc.code,
                "error": exc.to_dict(),
                "path": request.url.path,
                "method": request.method,
            },
        )
        return envelope(code, status_text, exc.message)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        if isinstance(detail, dict):
            status_text = detail.get("status", HTTPStatus(exc.status_code).phrase)
            data = detail.get("data")
        else:
            status_text = HTTPStatus(exc.status_code).phrase
            data = detail
        return envelope(exc.status_code, status_text, data)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return envelope(
            status.HTTP_400_BAD_REQUEST, "Bad Request",
            [v.describe() for v in map(to_violation, exc.errors())],
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all handler; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error",
            "An unexpected error occurred",
        )
