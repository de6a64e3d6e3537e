"""Error Handlers — global exception handlers for the LexiMap API.

Invariants:
    - LexiMapError → {"error": <message>} with the error's http_status
    - RequestValidationError → 400 {"error": "Invalid request"}
    - Exception (catch-all) → 500 {"error": "Server error"}, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (LexiMapError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py: one registration call keeps main.py wiring-only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from leximap.core.errors import LexiMapError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_leximap_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_leximap_error_handler(app: FastAPI) -> None:

    @app.exception_handler(LexiMapError)
    async def leximap_error_handler(request: Request, exc: LexiMapError):
        """Handle all LexiMap domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"LexiMapError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "error_code": "INTERNAL_ERROR",
                "path": request.url.path,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Server error"},
        )
