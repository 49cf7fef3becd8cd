"""Error Handlers — global exception handlers for the catalog app.

Invariants:
    - CatalogError → its own http_status (404 not found, 500 store error)
    - RequestValidationError (malformed id in path or form) → 400
    - Exception (catch-all) → 500, never leaks internal details
    - HTML error page by default; JSON envelope when the client accepts only JSON

Design Decisions:
    - Three-layer handler: domain (CatalogError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so tests can build a bare app with the same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import CatalogError, ErrorSeverity
from app.infrastructure.templates import render

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _wants_json(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "application/json" in accept and "text/html" not in accept


def _error_response(
    request: Request, status_code: int, message: str, payload: dict,
):
    if _wants_json(request):
        return JSONResponse(status_code=status_code, content=payload)
    return render(
        "error.html", status_code=status_code, title="Error", message=message,
    )


def _register_catalog_error_handler(app: FastAPI) -> None:
    """Register catalog domain/infrastructure error handler."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle all catalog domain/infrastructure errors."""
        exc.context.path = request.url.path
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"CatalogError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return _error_response(
            request, exc.http_status, exc.message, exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed path/form values."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return _error_response(
            request, status.HTTP_400_BAD_REQUEST, "Invalid request data",
            _build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _error_response(
            request, status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
            {
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
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
