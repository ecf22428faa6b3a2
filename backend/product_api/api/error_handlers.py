"""Error Handlers - global exception handlers for the product API.

Invariants:
    - ProductApiError → 200 with {"data": null, "errors": [...]} (GraphQL envelope)
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Extracted from main.py; registered once by create_app
    - Request errors share the envelope of engine errors, so clients parse one shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from product_api.core.errors import ProductApiError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_product_api_error_handler(app)
    _register_generic_error_handler(app)


def _register_product_api_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(ProductApiError)
    async def product_api_error_handler(request: Request, exc: ProductApiError):
        """Package domain errors into the GraphQL result envelope."""
        logger.error(
            f"errors: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"data": None, "errors": [exc.to_graphql_error()]},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
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
