"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses using the status code each
error carries. No stack traces or internal details are exposed
to clients. All error responses use the {"error": ...} shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from books_api.domain.books.errors import BookDomainError
from books_api.shared.security.rate_limiting import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BookDomainError)
    async def handle_book_domain(
        _request: Request, exc: BookDomainError
    ) -> JSONResponse:
        """Translate a domain error into its carried status and message."""
        logger.warning("%s: %s", type(exc).__name__, exc.message)
        return _error_response(exc.status_code, exc.message)

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
