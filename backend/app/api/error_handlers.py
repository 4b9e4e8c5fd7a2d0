"""Error Handlers: global exception handlers for the Tutorials API.

Invariants:
    - TutorialAPIError -> its http_status with {"message": ...}
    - RequestValidationError (malformed JSON body) -> 400 {"message": ...}
    - Exception (catch-all) -> 500, never leaks internal details
    - Every error body has the shape {"message": str}

Design Decisions:
    - Three-layer handler: domain (TutorialAPIError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import TutorialAPIError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TutorialAPIError)
    async def api_error_handler(request: Request, exc: TutorialAPIError):
        """Handle all domain and storage errors."""
        extra = {**exc.log_extra(), "path": request.url.path}
        if exc.severity == ErrorSeverity.CRITICAL:
            logger.error(
                f"{type(exc).__name__}: {exc.message}",
                extra=extra, exc_info=exc,
            )
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle unparseable request data."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request data"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred"},
        )
