"""Error Handlers: global exception handlers for the Postboard API.

Invariants:
    - PostboardError -> exc.http_status with exc.to_response() as body
    - RequestValidationError -> 400 {"error": "Invalid request data"}
    - Starlette HTTPException (unknown route, wrong method) -> {"error": detail}
    - Exception (catch-all) -> 500 {"error": "Internal server error"}, never leaks detail

Design Decisions:
    - Client errors log at WARNING, storage/internal errors at ERROR with traceback
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from postboard.core.errors import (
    INTERNAL_ERROR_MESSAGE, ErrorSeverity, PostboardError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_postboard_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_postboard_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PostboardError)
    async def postboard_error_handler(request: Request, exc: PostboardError):
        """Handle all Postboard domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.severity == ErrorSeverity.CRITICAL:
            logger.error(
                f"PostboardError: {exc.message}", extra=extra,
                exc_info=exc.__cause__ is not None,
            )
        else:
            logger.warning(f"PostboardError: {exc.message}", extra=extra)
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
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data"},
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
