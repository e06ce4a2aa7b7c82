"""Global exception handlers for the calculator API.

Calculation failures are never exceptions: they come back from the calculator
as values. What reaches these handlers is a malformed request body or a bug.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

import schemas

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "status_code": 400},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc).model_dump(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "status_code": 500},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def build_validation_error_response(exc: RequestValidationError) -> schemas.InvalidRequestResponse:
    return schemas.InvalidRequestResponse(
        error="Invalid request data",
        details=[
            schemas.FieldError(
                field=".".join(str(loc) for loc in e["loc"]),
                message=e["msg"],
            )
            for e in exc.errors()
        ],
    )
