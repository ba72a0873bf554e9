"""Global exception handlers.

AppError subclasses render their own envelope; FastAPI's request validation
and database integrity errors are mapped onto the same shape. Anything else
becomes a 500 without internal details.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.core.errors import AppError, FieldError, SchemaViolation, ValidationFailure

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.warning(
            "%s: %s", exc.code, exc.message,
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(SchemaViolation)
    async def schema_violation_handler(request: Request, exc: SchemaViolation):
        failure = exc.to_failure()
        logger.warning(
            "Storage rejected %s: %s", exc.field, exc.message,
            extra={"error_code": failure.code, "path": request.url.path},
        )
        return JSONResponse(status_code=failure.http_status, content=failure.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        failure = ValidationFailure([
            FieldError(
                ".".join(str(part) for part in e["loc"] if part != "body") or "body",
                e["msg"],
                e["type"],
            )
            for e in exc.errors()
        ])
        logger.warning(
            "Request validation failed on %s", request.url.path,
            extra={"error_code": failure.code, "path": request.url.path,
                   "field_count": len(failure.details)},
        )
        return JSONResponse(status_code=failure.http_status, content=failure.to_response())

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(
            "Integrity error on %s: %s", request.url.path, exc.orig,
            extra={"error_code": "DUPLICATE_RECORD", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": {"code": "DUPLICATE_RECORD",
                               "message": "Record conflicts with existing data"}},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc,
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": {"code": "INTERNAL_ERROR",
                               "message": "An unexpected error occurred"}},
        )
