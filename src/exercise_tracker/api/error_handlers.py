"""Exception handlers rendering every failure as a plain-text response."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from exercise_tracker.domain.errors import (
    ExerciseTrackerError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on the FastAPI app."""

    @app.exception_handler(ExerciseTrackerError)
    async def tracker_error_handler(
        request: Request, exc: ExerciseTrackerError
    ) -> PlainTextResponse:
        return _error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        return _error_response(request, ValidationError(field_errors(exc.errors())))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        if exc.status_code in {
            status.HTTP_404_NOT_FOUND,
            status.HTTP_405_METHOD_NOT_ALLOWED,
        }:
            return _error_response(request, NotFoundError())
        return _error_response(
            request,
            ExerciseTrackerError(str(exc.detail), status_code=exc.status_code),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(
        request: Request, exc: Exception
    ) -> PlainTextResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return PlainTextResponse(
            ExerciseTrackerError.default_message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def field_errors(errors: list[dict]) -> dict[str, str]:
    """Map pydantic error entries to ``field -> message``, first error wins."""
    mapped: dict[str, str] = {}
    for error in errors:
        loc = [
            str(part)
            for part in error.get("loc", ())
            if part not in {"body", "query"}
        ]
        mapped.setdefault(".".join(loc) or "body", str(error.get("msg", "invalid")))
    return mapped or {"body": "invalid request"}


def _error_response(request: Request, exc: ExerciseTrackerError) -> PlainTextResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "Request failed: %s",
            exc.message,
            exc_info=exc,
            extra={"path": request.url.path},
        )
    else:
        logger.warning(
            "Request rejected: %s",
            exc.message,
            extra={"path": request.url.path, "status": exc.status_code},
        )
    return PlainTextResponse(exc.message, status_code=exc.status_code)
