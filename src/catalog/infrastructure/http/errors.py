"""Exception handlers translating errors into HTTP responses.

    EntityNotFoundError -> 404
    ValidationError     -> 400
    anything else       -> 500
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.infrastructure.http.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(status=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def handle_not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    # the server logs the traceback itself once this handler returns
    logger.error(
        "Unhandled error on %s %s: %r", request.method, request.url.path, exc
    )
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        f"An unexpected error occurred: {exc}",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EntityNotFoundError, handle_not_found)
    app.add_exception_handler(ValidationError, handle_validation)
    app.add_exception_handler(Exception, handle_unexpected)
