"""Translate pipeline errors into JSON:API error documents."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from rolodex_backend.api.models import ErrorObject, ErrorResponse
from rolodex_backend.resources import RolodexError

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int, title: str, detail: str, meta: dict | None = None
) -> JSONResponse:
    document = ErrorResponse(
        errors=[
            ErrorObject(status=str(status_code), title=title, detail=detail, meta=meta)
        ]
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(document, exclude_none=True),
    )


async def handle_rolodex_error(request: Request, exc: RolodexError) -> JSONResponse:
    """Answer a pipeline error with its mapped status code."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return _error_response(exc.status_code, exc.title, "The request could not be completed")
    return _error_response(exc.status_code, exc.title, str(exc), exc.detail or None)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unparseable request bodies as client errors."""
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "Bad Request",
        "Request body could not be parsed",
        {"errors": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on *app*."""
    app.add_exception_handler(RolodexError, handle_rolodex_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)


__all__ = ["register_error_handlers"]
