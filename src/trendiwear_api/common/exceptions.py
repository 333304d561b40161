"""Centralized FastAPI exception handlers with structured logging.

Every error leaves the API as ``{"error": <message>}``; request validation
failures additionally carry an ``errors`` list with one item per field.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from trendiwear_api.common.logging import log_context

_UNHANDLED_LOGGER = logging.getLogger("trendiwear_api.errors")
_HTTP_LOGGER = logging.getLogger("trendiwear_api.http")


def error_body(message: Any, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"error": message}
    body.update(extra)
    return body


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected exceptions.

    Ensures that any unhandled error results in a JSON 500 response and an
    ERROR log with the stack trace. The exception text is never returned.
    """
    _UNHANDLED_LOGGER.exception(
        "unhandled_exception",
        extra=log_context(
            path=str(request.url.path),
            method=request.method,
            exception_type=type(exc).__name__,
            detail=str(exc),
        ),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handler for HTTPException instances.

    4xx responses are returned without logging; 5xx responses are logged at
    ERROR level.
    """
    if exc.status_code >= 500:
        _HTTP_LOGGER.error(
            "http_exception",
            extra=log_context(
                path=str(request.url.path),
                method=request.method,
                status_code=exc.status_code,
                detail=exc.detail,
            ),
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 responses."""

    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    first = errors[0] if errors else None
    message = (
        f"Invalid {first['field']}: {first['message']}"
        if first and first["field"]
        else "Invalid request"
    )
    _HTTP_LOGGER.debug(
        "request.validation_failed",
        extra=log_context(path=str(request.url.path), error_count=len(errors)),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, errors=errors),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Translate database constraint violations into 409 responses."""

    _HTTP_LOGGER.warning(
        "db.integrity_error",
        extra=log_context(
            path=str(request.url.path),
            method=request.method,
            detail=str(exc.orig),
        ),
    )
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body("The request conflicts with existing data."),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the shared error handlers to ``app``."""

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "error_body",
    "http_exception_handler",
    "integrity_error_handler",
    "register_exception_handlers",
    "unhandled_exception_handler",
    "validation_exception_handler",
]
