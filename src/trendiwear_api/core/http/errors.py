"""Exception handlers that translate auth errors to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse

from trendiwear_api.common.exceptions import error_body

from ..auth.errors import AuthenticationError, PermissionDeniedError


def _handle_authentication_error(_request, exc: AuthenticationError) -> JSONResponse:
    """Translate auth failures into HTTP 401 responses."""

    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body(str(exc) or "Unauthorized"),
        headers={"WWW-Authenticate": "Bearer"},
    )


def _handle_permission_error(_request, exc: PermissionDeniedError) -> JSONResponse:
    """Translate permission denials into HTTP 403 responses."""

    extra = {"requiredRoles": exc.required_roles} if exc.required_roles else {}
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content=error_body(str(exc) or "Forbidden", **extra),
    )


def register_auth_exception_handlers(app: FastAPI) -> None:
    """Attach auth handlers to the FastAPI app."""

    app.add_exception_handler(AuthenticationError, _handle_authentication_error)
    app.add_exception_handler(PermissionDeniedError, _handle_permission_error)
