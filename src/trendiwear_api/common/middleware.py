"""Request-ID propagation, access logging and CORS for the marketplace API."""

from __future__ import annotations

import logging
import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from trendiwear_api.settings import Settings

from .logging import bind_request_context, clear_request_context, log_context

REQUEST_ID_HEADER = "X-Request-ID"

access_logger = logging.getLogger("trendiwear_api.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID (the caller's ``X-Request-ID`` when sent).

    The ID is bound to every log record emitted while the request runs and
    echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.correlation_id = request_id
        bind_request_context(request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            access_logger.error(
                "request.failed",
                extra=self._context(request, started, status_code=500),
            )
            raise
        finally:
            clear_request_context()

        access_logger.info(
            "request.complete",
            extra=self._context(request, started, status_code=response.status_code),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @staticmethod
    def _context(request: Request, started: float, *, status_code: int) -> dict:
        return log_context(
            correlation_id=request.state.correlation_id,
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=round((time.perf_counter() - started) * 1000.0, 2),
        )


def register_middleware(app: FastAPI, settings: Settings) -> None:
    origins = list(settings.server_cors_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=[REQUEST_ID_HEADER],
        )
    app.add_middleware(RequestLoggingMiddleware)


__all__ = ["REQUEST_ID_HEADER", "RequestLoggingMiddleware", "register_middleware"]
