"""Logging configuration and helpers for the Trendiwear API.

This module configures console-style logging for the entire process and exposes
helpers for:

* binding a request-scoped correlation ID, and
* building consistent `extra` payloads for structured logs.

Everything uses the standard :mod:`logging` library. The only customization is
the formatter, which renders one human-readable line per log record, including
timestamp, level, logger name, correlation ID, and any `extra` fields as
``key=value`` pairs.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

from trendiwear_api.settings import Settings

# Request-scoped correlation ID, set/cleared by RequestLoggingMiddleware.
_CORRELATION_ID: ContextVar[str | None] = ContextVar(
    "trendiwear_correlation_id",
    default=None,
)

# Attributes already rendered by the base format (or noise from servers).
_STANDARD_ATTRS: set[str] = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "message",
    "asctime",
    "correlation_id",
    "taskName",
    "color_message",
}

_CONFIGURED_FLAG = "_trendiwear_configured"


class ConsoleLogFormatter(logging.Formatter):
    """Render log records as single-line console output.

    Example line:

        2026-03-02T10:15:00Z INFO  trendiwear_api.features.cart.service [cid=1f2e] cart.add.success
        user_id=... product_id=... quantity=2
    """

    _time_format = "%Y-%m-%dT%H:%M:%S"

    def __init__(self) -> None:
        fmt = "%(asctime)s %(levelname)-5s %(name)s [cid=%(correlation_id)s] %(message)s"
        super().__init__(fmt=fmt, datefmt=self._time_format)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        dt = datetime.fromtimestamp(record.created, tz=UTC)
        base = dt.strftime(datefmt or self._time_format)
        return f"{base}.{int(record.msecs):03d}Z"

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - std signature
        cid = getattr(record, "correlation_id", None) or _CORRELATION_ID.get() or "-"
        record.correlation_id = cid

        base = super().format(record)

        extras: list[str] = []
        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_"):
                continue
            extras.append(f"{key}={_format_extra_value(value)}")

        if extras:
            return f"{base} " + " ".join(extras)
        return base


def setup_logging(settings: Settings) -> None:
    """Configure root logging for the API process.

    Installs a single console StreamHandler and sets the root level from
    ``settings.logging_level`` (env: ``TRENDIWEAR_LOGGING_LEVEL``). Uvicorn,
    Alembic and SQLAlchemy loggers propagate into the same root logger.
    """
    root_logger = logging.getLogger()

    level = getattr(logging, settings.logging_level.upper(), logging.INFO)

    # Only fully configure once per process; subsequent calls just adjust level.
    if getattr(root_logger, _CONFIGURED_FLAG, False):
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(ConsoleLogFormatter())

    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    for name in (
        "uvicorn",
        "uvicorn.error",
        "uvicorn.access",
        "alembic",
        "alembic.runtime.migration",
        "sqlalchemy",
    ):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True

    setattr(root_logger, _CONFIGURED_FLAG, True)


def bind_request_context(correlation_id: str | None) -> None:
    """Bind a correlation ID to the logging context for the current request."""
    _CORRELATION_ID.set(correlation_id)


def clear_request_context() -> None:
    """Clear the request-scoped logging context."""
    _CORRELATION_ID.set(None)


def current_correlation_id() -> str | None:
    return _CORRELATION_ID.get()


def log_context(
    *,
    user_id: str | None = None,
    product_id: str | None = None,
    order_id: str | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a consistent `extra` payload for structured logs.

    Example:
        logger.info(
            "orders.create.success",
            extra=log_context(user_id=str(user.id), order_id=str(order.id)),
        )
    """
    ctx: dict[str, Any] = {}

    if user_id is not None:
        ctx["user_id"] = user_id
    if product_id is not None:
        ctx["product_id"] = product_id
    if order_id is not None:
        ctx["order_id"] = order_id

    for key, value in extra.items():
        ctx[key] = value

    return ctx


def _format_extra_value(value: Any) -> str:
    if isinstance(value, (int, float, bool)):
        return str(value)
    if value is None:
        return "null"
    return str(value)


__all__ = [
    "ConsoleLogFormatter",
    "bind_request_context",
    "clear_request_context",
    "current_correlation_id",
    "log_context",
    "setup_logging",
]
