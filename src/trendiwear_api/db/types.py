"""Column types for marketplace identifiers and timestamps."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.dialects import postgresql
from sqlalchemy.types import CHAR, DateTime, TypeDecorator

__all__ = ["UUIDType", "UTCDateTime"]


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset, so naive values are read back as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class UUIDType(TypeDecorator):
    """Row identifiers: native ``uuid`` on PostgreSQL, ``CHAR(36)`` text on SQLite.

    Binds accept a ``uuid.UUID`` or its string form; reads always yield
    ``uuid.UUID`` so path parameters and foreign keys compare equal.
    """

    impl = CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect: Any):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(postgresql.UUID(as_uuid=True))
        return dialect.type_descriptor(CHAR(36))

    def process_bind_param(self, value: Any, dialect: Any):
        if value is None:
            return None
        value = value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))
        return value if dialect.name == "postgresql" else str(value)

    def process_result_value(self, value: Any, dialect: Any):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(str(value))

    @property
    def python_type(self) -> type[uuid.UUID]:
        return uuid.UUID


class UTCDateTime(TypeDecorator):
    """Order, booking and audit times, stored and returned in UTC."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any):
        return _as_utc(value) if isinstance(value, datetime) else value

    def process_result_value(self, value: Any, dialect: Any):
        return _as_utc(value) if isinstance(value, datetime) else value
