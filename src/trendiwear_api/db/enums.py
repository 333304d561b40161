"""Helpers for configuring SQLAlchemy Enum columns."""

from __future__ import annotations

from enum import Enum

from sqlalchemy import Enum as SAEnum


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Return the list of values for ``enum_cls`` suitable for SAEnum."""

    return [member.value for member in enum_cls]


def string_enum(enum_cls: type[Enum], *, name: str, length: int = 20) -> SAEnum:
    """Store ``enum_cls`` as VARCHAR + CHECK so every backend behaves the same."""

    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=length,
        values_callable=enum_values,
        validate_strings=True,
    )


__all__ = ["enum_values", "string_enum"]
