"""SQL filter builders shared by list endpoints."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from sqlalchemy import String, cast, false, or_
from sqlalchemy.sql.elements import ColumnElement

from .text import like_pattern


def split_csv(raw: str | None) -> list[str]:
    """Split a comma separated query value, dropping blanks."""

    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def json_list_contains_any(column: Any, values: Iterable[str]) -> ColumnElement[bool]:
    """Match rows whose JSON string array ``column`` holds at least one of ``values``.

    Each value is encoded with ``json.dumps`` so the pattern carries the same
    quoting and ``\\uXXXX`` escapes as the stored array text.
    """

    clauses = [
        cast(column, String).ilike(like_pattern(json.dumps(value.strip().lower())), escape="\\")
        for value in values
    ]
    if not clauses:
        return false()
    return or_(*clauses)


__all__ = ["json_list_contains_any", "split_csv"]
