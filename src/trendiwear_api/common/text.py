"""Small text helpers for slugs and search terms."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator
from itertools import count

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Return a lowercase, dash-separated ASCII slug for ``value``."""

    normalized = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    slug = _NON_SLUG.sub("-", normalized.lower()).strip("-")
    return slug or "item"


def slug_candidates(base: str) -> Iterator[str]:
    """Yield ``base`` then ``base-2``, ``base-3`` and so on."""

    yield base
    for suffix in count(2):
        yield f"{base}-{suffix}"


def like_pattern(term: str) -> str:
    """Return a case-insensitive ``LIKE`` pattern matching ``term`` as a substring."""

    escaped = term.strip().lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


__all__ = ["like_pattern", "slug_candidates", "slugify"]
