"""Offset pagination helpers shared by list endpoints."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fastapi import Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import ColumnElement

from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.settings import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

T = TypeVar("T")


class Pagination(BaseSchema):
    page: int
    limit: int
    total: int
    pages: int


class Page(BaseSchema, Generic[T]):
    items: list[T]
    pagination: Pagination


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def page_params(default_limit: int = DEFAULT_PAGE_LIMIT):
    """Return a dependency reading ``page``/``limit`` with a per-route default."""

    def dependency(
        page: int = Query(1, ge=1, description="1-based page number"),
        limit: int = Query(
            default_limit,
            ge=1,
            le=MAX_PAGE_LIMIT,
            description=f"Items per page (max {MAX_PAGE_LIMIT})",
        ),
    ) -> PageParams:
        return PageParams(page=page, limit=limit)

    return dependency


def build_pagination(*, page: int, limit: int, total: int) -> Pagination:
    pages = math.ceil(total / limit) if total > 0 else 0
    return Pagination(page=page, limit=limit, total=total, pages=pages)


@dataclass(frozen=True)
class PageResult(Generic[T]):
    rows: Sequence[T]
    pagination: Pagination


async def paginate_query(
    session: AsyncSession,
    stmt: Select,
    *,
    params: PageParams,
    order_by: Sequence[ColumnElement[Any]],
) -> PageResult[Any]:
    """Count ``stmt`` and return one ordered page of its scalar rows."""

    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.execute(count_stmt)).scalar_one()

    result = await session.execute(
        stmt.order_by(*order_by).limit(params.limit).offset(params.offset)
    )
    rows = result.scalars().unique().all()

    return PageResult(
        rows=rows,
        pagination=build_pagination(page=params.page, limit=params.limit, total=total),
    )


__all__ = [
    "Page",
    "PageParams",
    "PageResult",
    "Pagination",
    "build_pagination",
    "page_params",
    "paginate_query",
]
