"""Platform-wide statistics for the administrator dashboard."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.db import utc_now
from trendiwear_api.models import Order, OrderStatus, User, UserRole

from .schemas import DashboardStats

logger = logging.getLogger(__name__)


def month_windows(now: datetime) -> tuple[datetime, datetime, datetime]:
    """Return the UTC starts of the previous, current and next calendar months."""

    now = now.astimezone(UTC) if now.tzinfo else now.replace(tzinfo=UTC)
    current = datetime(now.year, now.month, 1, tzinfo=UTC)
    if now.month == 1:
        previous = datetime(now.year - 1, 12, 1, tzinfo=UTC)
    else:
        previous = datetime(now.year, now.month - 1, 1, tzinfo=UTC)
    if now.month == 12:
        following = datetime(now.year + 1, 1, 1, tzinfo=UTC)
    else:
        following = datetime(now.year, now.month + 1, 1, tzinfo=UTC)
    return previous, current, following


def monthly_growth(current: int, previous: int) -> float:
    """Percent change from ``previous`` to ``current``; ``0`` when there is no baseline."""

    if previous <= 0:
        return 0.0
    return (current - previous) / previous * 100


class DashboardService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def stats(self, *, now: datetime | None = None) -> DashboardStats:
        previous, current, following = month_windows(now or utc_now())

        total_users = await self._scalar(select(func.count()).select_from(User))
        total_professionals = await self._scalar(
            select(func.count()).select_from(User).where(User.role == UserRole.PROFESSIONAL)
        )
        total_orders = await self._scalar(select(func.count()).select_from(Order))
        total_revenue = await self._scalar(select(func.coalesce(func.sum(Order.total_price), 0)))
        pending_orders = await self._scalar(
            select(func.count()).select_from(Order).where(Order.status == OrderStatus.PENDING)
        )
        this_month = await self._orders_between(current, following)
        last_month = await self._orders_between(previous, current)

        stats = DashboardStats(
            total_users=total_users,
            total_professionals=total_professionals,
            total_orders=total_orders,
            total_revenue=round(float(total_revenue), 2),
            monthly_growth=round(monthly_growth(this_month, last_month), 2),
            pending_orders=pending_orders,
        )
        logger.info(
            "dashboard.stats.success",
            extra=log_context(
                total_orders=total_orders, this_month=this_month, last_month=last_month
            ),
        )
        return stats

    async def _orders_between(self, start: datetime, end: datetime) -> int:
        stmt = (
            select(func.count())
            .select_from(Order)
            .where(Order.created_at >= start, Order.created_at < end)
        )
        return await self._scalar(stmt)

    async def _scalar(self, stmt):
        return (await self._session.execute(stmt)).scalar_one()


__all__ = ["DashboardService", "month_windows", "monthly_growth"]
