"""Date windows and aggregations behind the professional analytics views.

Everything here is pure so it can be tested without a database. Order lines
arrive as :class:`SaleLine` tuples already filtered to one professional.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from typing import Literal, NamedTuple
from uuid import UUID

Period = Literal["7d", "30d", "90d", "1y"]
DayPart = Literal["morning", "afternoon", "evening", "night"]

PERIOD_DAYS: dict[str, int] = {"7d": 7, "30d": 30, "90d": 90}
DAY_PARTS: tuple[DayPart, ...] = ("morning", "afternoon", "evening", "night")


class SaleLine(NamedTuple):
    order_id: UUID
    product_id: UUID
    product_name: str
    customer_id: UUID
    quantity: int
    amount: float
    status: str
    created_at: datetime


def _utc(moment: datetime) -> datetime:
    return moment.astimezone(UTC) if moment.tzinfo else moment.replace(tzinfo=UTC)


def period_window(period: Period, now: datetime) -> tuple[datetime, datetime]:
    """Return ``(start, now)`` for a reporting period ending at ``now``.

    ``1y`` steps back one calendar year; February 29 falls back to the 28th.
    """

    end = _utc(now)
    if period == "1y":
        try:
            start = end.replace(year=end.year - 1)
        except ValueError:
            start = end.replace(year=end.year - 1, day=28)
        return start, end
    return end - timedelta(days=PERIOD_DAYS[period]), end


def previous_window(start: datetime, end: datetime) -> tuple[datetime, datetime]:
    """The window of the same length immediately before ``[start, end)``."""

    return start - (end - start), start


def day_part(hour: int) -> DayPart:
    if 6 <= hour < 12:
        return "morning"
    if 12 <= hour < 18:
        return "afternoon"
    if 18 <= hour < 22:
        return "evening"
    return "night"


def peak_hours(moments: Iterable[datetime]) -> dict[str, int]:
    """Share of orders per part of the (UTC) day, as rounded percentages."""

    counts = Counter(day_part(_utc(moment).hour) for moment in moments)
    total = sum(counts.values())
    return {
        part: round(counts[part] / total * 100) if total else 0 for part in DAY_PARTS
    }


def percent_change(current: float, previous: float) -> float:
    if previous <= 0:
        return 0.0
    return round((current - previous) / previous * 100, 2)


def conversion_rate(views: int, sold: int) -> float:
    """Units sold per hundred product views."""

    if views <= 0:
        return 0.0
    return round(sold / views * 100, 2)


def monthly_revenue(lines: Iterable[SaleLine]) -> dict[str, float]:
    totals: dict[str, float] = defaultdict(float)
    for line in lines:
        totals[_utc(line.created_at).strftime("%Y-%m")] += line.amount
    return {month: round(totals[month], 2) for month in sorted(totals)}


def top_products(lines: Iterable[SaleLine], *, limit: int) -> list[dict[str, object]]:
    """Products ranked by revenue, each with the number of orders it appeared in."""

    revenue: dict[UUID, float] = defaultdict(float)
    orders: dict[UUID, set[UUID]] = defaultdict(set)
    names: dict[UUID, str] = {}
    for line in lines:
        revenue[line.product_id] += line.amount
        orders[line.product_id].add(line.order_id)
        names[line.product_id] = line.product_name
    ranked = sorted(revenue, key=lambda product_id: (-revenue[product_id], names[product_id]))
    return [
        {
            "product_id": product_id,
            "name": names[product_id],
            "revenue": round(revenue[product_id], 2),
            "orders": len(orders[product_id]),
        }
        for product_id in ranked[:limit]
    ]


__all__ = [
    "DAY_PARTS",
    "PERIOD_DAYS",
    "DayPart",
    "Period",
    "SaleLine",
    "conversion_rate",
    "day_part",
    "monthly_revenue",
    "peak_hours",
    "percent_change",
    "period_window",
    "previous_window",
    "top_products",
]
