from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from uuid import uuid4

import pytest

from trendiwear_api.features.professional_analytics.metrics import (
    SaleLine,
    conversion_rate,
    day_part,
    monthly_revenue,
    peak_hours,
    percent_change,
    period_window,
    previous_window,
    top_products,
)

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=UTC)


def _line(product_id, name, amount, *, order_id=None, when=NOW, status="PENDING"):
    return SaleLine(
        order_id=order_id or uuid4(),
        product_id=product_id,
        product_name=name,
        customer_id=uuid4(),
        quantity=1,
        amount=amount,
        status=status,
        created_at=when,
    )


@pytest.mark.parametrize(
    ("period", "days"),
    [("7d", 7), ("30d", 30), ("90d", 90), ("1y", 365)],
)
def test_period_window_spans_the_period(period, days) -> None:
    start, end = period_window(period, NOW)

    assert end == NOW
    assert end - start == timedelta(days=days)


def test_period_window_one_year_from_leap_day() -> None:
    start, _ = period_window("1y", datetime(2028, 2, 29, tzinfo=UTC))

    assert start == datetime(2027, 2, 28, tzinfo=UTC)


def test_period_window_normalises_to_utc() -> None:
    nairobi = timezone(timedelta(hours=3))
    _, end = period_window("7d", datetime(2026, 6, 15, 15, 0, tzinfo=nairobi))

    assert end == NOW
    assert end.tzinfo is UTC


def test_previous_window_is_adjacent_and_same_length() -> None:
    start, end = period_window("30d", NOW)
    prev_start, prev_end = previous_window(start, end)

    assert prev_end == start
    assert prev_end - prev_start == end - start


@pytest.mark.parametrize(
    ("hour", "part"),
    [
        (0, "night"),
        (5, "night"),
        (6, "morning"),
        (11, "morning"),
        (12, "afternoon"),
        (17, "afternoon"),
        (18, "evening"),
        (21, "evening"),
        (22, "night"),
    ],
)
def test_day_part_boundaries(hour, part) -> None:
    assert day_part(hour) == part


def test_peak_hours_as_percentages() -> None:
    moments = [
        datetime(2026, 6, 1, 7, tzinfo=UTC),
        datetime(2026, 6, 1, 13, tzinfo=UTC),
        datetime(2026, 6, 1, 14, tzinfo=UTC),
        datetime(2026, 6, 1, 23, tzinfo=UTC),
    ]

    assert peak_hours(moments) == {"morning": 25, "afternoon": 50, "evening": 0, "night": 25}
    assert peak_hours([]) == {"morning": 0, "afternoon": 0, "evening": 0, "night": 0}


def test_percent_change_and_conversion_rate() -> None:
    assert percent_change(3, 2) == 50.0
    assert percent_change(1, 3) == -66.67
    assert percent_change(4, 0) == 0.0
    assert conversion_rate(0, 5) == 0.0
    assert conversion_rate(300, 7) == 2.33


def test_monthly_revenue_groups_by_utc_month() -> None:
    product = uuid4()
    lines = [
        _line(product, "Kitenge dress", 40.0, when=datetime(2026, 5, 31, 23, tzinfo=UTC)),
        _line(product, "Kitenge dress", 10.5, when=datetime(2026, 6, 1, 1, tzinfo=UTC)),
        _line(product, "Kitenge dress", 9.5, when=datetime(2026, 6, 20, tzinfo=UTC)),
    ]

    assert monthly_revenue(lines) == {"2026-05": 40.0, "2026-06": 20.0}


def test_top_products_ranks_by_revenue_and_counts_orders() -> None:
    dress, scarf, belt = uuid4(), uuid4(), uuid4()
    order = uuid4()
    lines = [
        _line(dress, "Dress", 120.0, order_id=order),
        _line(dress, "Dress", 80.0, order_id=order),
        _line(dress, "Dress", 100.0),
        _line(scarf, "Scarf", 250.0),
        _line(belt, "Belt", 5.0),
    ]

    ranked = top_products(lines, limit=2)

    assert [row["name"] for row in ranked] == ["Dress", "Scarf"]
    assert ranked[0]["revenue"] == 300.0
    assert ranked[0]["orders"] == 2
    assert ranked[1]["orders"] == 1
