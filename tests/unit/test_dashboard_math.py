from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from trendiwear_api.features.dashboard.service import month_windows, monthly_growth


def test_month_windows_mid_year() -> None:
    previous, current, following = month_windows(datetime(2026, 6, 15, 9, 30, tzinfo=UTC))

    assert previous == datetime(2026, 5, 1, tzinfo=UTC)
    assert current == datetime(2026, 6, 1, tzinfo=UTC)
    assert following == datetime(2026, 7, 1, tzinfo=UTC)


def test_month_windows_wrap_around_the_year() -> None:
    previous, current, _ = month_windows(datetime(2026, 1, 3, tzinfo=UTC))
    _, december, following = month_windows(datetime(2026, 12, 31, tzinfo=UTC))

    assert previous == datetime(2025, 12, 1, tzinfo=UTC)
    assert current == datetime(2026, 1, 1, tzinfo=UTC)
    assert december == datetime(2026, 12, 1, tzinfo=UTC)
    assert following == datetime(2027, 1, 1, tzinfo=UTC)


def test_month_windows_normalise_to_utc() -> None:
    nairobi = timezone(timedelta(hours=3))
    _, current, _ = month_windows(datetime(2026, 3, 1, 1, 0, tzinfo=nairobi))

    assert current == datetime(2026, 2, 1, tzinfo=UTC)


def test_monthly_growth() -> None:
    assert monthly_growth(15, 10) == 50.0
    assert monthly_growth(5, 10) == -50.0
    assert monthly_growth(7, 0) == 0.0
