from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from trendiwear_api.features.bookings.service import booking_end_time


def test_booking_end_time_adds_duration() -> None:
    start = datetime(2026, 7, 1, 10, 0, tzinfo=UTC)

    assert booking_end_time(start, 90) == datetime(2026, 7, 1, 11, 30, tzinfo=UTC)


def test_booking_end_time_treats_naive_start_as_utc() -> None:
    assert booking_end_time(datetime(2026, 7, 1, 23, 30), 60) == datetime(
        2026, 7, 2, 0, 30, tzinfo=UTC
    )


def test_booking_end_time_converts_offsets() -> None:
    start = datetime(2026, 7, 1, 12, 0, tzinfo=timezone(timedelta(hours=3)))

    assert booking_end_time(start, 30) == datetime(2026, 7, 1, 9, 30, tzinfo=UTC)
