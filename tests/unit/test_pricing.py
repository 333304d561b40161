from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from trendiwear_api.features.orders.pricing import (
    coupon_applies,
    coupon_discount,
    order_totals,
)
from trendiwear_api.models import Coupon, CouponType

NOW = datetime(2026, 5, 10, 12, 0, tzinfo=UTC)


def _coupon(**overrides) -> Coupon:
    values = {
        "code": "SAVE10",
        "type": CouponType.PERCENTAGE,
        "value": 10.0,
        "is_active": True,
    }
    values.update(overrides)
    return Coupon(**values)


def test_percentage_coupon_is_capped_by_max_discount() -> None:
    coupon = _coupon(value=50.0, max_discount=30.0)

    assert coupon_discount(coupon, subtotal=200.0, shipping_cost=5.0) == 30.0


def test_percentage_coupon_without_cap() -> None:
    assert coupon_discount(_coupon(), subtotal=250.0, shipping_cost=0.0) == pytest.approx(25.0)


def test_fixed_amount_coupon_never_exceeds_subtotal() -> None:
    coupon = _coupon(type=CouponType.FIXED_AMOUNT, value=80.0)

    assert coupon_discount(coupon, subtotal=50.0, shipping_cost=10.0) == 50.0
    assert coupon_discount(coupon, subtotal=120.0, shipping_cost=10.0) == 80.0


def test_free_shipping_coupon_discounts_the_shipping_cost() -> None:
    coupon = _coupon(type=CouponType.FREE_SHIPPING, value=0.0)

    assert coupon_discount(coupon, subtotal=99.0, shipping_cost=7.5) == 7.5


def test_coupon_applies_inside_window_and_above_minimum() -> None:
    coupon = _coupon(
        valid_from=NOW - timedelta(days=1),
        valid_until=NOW + timedelta(days=1),
        min_order_amount=100.0,
    )

    assert coupon_applies(coupon, subtotal=150.0, now=NOW)
    assert not coupon_applies(coupon, subtotal=99.99, now=NOW)


def test_coupon_rejected_when_inactive_or_outside_window() -> None:
    assert not coupon_applies(_coupon(is_active=False), subtotal=10.0, now=NOW)
    assert not coupon_applies(
        _coupon(valid_from=NOW + timedelta(hours=1)), subtotal=10.0, now=NOW
    )
    assert not coupon_applies(
        _coupon(valid_until=NOW - timedelta(seconds=1)), subtotal=10.0, now=NOW
    )


def test_coupon_window_accepts_naive_datetimes_as_utc() -> None:
    coupon = _coupon(valid_until=datetime(2026, 5, 11))

    assert coupon_applies(coupon, subtotal=10.0, now=NOW)


def test_order_totals_tax_the_discounted_subtotal() -> None:
    totals = order_totals(subtotal=200.0, shipping_cost=10.0, discount=20.0, tax_rate=0.16)

    assert totals.subtotal == 200.0
    assert totals.tax == pytest.approx(28.8)
    assert totals.total_price == pytest.approx(218.8)


def test_order_totals_round_to_cents() -> None:
    totals = order_totals(subtotal=33.333, shipping_cost=0.0, discount=0.0, tax_rate=0.16)

    assert totals.subtotal == 33.33
    assert totals.tax == 5.33
    assert totals.total_price == 38.67
