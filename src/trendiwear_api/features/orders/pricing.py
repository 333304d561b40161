"""Order pricing: coupon discounts, tax and totals."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from trendiwear_api.models import Coupon, CouponType


@dataclass(frozen=True)
class OrderTotals:
    subtotal: float
    shipping_cost: float
    discount: float
    tax: float
    total_price: float


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def coupon_applies(coupon: Coupon, *, subtotal: float, now: datetime) -> bool:
    """Whether ``coupon`` is active, inside its validity window and meets its minimum."""

    if not coupon.is_active:
        return False
    if coupon.valid_from is not None and _aware(coupon.valid_from) > now:
        return False
    if coupon.valid_until is not None and _aware(coupon.valid_until) < now:
        return False
    if coupon.min_order_amount and subtotal < coupon.min_order_amount:
        return False
    return True


def coupon_discount(coupon: Coupon, *, subtotal: float, shipping_cost: float) -> float:
    kind = CouponType(coupon.type)
    if kind is CouponType.PERCENTAGE:
        discount = subtotal * coupon.value / 100
        if coupon.max_discount:
            discount = min(discount, coupon.max_discount)
        return discount
    if kind is CouponType.FIXED_AMOUNT:
        return min(coupon.value, subtotal)
    return shipping_cost


def order_totals(
    *, subtotal: float, shipping_cost: float, discount: float, tax_rate: float
) -> OrderTotals:
    tax = (subtotal - discount) * tax_rate
    return OrderTotals(
        subtotal=round(subtotal, 2),
        shipping_cost=round(shipping_cost, 2),
        discount=round(discount, 2),
        tax=round(tax, 2),
        total_price=round(subtotal + shipping_cost + tax - discount, 2),
    )


__all__ = ["OrderTotals", "coupon_applies", "coupon_discount", "order_totals"]
