from __future__ import annotations

from types import SimpleNamespace

import pytest

from trendiwear_api.features.cart.service import summarize


def _line(price: float, quantity: int) -> SimpleNamespace:
    return SimpleNamespace(product=SimpleNamespace(price=price), quantity=quantity)


def test_summarize_counts_items_and_applies_tax() -> None:
    summary = summarize([_line(100.0, 2), _line(25.5, 1)], tax_rate=0.16)

    assert summary.item_count == 3
    assert summary.subtotal == 225.5
    assert summary.estimated_total == pytest.approx(261.58)


def test_summarize_empty_cart() -> None:
    summary = summarize([], tax_rate=0.16)

    assert summary.item_count == 0
    assert summary.subtotal == 0
    assert summary.estimated_total == 0
