from __future__ import annotations

from trendiwear_api.features.products.showcase import average_rating


def test_average_rating_without_reviews_is_zero() -> None:
    assert average_rating([]) == 0.0


def test_average_rating_is_the_mean() -> None:
    assert average_rating([5, 4, 3]) == 4.0
