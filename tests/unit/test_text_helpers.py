from __future__ import annotations

from itertools import islice

from trendiwear_api.common.text import like_pattern, slug_candidates, slugify


def test_slugify_normalises_accents_and_punctuation() -> None:
    assert slugify("Café Couture & Co.") == "cafe-couture-co"
    assert slugify("  Summer   Drop 2026 ") == "summer-drop-2026"


def test_slugify_falls_back_for_empty_values() -> None:
    assert slugify("!!!") == "item"


def test_slug_candidates_append_numeric_suffixes() -> None:
    assert list(islice(slug_candidates("kitenge"), 3)) == ["kitenge", "kitenge-2", "kitenge-3"]


def test_like_pattern_escapes_wildcards() -> None:
    assert like_pattern(" 50%_Off ") == "%50\\%\\_off%"
