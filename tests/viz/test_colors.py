from __future__ import annotations

import re
from datetime import date

import pytest

from lakeviz.core.constants import LAKE_PALETTES
from lakeviz.core.grammar import Season
from lakeviz.viz.colors import (
    expand_palette,
    hex_to_hsl,
    hsl_to_hex,
    lake_palette,
    season_color,
    season_of,
    series_color,
    time_gradient,
)
from lakeviz.viz.legend import gradient_endpoints

_HEX = re.compile(r"^#[0-9a-f]{6}$")


@pytest.mark.parametrize(
    ("month", "season"),
    [
        (1, Season.WINTER),
        (3, Season.SPRING),
        (5, Season.SPRING),
        (6, Season.SUMMER),
        (8, Season.SUMMER),
        (9, Season.FALL),
        (11, Season.FALL),
        (12, Season.WINTER),
    ],
)
def test_season_of_month_boundaries(month: int, season: Season) -> None:
    assert season_of(date(2024, month, 15)) is season


def test_season_color_uses_season_table() -> None:
    assert season_color("2024-07-04") == "#FF9800"
    assert season_color("2024-01-04T12:00:00") == "#2196F3"


def test_hex_hsl_conversion_handles_short_form() -> None:
    h, s, l = hex_to_hsl("#fff")
    assert (s, l) == (0.0, 1.0)
    assert hsl_to_hex(*hex_to_hsl("#4ECDC4")) == "#4ecdc4"
    with pytest.raises(ValueError):
        hex_to_hsl("#12345")


def test_time_gradient_endpoints_and_zero_span() -> None:
    start, end = gradient_endpoints()
    assert start == "#2626d9"
    assert end == "#26d926"
    assert time_gradient("2024-01-01", "2024-01-01", "2024-12-31") == start
    assert time_gradient("2024-12-31", "2024-01-01", "2024-12-31") == end
    # min == max maps to the start color instead of dividing by zero
    assert time_gradient("2024-05-05", "2024-05-05", "2024-05-05") == start
    # outside the span clamps
    assert time_gradient("2025-06-01", "2024-01-01", "2024-12-31") == end


def test_expand_palette_truncates_and_extends() -> None:
    base = ["#fff", "#000"]
    assert expand_palette(base, 0) == []
    assert expand_palette([], 4) == []
    assert expand_palette(base, 1) == ["#fff"]

    five = expand_palette(base, 5)
    assert len(five) == 5
    assert five[:2] == base
    assert all(_HEX.match(c) for c in five[2:])
    assert len(set(five)) == 5


def test_expand_palette_is_deterministic_and_prefix_stable() -> None:
    base = list(LAKE_PALETTES["Gunflint"])
    assert expand_palette(base, 9) == expand_palette(base, 9)
    assert expand_palette(base, 9)[:6] == expand_palette(base, 6)


def test_lake_palette_unknown_lake_uses_fallback() -> None:
    assert lake_palette("Gunflint", 2) == ["#FF6B6B", "#FF8E53"]
    assert lake_palette("Saganaga", 1) == ["#7F8C8D"]
    assert lake_palette("Saganaga", 1, {"Saganaga": ["#010203"]}) == ["#010203"]


def test_series_color_depends_only_on_ordinal() -> None:
    colors = lake_palette("Hague", 8)
    assert [series_color("Hague", i, 8) for i in range(8)] == colors
    # A short lake_count never indexes past the palette
    assert _HEX.match(series_color("Hague", 10, 3).lower())
