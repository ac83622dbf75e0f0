"""
Color model: deterministic date/index → color mappings. No state.

- season_of / season_color: calendar month buckets (Mar-May spring, Jun-Aug summer,
  Sep-Nov fall, Dec-Feb winter).
- time_gradient: hue interpolated from GRADIENT_HUE_START to GRADIENT_HUE_END across the
  normalized position of a date in [min_date, max_date].
- expand_palette: base colors first, then cyclic variants perturbed by
  (index mod base_count, index div base_count).

HSL math goes through the stdlib colorsys module (HLS argument order).
"""

from __future__ import annotations

import colorsys
from collections.abc import Mapping, Sequence

from lakeviz.core.constants import (
    FALLBACK_PALETTE,
    GRADIENT_HUE_END,
    GRADIENT_HUE_START,
    GRADIENT_LIGHTNESS,
    GRADIENT_SATURATION,
    LAKE_PALETTES,
    PALETTE_HUE_STEP,
    SEASON_COLORS,
)
from lakeviz.core.dates import DateLike, date_key, parse_timestamp
from lakeviz.core.grammar import Season

__all__ = [
    "hex_to_hsl",
    "hsl_to_hex",
    "season_of",
    "season_color",
    "time_gradient",
    "expand_palette",
    "lake_palette",
    "series_color",
]


def hex_to_hsl(color: str) -> tuple[float, float, float]:
    """
    Parse '#rgb' or '#rrggbb' into (hue degrees, saturation 0-1, lightness 0-1).

    Raises:
        ValueError: If color is not a 3- or 6-digit hex string.
    """
    s = color.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"expected #rgb or #rrggbb (got {color!r})")
    r, g, b = (int(s[i : i + 2], 16) / 255.0 for i in (0, 2, 4))
    h, l, sat = colorsys.rgb_to_hls(r, g, b)
    return (h * 360.0, sat, l)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, l, s)
    return "#{:02x}{:02x}{:02x}".format(
        *(min(255, max(0, round(c * 255))) for c in (r, g, b))
    )


def season_of(value: DateLike) -> Season:
    month = date_key(value).month
    if 3 <= month <= 5:
        return Season.SPRING
    if 6 <= month <= 8:
        return Season.SUMMER
    if 9 <= month <= 11:
        return Season.FALL
    return Season.WINTER


def season_color(value: DateLike) -> str:
    return SEASON_COLORS[season_of(value).value]


def time_gradient(value: DateLike, min_date: DateLike, max_date: DateLike) -> str:
    """
    Color for `value` on the earliest→latest gradient.

    A zero-length span (min_date == max_date) maps everything to the start color; positions
    outside the span are clamped.
    """
    t = parse_timestamp(value)
    lo = parse_timestamp(min_date)
    hi = parse_timestamp(max_date)
    total = (hi - lo).total_seconds()
    ratio = 0.0 if total <= 0 else (t - lo).total_seconds() / total
    ratio = min(1.0, max(0.0, ratio))
    hue = GRADIENT_HUE_START + ratio * (GRADIENT_HUE_END - GRADIENT_HUE_START)
    return hsl_to_hex(hue, GRADIENT_SATURATION, GRADIENT_LIGHTNESS)


def expand_palette(base_colors: Sequence[str], count: int) -> list[str]:
    """
    Return exactly `count` colors derived from `base_colors`.

    Indices below len(base_colors) reuse the base colors as given. Index i beyond that
    takes base color i mod n and shifts it by variation v = i div n: hue +25°·v, saturation
    −0.1·v (floor 0.3), lightness ±0.1 alternating with v (clamped to [0.3, 0.8]).
    """
    if count <= 0 or not base_colors:
        return []
    n = len(base_colors)
    if count <= n:
        return list(base_colors[:count])

    hsl_base = [hex_to_hsl(c) for c in base_colors]
    colors = list(base_colors)
    for i in range(n, count):
        h, s, l = hsl_base[i % n]
        variation = i // n
        shift = 0.1 if variation % 2 == 0 else -0.1
        colors.append(
            hsl_to_hex(
                (h + variation * PALETTE_HUE_STEP) % 360.0,
                max(0.3, s - variation * 0.1),
                max(0.3, min(0.8, l + shift)),
            )
        )
    return colors


def lake_palette(
    lake: str,
    count: int,
    palettes: Mapping[str, Sequence[str]] | None = None,
) -> list[str]:
    """Expanded palette for a lake; unknown lakes use FALLBACK_PALETTE."""
    table = LAKE_PALETTES if palettes is None else palettes
    return expand_palette(table.get(lake, FALLBACK_PALETTE), count)


def series_color(
    lake: str,
    ordinal: int,
    lake_count: int,
    palettes: Mapping[str, Sequence[str]] | None = None,
) -> str:
    """
    Line color of a series: its ordinal's entry in the lake palette.

    The color depends only on the series' place among all of the lake's sessions, so it
    does not shift when other series are hidden.
    """
    colors = lake_palette(lake, max(lake_count, ordinal + 1), palettes)
    return colors[ordinal]
