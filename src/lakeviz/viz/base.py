"""
Shared helpers that prepare analysis frames for chart specs.

- attach_series_info: join session_index back to the visible Series list, adding
  series_id, ordinal, and the stable per-lake line color.
- attach_time_gradient / attach_season_colors: per-row color columns.
- to_values: JSON-safe records for inline chart data (dates as ISO strings).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any

import polars as pl

from lakeviz.series.registry import Series, SeriesRegistry

from .colors import season_color, series_color, time_gradient

__all__ = [
    "attach_series_info",
    "attach_time_gradient",
    "attach_season_colors",
    "to_values",
]


def attach_series_info(
    df: pl.DataFrame,
    visible: Sequence[Series],
    registry: SeriesRegistry,
    palettes: Mapping[str, Sequence[str]] | None = None,
) -> pl.DataFrame:
    """
    Add series_id, ordinal, and color columns keyed by session_index.

    Args:
        df (pl.DataFrame): Frame with a session_index column produced from the sessions of
            `visible` (same order).
        visible (Sequence[Series]): Visible series in registry order.
        registry (SeriesRegistry): Registry used for per-lake session counts.
        palettes (Mapping[str, Sequence[str]] | None): Lake → base colors override.
    """
    info = pl.DataFrame(
        {
            "session_index": list(range(len(visible))),
            "series_id": [s.id for s in visible],
            "ordinal": [s.ordinal for s in visible],
            "color": [
                series_color(s.lake, s.ordinal, registry.lake_count(s.lake), palettes)
                for s in visible
            ],
        },
        schema={
            "session_index": pl.Int64,
            "series_id": pl.Utf8,
            "ordinal": pl.Int64,
            "color": pl.Utf8,
        },
    )
    return df.join(info, on="session_index", how="left", maintain_order="left")


def attach_time_gradient(df: pl.DataFrame, date_col: str = "date") -> pl.DataFrame:
    """Color each row by its date's position between the frame's earliest and latest dates."""
    if df.height == 0:
        return df.with_columns(pl.lit(None, dtype=pl.Utf8).alias("color"))
    dates = df.get_column(date_col).to_list()
    lo, hi = min(dates), max(dates)
    return df.with_columns(
        pl.Series("color", [time_gradient(d, lo, hi) for d in dates], dtype=pl.Utf8)
    )


def attach_season_colors(df: pl.DataFrame, date_col: str = "date") -> pl.DataFrame:
    dates = df.get_column(date_col).to_list()
    return df.with_columns(pl.Series("color", [season_color(d) for d in dates], dtype=pl.Utf8))


def _jsonable(v: Any) -> Any:
    if isinstance(v, (date, datetime)):
        return v.isoformat()
    return v


def to_values(df: pl.DataFrame) -> list[dict[str, Any]]:
    """Rows as plain dicts with ISO date strings, suitable for alt.Data(values=...)."""
    return [{k: _jsonable(v) for k, v in row.items()} for row in df.to_dicts()]
