"""
Polars-first aggregation over visible sessions.

Every function takes the visible Session list (already filtered by the visibility store) and
returns a new DataFrame; inputs are never mutated.

Skip rules
- A measurement with a null target parameter is dropped, never zero-filled.
- A session with no qualifying measurement contributes no row (not a null row).
- Paired scatter keeps a measurement only when both parameters are present.

Column conventions
- session_index (i64): position of the session in the input list; joins back to the
  visible Series list for colors.
- date (Date): day-granularity key from lakeviz.core.dates.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

import polars as pl

from lakeviz.core.grammar import DepthRange, Parameter, parameter_from_value
from lakeviz.core.schema import Session

__all__ = [
    "MEASUREMENTS_SCHEMA",
    "measurements_frame",
    "depth_bucket_average",
    "raw_depth_series",
    "paired_scatter",
]

MEASUREMENTS_SCHEMA: Final[dict[str, pl.DataType]] = {
    "session_index": pl.Int64(),
    "lake": pl.Utf8(),
    "date": pl.Date(),
    "weather": pl.Utf8(),
    "air_temp": pl.Float64(),
    "measurement_index": pl.Int64(),
    "depth": pl.Float64(),
    **{p.value: pl.Float64() for p in Parameter},
}


def measurements_frame(sessions: Sequence[Session]) -> pl.DataFrame:
    """
    Flatten sessions into one long table with a row per measurement.

    Rows keep input session order, then sampling order within a session.
    """
    cols: dict[str, list[object]] = {name: [] for name in MEASUREMENTS_SCHEMA}
    for si, s in enumerate(sessions):
        day = s.day
        for mi, m in enumerate(s.measurements):
            cols["session_index"].append(si)
            cols["lake"].append(s.lake)
            cols["date"].append(day)
            cols["weather"].append(s.weather)
            cols["air_temp"].append(s.air_temperature)
            cols["measurement_index"].append(mi)
            cols["depth"].append(m.depth)
            for p in Parameter:
                cols[p.value].append(m.value(p))
    return pl.DataFrame(cols, schema=MEASUREMENTS_SCHEMA)


def _in_range(depth_range: DepthRange | None) -> pl.Expr:
    if depth_range is None:
        return pl.lit(True)
    return pl.col("depth").is_between(depth_range.min, depth_range.max, closed="both")


def depth_bucket_average(
    sessions: Sequence[Session],
    depth_range: DepthRange,
    parameter: Parameter | str,
) -> pl.DataFrame:
    """
    Mean of `parameter` over measurements inside `depth_range`, one row per session.

    Args:
        sessions (Sequence[Session]): Visible sessions.
        depth_range (DepthRange): Inclusive depth band.
        parameter (Parameter | str): Parameter to average.

    Returns:
        pl.DataFrame: Columns [session_index, lake, date, value, weather, air_temp] in input
        session order. Sessions without a qualifying measurement are absent.
    """
    col = parameter_from_value(parameter).value
    df = measurements_frame(sessions)
    return (
        df.filter(_in_range(depth_range) & pl.col(col).is_not_null())
        .group_by("session_index", maintain_order=True)
        .agg(
            pl.col("lake").first(),
            pl.col("date").first(),
            pl.col(col).mean().alias("value"),
            pl.col("weather").first(),
            pl.col("air_temp").first(),
        )
        .sort("session_index")
        .select(["session_index", "lake", "date", "value", "weather", "air_temp"])
    )


def raw_depth_series(sessions: Sequence[Session], parameter: Parameter | str) -> pl.DataFrame:
    """
    Per-session (depth, value) pairs in sampling order with null values dropped.

    Serves both profile layouts: depth-on-y and depth-on-x are the same rows with the axes
    swapped at render time.

    Returns:
        pl.DataFrame: Columns [session_index, lake, date, measurement_index, depth, value].
    """
    col = parameter_from_value(parameter).value
    df = measurements_frame(sessions)
    return df.filter(pl.col(col).is_not_null()).select(
        "session_index",
        "lake",
        "date",
        "measurement_index",
        "depth",
        pl.col(col).alias("value"),
    )


def paired_scatter(
    sessions: Sequence[Session],
    x_param: Parameter | str,
    y_param: Parameter | str,
    depth_range: DepthRange | None = None,
) -> pl.DataFrame:
    """
    Measurement-level points where both parameters are present.

    Args:
        sessions (Sequence[Session]): Visible sessions.
        x_param (Parameter | str): Parameter on x.
        y_param (Parameter | str): Parameter on y.
        depth_range (DepthRange | None): Optional inclusive depth filter.

    Returns:
        pl.DataFrame: Columns [session_index, x, y, depth, lake, date, weather, air_temp].
        Zero qualifying points yields an empty frame with the same columns.
    """
    xc = parameter_from_value(x_param).value
    yc = parameter_from_value(y_param).value
    df = measurements_frame(sessions)
    return df.filter(
        _in_range(depth_range) & pl.col(xc).is_not_null() & pl.col(yc).is_not_null()
    ).select(
        "session_index",
        pl.col(xc).alias("x"),
        pl.col(yc).alias("y"),
        "depth",
        "lake",
        "date",
        "weather",
        "air_temp",
    )
