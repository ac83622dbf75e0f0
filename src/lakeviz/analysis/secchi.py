"""
Secchi-depth (water clarity) aggregation by sampling session.

A session's Secchi value is the mean of its non-null readings. A session whose readings
are all null, or that has none, has no Secchi data point: callers get None, never 0.0.
Surface values come from the first measurement in sampling order.
"""

from __future__ import annotations

from collections.abc import Sequence

import polars as pl

from lakeviz.core.grammar import Parameter, parameter_from_value
from lakeviz.core.schema import Session

__all__ = [
    "secchi_session_average",
    "secchi_time_series",
    "secchi_surface_pairs",
]


def secchi_session_average(session: Session) -> float | None:
    readings = [r for r in session.secchi_depth if r is not None]
    if not readings:
        return None
    return sum(readings) / len(readings)


def _surface_value(session: Session, param: Parameter) -> float | None:
    surface = session.surface
    return surface.value(param) if surface is not None else None


def secchi_time_series(sessions: Sequence[Session]) -> pl.DataFrame:
    """
    One row per session that has Secchi data.

    Returns:
        pl.DataFrame: Columns [session_index, lake, date, timestamp, value, weather, air_temp,
        surface_temp, surface_do, surface_ph], sorted by lake appearance then timestamp.
    """
    rows: list[dict[str, object]] = []
    lake_rank: dict[str, int] = {}
    for si, s in enumerate(sessions):
        avg = secchi_session_average(s)
        if avg is None:
            continue
        lake_rank.setdefault(s.lake, len(lake_rank))
        rows.append(
            {
                "session_index": si,
                "lake": s.lake,
                "date": s.day,
                "timestamp": s.timestamp,
                "value": avg,
                "weather": s.weather,
                "air_temp": s.air_temperature,
                "surface_temp": _surface_value(s, Parameter.TEMPERATURE),
                "surface_do": _surface_value(s, Parameter.DO),
                "surface_ph": _surface_value(s, Parameter.PH),
            }
        )
    schema = {
        "session_index": pl.Int64,
        "lake": pl.Utf8,
        "date": pl.Date,
        "timestamp": pl.Datetime,
        "value": pl.Float64,
        "weather": pl.Utf8,
        "air_temp": pl.Float64,
        "surface_temp": pl.Float64,
        "surface_do": pl.Float64,
        "surface_ph": pl.Float64,
    }
    rows.sort(key=lambda r: (lake_rank[str(r["lake"])], r["timestamp"]))
    return pl.DataFrame(rows, schema=schema)


def secchi_surface_pairs(sessions: Sequence[Session], parameter: Parameter | str) -> pl.DataFrame:
    """
    (surface value, Secchi mean) per session where both exist.

    Returns:
        pl.DataFrame: Columns [session_index, x, y, lake, date, weather, air_temp] with the
        surface parameter on x and Secchi depth on y.
    """
    param = parameter_from_value(parameter)
    rows: list[dict[str, object]] = []
    for si, s in enumerate(sessions):
        secchi = secchi_session_average(s)
        value = _surface_value(s, param)
        if secchi is None or value is None:
            continue
        rows.append(
            {
                "session_index": si,
                "x": value,
                "y": secchi,
                "lake": s.lake,
                "date": s.day,
                "weather": s.weather,
                "air_temp": s.air_temperature,
            }
        )
    schema = {
        "session_index": pl.Int64,
        "x": pl.Float64,
        "y": pl.Float64,
        "lake": pl.Utf8,
        "date": pl.Date,
        "weather": pl.Utf8,
        "air_temp": pl.Float64,
    }
    return pl.DataFrame(rows, schema=schema)
