from __future__ import annotations

from datetime import date

import pytest

from lakeviz.analysis import (
    depth_bucket_average,
    measurements_frame,
    paired_scatter,
    raw_depth_series,
)
from lakeviz.core.grammar import DepthRange, Parameter
from lakeviz.core.schema import Session

SURFACE = DepthRange("Surface (0-2m)", 0.0, 2.0)
MID = DepthRange("Mid-depth (3-8m)", 3.0, 8.0)


def _session(lake: str, day: str, rows: list[dict], **extra) -> Session:
    return Session.model_validate({"lake": lake, "date": day, "measurements": rows, **extra})


def _sessions() -> list[Session]:
    return [
        _session(
            "Gunflint",
            "2024-06-01",
            [
                {"depth": 0, "temperature": 20.0, "DO": 9.0},
                {"depth": 1, "temperature": 19.0, "DO": None},
                {"depth": 2, "temperature": None, "DO": 8.0},
                {"depth": 5, "temperature": 12.0, "DO": 7.0},
            ],
            weather="Sunny",
            air_temperature=24.0,
        ),
        # No qualifying surface temperature: must be absent from the surface average
        _session("Hague", "2024-06-02", [{"depth": 1, "temperature": None}, {"depth": 4, "temperature": 11.0}]),
        _session("Hague", "2024-07-02", [{"depth": 2.0, "temperature": 22.0, "DO": 8.5}]),
    ]


def test_measurements_frame_has_one_row_per_measurement() -> None:
    df = measurements_frame(_sessions())
    assert df.height == 7
    assert df.get_column("session_index").to_list() == [0, 0, 0, 0, 1, 1, 2]
    assert df.get_column("measurement_index").to_list() == [0, 1, 2, 3, 0, 1, 0]
    assert df.schema["date"].is_temporal()


def test_depth_bucket_average_skips_sessions_without_qualifying_values() -> None:
    df = depth_bucket_average(_sessions(), SURFACE, Parameter.TEMPERATURE)
    assert df.columns == ["session_index", "lake", "date", "value", "weather", "air_temp"]
    assert df.get_column("session_index").to_list() == [0, 2]
    values = df.get_column("value").to_list()
    assert values[0] == pytest.approx(19.5)  # mean(20, 19); the null at 2 m is ignored
    assert values[1] == pytest.approx(22.0)  # 2 m is inside the inclusive band
    row = df.row(0, named=True)
    assert row["lake"] == "Gunflint" and row["date"] == date(2024, 6, 1)
    assert row["weather"] == "Sunny" and row["air_temp"] == 24.0


def test_depth_bucket_average_mid_band_and_string_parameter() -> None:
    df = depth_bucket_average(_sessions(), MID, "temperature")
    assert df.get_column("lake").to_list() == ["Gunflint", "Hague"]
    assert df.get_column("value").to_list() == [12.0, 11.0]


def test_raw_depth_series_drops_nulls_and_keeps_sampling_order() -> None:
    df = raw_depth_series(_sessions(), Parameter.DO)
    assert df.columns == ["session_index", "lake", "date", "measurement_index", "depth", "value"]
    first = df.filter(df.get_column("session_index") == 0)
    assert first.get_column("depth").to_list() == [0.0, 2.0, 5.0]
    assert first.get_column("value").to_list() == [9.0, 8.0, 7.0]
    assert 1 not in df.get_column("session_index").to_list()


def test_paired_scatter_requires_both_values() -> None:
    df = paired_scatter(_sessions(), Parameter.TEMPERATURE, Parameter.DO)
    assert df.columns == ["session_index", "x", "y", "depth", "lake", "date", "weather", "air_temp"]
    assert list(zip(df.get_column("x").to_list(), df.get_column("y").to_list())) == [
        (20.0, 9.0),
        (12.0, 7.0),
        (22.0, 8.5),
    ]


def test_paired_scatter_depth_filter_and_empty_result() -> None:
    surface = paired_scatter(_sessions(), "temperature", "DO", SURFACE)
    assert surface.get_column("depth").to_list() == [0.0, 2.0]

    empty = paired_scatter(_sessions(), Parameter.SPC, Parameter.TDS)
    assert empty.height == 0
    assert empty.columns == ["session_index", "x", "y", "depth", "lake", "date", "weather", "air_temp"]
    assert paired_scatter([], "PH", "DO").height == 0
