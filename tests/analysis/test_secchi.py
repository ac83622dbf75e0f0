from __future__ import annotations

import pytest

from lakeviz.analysis import secchi_session_average, secchi_surface_pairs, secchi_time_series
from lakeviz.core.grammar import Parameter
from lakeviz.core.schema import Session


def _s(lake: str, day: str, secchi, surface: dict | None = None) -> Session:
    rows = [{"depth": 0, **surface}] if surface else []
    return Session.model_validate(
        {"lake": lake, "date": day, "secchi_depth": secchi, "measurements": rows}
    )


def test_session_average_ignores_nulls_and_returns_none_without_readings() -> None:
    assert secchi_session_average(_s("Hague", "2024-06-01", [3.0, None, 4.0])) == pytest.approx(3.5)
    assert secchi_session_average(_s("Hague", "2024-06-01", [None, None])) is None
    assert secchi_session_average(_s("Hague", "2024-06-01", [])) is None
    assert secchi_session_average(_s("Hague", "2024-06-01", 2.5)) == 2.5


def test_time_series_sorted_by_lake_appearance_then_time() -> None:
    sessions = [
        _s("Hague", "2024-07-01", [4.0]),
        _s("Gunflint", "2024-05-01", [2.0], {"temperature": 10.0}),
        _s("Hague", "2024-05-01", [3.0]),
        _s("Gunflint", "2024-06-01", [None]),
    ]
    df = secchi_time_series(sessions)
    assert df.get_column("lake").to_list() == ["Hague", "Hague", "Gunflint"]
    assert df.get_column("value").to_list() == [3.0, 4.0, 2.0]
    assert df.get_column("session_index").to_list() == [2, 0, 1]
    assert df.row(2, named=True)["surface_temp"] == 10.0


def test_time_series_empty_keeps_columns() -> None:
    df = secchi_time_series([_s("Hague", "2024-07-01", [])])
    assert df.height == 0
    assert "surface_ph" in df.columns


def test_surface_pairs_need_both_secchi_and_surface_value() -> None:
    sessions = [
        _s("Hague", "2024-06-01", [3.0, 3.2], {"temperature": 18.0, "PH": 7.1}),
        _s("Hague", "2024-07-01", [4.0], {"PH": 7.3}),
        _s("Gunflint", "2024-07-02", [], {"temperature": 21.0}),
    ]
    temp = secchi_surface_pairs(sessions, Parameter.TEMPERATURE)
    assert temp.get_column("x").to_list() == [18.0]
    assert temp.get_column("y").to_list() == pytest.approx([3.1])
    ph = secchi_surface_pairs(sessions, "PH")
    assert ph.get_column("session_index").to_list() == [0, 1]
