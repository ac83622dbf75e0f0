from __future__ import annotations

from datetime import date

import polars as pl

from lakeviz.analysis import raw_depth_series
from lakeviz.core.schema import Session
from lakeviz.series import SeriesRegistry
from lakeviz.viz.base import attach_series_info, attach_time_gradient, to_values
from lakeviz.viz.colors import series_color
from lakeviz.viz.legend import data_overview, gradient_endpoints, lake_summaries, season_legend


def _sessions() -> list[Session]:
    row = [{"depth": 0, "temperature": 15.0}, {"depth": 3, "temperature": 12.0}]
    return [
        Session.model_validate({"lake": "Hague", "date": "2024-05-01", "measurements": row}),
        Session.model_validate({"lake": "Gunflint", "date": "2024-06-01", "measurements": row}),
        Session.model_validate({"lake": "Hague", "date": "2024-08-20", "measurements": row}),
    ]


def test_lake_summaries_in_first_appearance_order() -> None:
    out = lake_summaries(_sessions())
    assert [s.lake for s in out] == ["Hague", "Gunflint"]
    hague = out[0]
    assert hague.color == "#4ECDC4"
    assert hague.datasets == 2
    assert (hague.first, hague.last) == (date(2024, 5, 1), date(2024, 8, 20))
    assert hague.date_range_label == "May 1, 2024 - Aug 20, 2024"


def test_data_overview_and_empty_input() -> None:
    ov = data_overview(_sessions())
    assert ov.lakes == ("Hague", "Gunflint")
    assert ov.datasets == 3
    empty = data_overview([])
    assert empty.date_range_label == "" and empty.datasets == 0


def test_season_legend_and_gradient_endpoints() -> None:
    assert [label for label, _ in season_legend()] == ["Spring", "Summer", "Fall", "Winter"]
    start, end = gradient_endpoints()
    assert start != end


def test_attach_series_info_keeps_row_order_and_colors_by_ordinal() -> None:
    reg = SeriesRegistry.build(_sessions())
    visible = [reg.by_id("Hague-1"), reg.by_id("Gunflint-0")]
    raw = raw_depth_series([s.session for s in visible], "temperature")  # type: ignore[union-attr]
    out = attach_series_info(raw, visible, reg)  # type: ignore[arg-type]
    assert out.height == raw.height
    assert out.get_column("series_id").to_list() == ["Hague-1", "Hague-1", "Gunflint-0", "Gunflint-0"]
    assert out.get_column("color").to_list()[0] == series_color("Hague", 1, 2)


def test_attach_time_gradient_and_to_values() -> None:
    df = pl.DataFrame({"date": [date(2024, 1, 1), date(2024, 12, 31)], "x": [1.0, 2.0]})
    colored = attach_time_gradient(df)
    assert colored.get_column("color").to_list() == list(gradient_endpoints())
    values = to_values(colored)
    assert values[0]["date"] == "2024-01-01"
    assert "color" in attach_time_gradient(df.clear()).columns
