from __future__ import annotations

import logging

import pytest

from lakeviz.core.errors import EmptyDatasetError
from lakeviz.core.grammar import TriState
from lakeviz.core.schema import Session
from lakeviz.series import WaterQualityModel


def _sessions(n: int) -> list[Session]:
    return [Session(lake="Gunflint", date=f"2024-{1 + i // 28:02d}-{1 + i % 28:02d}") for i in range(n)]


def test_load_shows_default_count_and_exposes_visible_data() -> None:
    m = WaterQualityModel()
    m.load(_sessions(20))
    assert m.is_loaded
    assert len(m.get_all_series()) == 20
    assert len(m.get_visible_series()) == 12
    visible = m.get_visible_data()
    assert [s.date for s in visible] == [s.session.date for s in m.visible_series()]
    assert len(m.get_data()) == 20


def test_load_default_count_override_persists() -> None:
    m = WaterQualityModel(default_count=2)
    m.load(_sessions(5), default_count=4)
    assert len(m.get_visible_series()) == 4
    m.load(_sessions(6))
    assert len(m.get_visible_series()) == 4


def test_empty_load_clears_previous_state(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="lakeviz.series.model")
    m = WaterQualityModel()
    m.load(_sessions(8))
    with pytest.raises(EmptyDatasetError):
        m.load([])
    assert not m.is_loaded
    assert m.get_all_series() == ()
    assert m.get_visible_series() == frozenset()
    assert m.get_data() == []
    assert any("no sessions" in r.getMessage() for r in caplog.records)


def test_show_controls_threshold() -> None:
    m = WaterQualityModel()
    m.load(_sessions(6))
    assert not m.show_controls()
    m.load(_sessions(7))
    assert m.show_controls()


def test_visibility_tree_reflects_current_state() -> None:
    m = WaterQualityModel(default_count=1)
    m.load(
        [
            Session(lake="Hague", date="2023-09-01"),
            Session(lake="Gunflint", date="2024-06-01"),
            Session(lake="Hague", date="2024-06-01"),
        ]
    )
    tree = m.visibility_tree()
    assert [y.year for y in tree] == [2023, 2024]
    assert tree[0].state is TriState.ALL  # Hague-0 is first in registry order
    assert tree[1].state is TriState.NONE

    m.visibility.toggle_series("Gunflint-0")
    june = m.visibility_tree()[1].dates[0]
    assert june.state is TriState.SOME
    assert {(n.series.id, n.visible) for n in june.series} == {
        ("Hague-1", False),
        ("Gunflint-0", True),
    }
