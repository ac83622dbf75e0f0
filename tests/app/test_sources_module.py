from __future__ import annotations

import json
from pathlib import Path

from app.ui.sources import cached_list_sources, create_demo_data, list_sources_impl
from lakeviz.io import VizSettings, load_sessions
from lakeviz.series import WaterQualityModel


def test_create_demo_data_is_loadable(tmp_path: Path) -> None:
    path = create_demo_data(tmp_path / "demo")
    assert path.name == "water-demo.json"
    records = json.loads(path.read_text(encoding="utf-8"))
    assert {r["lake"] for r in records} == {"Gunflint", "Hague"}

    sessions = load_sessions(VizSettings(data_dir=str(path.parent)))
    assert len(sessions) == 16
    m = WaterQualityModel()
    m.load(sessions)
    assert m.show_controls()
    assert [s.lake for s in m.get_all_series()][:8] == ["Gunflint"] * 8


def test_list_sources_impl_finds_nested_data_dirs(tmp_path: Path) -> None:
    create_demo_data(tmp_path / "a")
    create_demo_data(tmp_path / "b" / "deep")
    (tmp_path / "c").mkdir()
    (tmp_path / "c" / "other.json").write_text("[]")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "water-x.json").write_text("[]")

    items = list_sources_impl([str(tmp_path)])
    found = {Path(i["path"]) for i in items}
    assert found == {(tmp_path / "a").resolve(), (tmp_path / "b" / "deep").resolve()}
    assert all(i["files"] == 1 for i in items)


def test_list_sources_impl_custom_prefix_and_missing_root(tmp_path: Path) -> None:
    (tmp_path / "lake-2024.json").write_text("[]")
    assert list_sources_impl([str(tmp_path)], prefix="water") == []
    assert [i["name"] for i in list_sources_impl([str(tmp_path)], prefix="lake")] == [tmp_path.name]
    assert list_sources_impl([str(tmp_path / "absent")]) == []


def test_cached_list_sources_matches_uncached(tmp_path: Path) -> None:
    create_demo_data(tmp_path / "r1")
    create_demo_data(tmp_path / "r2")
    uncached = list_sources_impl([str(tmp_path)])
    cached = cached_list_sources((str(tmp_path),))
    assert sorted(r["path"] for r in uncached) == sorted(r["path"] for r in cached)
