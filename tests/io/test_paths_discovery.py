from __future__ import annotations

from pathlib import Path

import pytest

from lakeviz.io.errors import IoReadError
from lakeviz.io.paths import candidate_file_names, discover_data_files


def test_candidate_file_names_cover_fixed_yearly_and_monthly_names() -> None:
    names = candidate_file_names()
    assert names[:2] == ["water-quality.json", "data.json"]
    assert "2015.json" in names and "2024.json" in names and "2025.json" not in names
    assert "water-quality-2019.json" in names
    assert "2023-01.json" in names and "water-quality-2025-12.json" in names
    assert len(names) == len(set(names))


def test_discover_prefers_prefix_listing_sorted_by_name(tmp_path: Path) -> None:
    for name in ["water-b.json", "water-a.json", "data.json", "notes.txt"]:
        (tmp_path / name).write_text("[]")
    found = discover_data_files(tmp_path)
    assert [p.name for p in found] == ["water-a.json", "water-b.json"]


def test_discover_falls_back_to_well_known_names(tmp_path: Path) -> None:
    (tmp_path / "2020.json").write_text("[]")
    (tmp_path / "data.json").write_text("[]")
    (tmp_path / "random.json").write_text("[]")
    found = discover_data_files(tmp_path)
    assert [p.name for p in found] == ["data.json", "2020.json"]


def test_discover_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(IoReadError):
        discover_data_files(tmp_path / "absent")
