"""
Data file discovery for lakeviz.io.

Layout (file protocol baseline)
- <data_dir>/<prefix>*.json — any number of JSON documents, each an array of session
  records or a single record.
- When no file matches the prefix, well-known names are probed instead:
  water-quality.json, data.json, <year>.json, water-quality-<year>.json,
  <year>-<month>.json, water-quality-<year>-<month>.json.

Import DAG discipline
- stdlib only. No imports from higher-level packages.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final

from .errors import IoReadError

__all__ = [
    "YEAR_PATTERN_START",
    "YEAR_PATTERN_COUNT",
    "MONTHLY_PATTERN_YEARS",
    "candidate_file_names",
    "discover_data_files",
]

YEAR_PATTERN_START: Final[int] = 2015
YEAR_PATTERN_COUNT: Final[int] = 10
MONTHLY_PATTERN_YEARS: Final[tuple[int, ...]] = (2023, 2024, 2025)


def candidate_file_names(
    first_year: int = YEAR_PATTERN_START,
    year_count: int = YEAR_PATTERN_COUNT,
    monthly_years: Iterable[int] = MONTHLY_PATTERN_YEARS,
) -> list[str]:
    """
    Well-known data file names, in probe order.

    Returns:
        list[str]: Fixed names, then yearly names, then monthly names.
    """
    years = range(first_year, first_year + year_count)
    names = ["water-quality.json", "data.json"]
    names += [f"{y}.json" for y in years]
    names += [f"water-quality-{y}.json" for y in years]
    for y in monthly_years:
        for m in range(1, 13):
            names.append(f"{y}-{m:02d}.json")
            names.append(f"water-quality-{y}-{m:02d}.json")
    return names


def discover_data_files(data_dir: str | Path, prefix: str = "water") -> list[Path]:
    """
    List the JSON data files to load from `data_dir`.

    Args:
        data_dir (str | Path): Directory to scan (not recursive).
        prefix (str): Filename prefix for the directory listing.

    Returns:
        list[Path]: Matching files sorted by name; falls back to existing well-known names
        (deduplicated, probe order) when nothing matches the prefix.

    Raises:
        IoReadError: If data_dir does not exist or is not a directory.
    """
    root = Path(data_dir)
    if not root.is_dir():
        raise IoReadError(f"data directory not found: {root}")
    listed = sorted(p for p in root.glob(f"{prefix}*.json") if p.is_file())
    if listed:
        return listed
    seen: set[str] = set()
    out: list[Path] = []
    for name in candidate_file_names():
        if name in seen:
            continue
        seen.add(name)
        p = root / name
        if p.is_file():
            out.append(p)
    return out
