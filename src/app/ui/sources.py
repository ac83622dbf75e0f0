"""
Data-source discovery and demo-data utilities for the lakeviz Streamlit UI.

This module encapsulates:
- Scanning one or more roots for directories that hold "<prefix>*.json" data files.
- Writing a small demo dataset to bootstrap the UI when no data exists.
- A cached wrapper around source listing suitable for Streamlit usage.

Notes:
    - File-system operations are localized here.
    - Streamlit caching is provided via `cached_list_sources`.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from datetime import date, timedelta
from pathlib import Path
from typing import Any

import streamlit as st

# Public constants
IGNORED_DIRS: set[str] = {".venv", "site", ".git", "node_modules", "__pycache__"}


def list_data_dirs_under(base: Path, prefix: str = "water") -> Iterable[Path]:
    """Yield directories under `base` (inclusive) containing at least one data file.

    Args:
        base (Path): Base directory to scan recursively.
        prefix (str): Data file name prefix ("<prefix>*.json").

    Yields:
        Path: Directories holding matching files.

    Notes:
        - Directory trees matching IGNORED_DIRS are skipped.
        - This function is IO-bound and intended to be called from a cached wrapper.
    """
    if not base.exists() or not base.is_dir():
        return []
    for p in [base, *base.rglob("*")]:
        if not p.is_dir():
            continue
        if any(seg in IGNORED_DIRS for seg in p.parts):
            continue
        if any(child.is_file() for child in p.glob(f"{prefix}*.json")):
            yield p


def list_sources_impl(roots: list[str], prefix: str = "water", limit: int = 200) -> list[dict[str, Any]]:
    """Return data directories with minimal metadata for the header selector.

    Args:
        roots (list[str]): Root directories to scan (absolute or relative paths).
        prefix (str): Data file name prefix.
        limit (int): Maximum number of entries to return (best-effort).

    Returns:
        list[dict[str, Any]]: Dicts with keys "path", "name", "files", "mtime", newest first.
    """
    seen: set[str] = set()
    items: list[dict[str, Any]] = []
    for root in roots:
        for p in list_data_dirs_under(Path(root), prefix):
            sp = str(p.resolve())
            if sp in seen:
                continue
            seen.add(sp)
            files = [f for f in p.glob(f"{prefix}*.json") if f.is_file()]
            try:
                mtime = max(f.stat().st_mtime for f in files)
            except (OSError, ValueError):
                mtime = 0.0
            items.append({"path": sp, "name": p.name, "files": len(files), "mtime": mtime})
            if len(items) >= limit:
                break

    items.sort(key=lambda d: d["mtime"], reverse=True)
    return items[:limit]


@st.cache_data(ttl=10)
def cached_list_sources(
    roots: tuple[str, ...], prefix: str = "water", limit: int = 200
) -> list[dict[str, Any]]:
    """Streamlit-cached wrapper for listing data directories.

    Notes:
        The default ttl is short; callers can control refresh by varying inputs.
    """
    return list_sources_impl(list(roots), prefix, limit)


def create_demo_data(data_dir: Path, prefix: str = "water") -> Path:
    """Write a small two-lake demo dataset and return the file path.

    Args:
        data_dir (Path): Target directory to create or populate.
        prefix (str): Data file name prefix; the file is "<prefix>-demo.json".

    Returns:
        Path: Path of the written JSON file.

    Notes:
        - Eight sessions per lake, roughly monthly from April 2024.
        - Profiles at 0-12 m with a thermocline, one missing DO reading, and Secchi readings
          that include a null entry.
    """
    data_dir.mkdir(parents=True, exist_ok=True)
    records: list[dict[str, Any]] = []
    start = date(2024, 4, 15)
    for li, lake in enumerate(("Gunflint", "Hague")):
        for k in range(8):
            day = start + timedelta(days=30 * k + 3 * li)
            warm = 8.0 + 12.0 * min(k, 7 - k) / 3.5
            measurements = []
            for depth in range(0, 13, 2):
                temp = warm - (depth * 0.9 if depth > 4 else depth * 0.2)
                measurements.append(
                    {
                        "depth": depth,
                        "temperature": round(temp, 1),
                        "DO": None if (depth == 12 and k == 3) else round(11.5 - temp * 0.15 - depth * 0.1, 2),
                        "SPC": round(45.0 + depth * 1.5 + li * 10, 1),
                        "TDS": round((45.0 + depth * 1.5 + li * 10) * 0.65, 1),
                        "PH": round(7.4 - depth * 0.04, 2),
                    }
                )
            records.append(
                {
                    "lake": lake,
                    "date": day.isoformat(),
                    "time": "10:30",
                    "weather": ("Sunny", "Cloudy", "Windy")[k % 3],
                    "air_temperature": round(warm + 3.0, 1),
                    "measurements": measurements,
                    "secchi_depth": [round(3.0 + 0.2 * k, 2), None, round(3.1 + 0.2 * k, 2)],
                }
            )
    path = data_dir / f"{prefix}-demo.json"
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(records, fh, indent=2)
    os.utime(path)
    return path
