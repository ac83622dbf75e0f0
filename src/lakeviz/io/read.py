"""
Read utilities for lakeviz JSON data files.

Overview
- parse_records(): validate one decoded JSON document (array or single object) into Sessions.
- read_sessions(): read many files, tagging each record with its source file name.
- load_sessions(): discover files under VizSettings.data_dir and read them.

Skip rules
- A file that cannot be read or decoded is logged at WARNING and skipped.
- A record without a usable lake or date is logged at WARNING and skipped; missing optional
  fields are kept as "no data" (see lakeviz.core.schema).
- Zero sessions overall raises EmptyDatasetError.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from lakeviz.core.errors import EmptyDatasetError
from lakeviz.core.schema import Session

from .config import VizSettings
from .paths import discover_data_files

__all__ = [
    "parse_records",
    "read_sessions",
    "load_sessions",
]

logger = logging.getLogger(__name__)


def parse_records(obj: Any, source_file: str | None = None) -> list[Session]:
    """
    Validate a decoded JSON document into Sessions.

    Args:
        obj (Any): A list of record objects or a single record object.
        source_file (str | None): File name recorded on each session.

    Returns:
        list[Session]: Valid sessions in document order.
    """
    records = obj if isinstance(obj, list) else [obj]
    out: list[Session] = []
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            logger.warning("Skipping non-object record %d in %s", i, source_file or "<input>")
            continue
        payload = dict(rec)
        if source_file is not None:
            payload["source_file"] = source_file
        try:
            out.append(Session.model_validate(payload))
        except ValidationError as e:
            logger.warning(
                "Skipping record %d in %s: %d validation error(s): %s",
                i,
                source_file or "<input>",
                e.error_count(),
                e.errors()[0].get("msg", "") if e.errors() else "",
            )
    return out


def read_sessions(paths: Iterable[str | Path]) -> list[Session]:
    """Read and concatenate sessions from JSON files, in the given file order."""
    sessions: list[Session] = []
    for path in paths:
        p = Path(path)
        try:
            with p.open("r", encoding="utf-8") as fh:
                doc = json.load(fh)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Error loading %s: %s", p.name, e)
            continue
        parsed = parse_records(doc, source_file=p.name)
        logger.debug("Read %d session(s) from %s", len(parsed), p.name)
        sessions.extend(parsed)
    return sessions


def load_sessions(settings: VizSettings | None = None) -> list[Session]:
    """
    Discover and read every data file for the configured data directory.

    Raises:
        IoReadError: If the data directory does not exist.
        EmptyDatasetError: If no sessions were read.
    """
    s = settings or VizSettings.load()
    files = discover_data_files(s.data_dir, s.file_prefix)
    sessions = read_sessions(files)
    if not sessions:
        raise EmptyDatasetError(f"no sessions found under {s.data_dir}")
    logger.info("Loaded %d session(s) from %d file(s) in %s", len(sessions), len(files), s.data_dir)
    return sessions
