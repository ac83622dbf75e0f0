"""
lakeviz.series — Series registry, visibility state, and the controller that owns both.

## Public API
- SeriesRegistry / Series — ordered sampling sessions with "<lake>-<ordinal>" ids.
- VisibilityStore — visible-id set with series/date/year toggles and tri-state queries.
- WaterQualityModel — explicit controller rebuilt on every load.

## Import DAG discipline
- Depends on lakeviz.core only; no IO, no rendering.
"""

from __future__ import annotations

from .model import WaterQualityModel
from .registry import Series, SeriesRegistry
from .visibility import VisibilityStore

__all__ = [
    "Series",
    "SeriesRegistry",
    "VisibilityStore",
    "WaterQualityModel",
]
