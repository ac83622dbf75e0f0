"""
Legend summaries computed from the visible sessions.

The rendering layer only formats these; nothing here reads widget state.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date

from lakeviz.core.constants import (
    FALLBACK_PALETTE,
    GRADIENT_HUE_END,
    GRADIENT_HUE_START,
    GRADIENT_LIGHTNESS,
    GRADIENT_SATURATION,
    LAKE_PALETTES,
    SEASON_COLORS,
)
from lakeviz.core.dates import format_date
from lakeviz.core.grammar import Season
from lakeviz.core.schema import Session

from .colors import hsl_to_hex

__all__ = [
    "LakeSummary",
    "DataOverview",
    "lake_summaries",
    "data_overview",
    "season_legend",
    "gradient_endpoints",
]


@dataclass(frozen=True)
class LakeSummary:
    lake: str
    color: str
    datasets: int
    first: date | None
    last: date | None

    @property
    def date_range_label(self) -> str:
        if self.first is None or self.last is None:
            return ""
        return f"{format_date(self.first)} - {format_date(self.last)}"


@dataclass(frozen=True)
class DataOverview:
    lakes: tuple[str, ...]
    datasets: int
    first: date | None
    last: date | None

    @property
    def date_range_label(self) -> str:
        if self.first is None or self.last is None:
            return ""
        return f"{format_date(self.first)} - {format_date(self.last)}"


def _lakes_in_order(sessions: Sequence[Session]) -> list[str]:
    return list(dict.fromkeys(s.lake for s in sessions))


def lake_summaries(
    sessions: Sequence[Session],
    palettes: Mapping[str, Sequence[str]] | None = None,
) -> list[LakeSummary]:
    """Per-lake dataset count, date range, and lead color for the visible sessions."""
    table = LAKE_PALETTES if palettes is None else palettes
    out: list[LakeSummary] = []
    for lake in _lakes_in_order(sessions):
        days = [s.day for s in sessions if s.lake == lake]
        base = table.get(lake, FALLBACK_PALETTE)
        out.append(
            LakeSummary(
                lake=lake,
                color=base[0] if base else FALLBACK_PALETTE[0],
                datasets=len(days),
                first=min(days) if days else None,
                last=max(days) if days else None,
            )
        )
    return out


def data_overview(sessions: Sequence[Session]) -> DataOverview:
    days = [s.day for s in sessions]
    return DataOverview(
        lakes=tuple(_lakes_in_order(sessions)),
        datasets=len(sessions),
        first=min(days) if days else None,
        last=max(days) if days else None,
    )


def season_legend() -> list[tuple[str, str]]:
    """(label, color) per season in calendar order."""
    return [(season.value.capitalize(), SEASON_COLORS[season.value]) for season in Season]


def gradient_endpoints() -> tuple[str, str]:
    """(earliest, latest) colors of the time gradient."""
    return (
        hsl_to_hex(GRADIENT_HUE_START, GRADIENT_SATURATION, GRADIENT_LIGHTNESS),
        hsl_to_hex(GRADIENT_HUE_END, GRADIENT_SATURATION, GRADIENT_LIGHTNESS),
    )
