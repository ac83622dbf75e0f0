"""
Series registry: the flat, ordered list of sampling sessions with stable per-lake ordinals.

Build rules
- Partition sessions by lake, keeping lakes in first-appearance order (not alphabetical).
- Within a lake, stable-sort by timestamp ascending (ties keep input order).
- ordinal = position in the sorted partition; id = "<lake>-<ordinal>".
- Output order: every series of the first lake, then the next lake, and so on. This order
  defines "the first k series" for default visibility.

A registry is immutable after construction and is rebuilt from scratch on every load.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from lakeviz.core.dates import DateLike, date_key
from lakeviz.core.errors import EmptyDatasetError
from lakeviz.core.schema import Session

__all__ = [
    "Series",
    "SeriesRegistry",
    "series_id",
]


def series_id(lake: str, ordinal: int) -> str:
    return f"{lake}-{ordinal}"


@dataclass(frozen=True)
class Series:
    """
    Registry entry wrapping one Session.

    Attributes:
        id (str): "<lake>-<ordinal>".
        lake (str): Lake identifier.
        date (date): Day-granularity key of the session date.
        ordinal (int): 0-based rank within the lake by ascending date.
        session (Session): The wrapped raw record.
    """

    id: str
    lake: str
    date: date
    ordinal: int
    session: Session

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def timestamp(self) -> datetime:
        return self.session.timestamp


class SeriesRegistry:
    """
    Immutable, ordered collection of Series built from raw sessions.

    Use `SeriesRegistry.build(sessions)`; the empty registry (`SeriesRegistry()`) stands for
    the unbuilt state before a successful load.
    """

    __slots__ = ("_series", "_by_id", "_lake_counts")

    def __init__(self, series: Sequence[Series] = ()) -> None:
        self._series: tuple[Series, ...] = tuple(series)
        self._by_id: dict[str, Series] = {s.id: s for s in self._series}
        counts: dict[str, int] = {}
        for s in self._series:
            counts[s.lake] = counts.get(s.lake, 0) + 1
        self._lake_counts = counts

    @classmethod
    def build(cls, sessions: Iterable[Session]) -> SeriesRegistry:
        """
        Build a registry from raw sessions.

        Raises:
            EmptyDatasetError: If sessions is empty.
        """
        items = list(sessions)
        if not items:
            raise EmptyDatasetError("no sessions to register")

        # dict preserves first-appearance order of lakes
        by_lake: dict[str, list[Session]] = {}
        for s in items:
            by_lake.setdefault(s.lake, []).append(s)

        out: list[Series] = []
        for lake, lake_sessions in by_lake.items():
            ordered = sorted(lake_sessions, key=lambda s: s.timestamp)
            for ordinal, s in enumerate(ordered):
                out.append(
                    Series(
                        id=series_id(lake, ordinal),
                        lake=lake,
                        date=s.day,
                        ordinal=ordinal,
                        session=s,
                    )
                )
        return cls(out)

    def __len__(self) -> int:
        return len(self._series)

    def __iter__(self) -> Iterator[Series]:
        return iter(self._series)

    def __contains__(self, series_id: object) -> bool:
        return series_id in self._by_id

    @property
    def series(self) -> tuple[Series, ...]:
        return self._series

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(s.id for s in self._series)

    @property
    def lakes(self) -> tuple[str, ...]:
        """Lakes in first-appearance order."""
        return tuple(self._lake_counts)

    def lake_count(self, lake: str) -> int:
        """Number of sessions registered for a lake (0 if unknown)."""
        return self._lake_counts.get(lake, 0)

    def by_id(self, series_id: str) -> Series | None:
        return self._by_id.get(series_id)

    def for_lake(self, lake: str) -> tuple[Series, ...]:
        return tuple(s for s in self._series if s.lake == lake)

    def for_date(self, day: DateLike) -> tuple[Series, ...]:
        """All series sampled on a calendar day, across lakes."""
        key = date_key(day)
        return tuple(s for s in self._series if s.date == key)

    def for_year(self, year: int) -> tuple[Series, ...]:
        return tuple(s for s in self._series if s.date.year == year)

    def dates(self) -> list[date]:
        """Distinct sampling days, ascending."""
        return sorted({s.date for s in self._series})

    def years(self) -> list[int]:
        return sorted({s.date.year for s in self._series})

    def dates_in_year(self, year: int) -> list[date]:
        return sorted({s.date for s in self._series if s.date.year == year})
