"""
Visibility store: the set of currently visible series ids.

This is the only mutable state in lakeviz. Membership changes only through the toggle
operations below; tri-state summaries for date and year groups are recomputed from the
registry and the visible set on every query, never stored.

Group toggle rule ("select missing")
- If every series in the group is visible, hide them all.
- Otherwise (none or some visible), show them all.

So a partially visible group resolves to fully visible on the first toggle and fully
hidden on the second; two toggles are not an identity for partial groups.

Unknown ids, days, or years match nothing and leave the state unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from lakeviz.core.dates import DateLike, date_key
from lakeviz.core.grammar import TriState

from .registry import Series, SeriesRegistry

__all__ = [
    "VisibilityStore",
    "tri_state_of",
]


def tri_state_of(ids: Iterable[str], visible: set[str] | frozenset[str]) -> TriState:
    """
    Summarize how many of `ids` are in `visible`.

    An empty group counts as TriState.NONE.
    """
    total = 0
    shown = 0
    for i in ids:
        total += 1
        if i in visible:
            shown += 1
    if shown == 0:
        return TriState.NONE
    if shown == total:
        return TriState.ALL
    return TriState.SOME


def _coerce_day(value: DateLike) -> date | None:
    try:
        return date_key(value)
    except (TypeError, ValueError):
        return None


def _coerce_year(value: int | str) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class VisibilityStore:
    """
    Visible-set owner bound to one SeriesRegistry.

    Args:
        registry (SeriesRegistry | None): Registry to bind; an empty registry if None.

    Notes:
        - Call `reset(registry, default_count)` after every load.
        - Ids not present in the bound registry are never reported as visible.
    """

    def __init__(self, registry: SeriesRegistry | None = None) -> None:
        self._registry = registry if registry is not None else SeriesRegistry()
        self._visible: set[str] = set()

    @property
    def registry(self) -> SeriesRegistry:
        return self._registry

    def reset(self, registry: SeriesRegistry, default_count: int) -> None:
        """Bind `registry` and show its first `default_count` series (registry order)."""
        self._registry = registry
        count = max(int(default_count), 0)
        self._visible = {s.id for s in registry.series[:count]}

    def clear(self) -> None:
        """Return to the unbuilt state: empty registry, nothing visible."""
        self._registry = SeriesRegistry()
        self._visible = set()

    # ----------------------------
    # Queries
    # ----------------------------

    def visible_ids(self) -> frozenset[str]:
        return frozenset(self._visible)

    def is_visible(self, series_id: str) -> bool:
        return series_id in self._visible

    def visible_series(self) -> list[Series]:
        """Visible series in registry order."""
        return [s for s in self._registry if s.id in self._visible]

    def tri_state(self, ids: Iterable[str]) -> TriState:
        return tri_state_of(ids, self._visible)

    def date_state(self, day: DateLike) -> TriState:
        key = _coerce_day(day)
        if key is None:
            return TriState.NONE
        return self.tri_state(s.id for s in self._registry.for_date(key))

    def year_state(self, year: int | str) -> TriState:
        y = _coerce_year(year)
        if y is None:
            return TriState.NONE
        return self.tri_state(s.id for s in self._registry.for_year(y))

    def all_state(self) -> TriState:
        return self.tri_state(self._registry.ids)

    # ----------------------------
    # Mutations
    # ----------------------------

    def toggle_series(self, series_id: str) -> None:
        """Flip membership of exactly one series id."""
        if series_id not in self._registry:
            return
        if series_id in self._visible:
            self._visible.discard(series_id)
        else:
            self._visible.add(series_id)

    def toggle_by_date(self, day: DateLike) -> None:
        """Toggle every series sampled on `day` (all lakes) with the select-missing rule."""
        key = _coerce_day(day)
        if key is None:
            return
        self._toggle_group([s.id for s in self._registry.for_date(key)])

    def toggle_by_year(self, year: int | str) -> None:
        """Toggle every series sampled in `year` with the select-missing rule."""
        y = _coerce_year(year)
        if y is None:
            return
        self._toggle_group([s.id for s in self._registry.for_year(y)])

    def set_all(self, visible: bool) -> None:
        if visible:
            self._visible = set(self._registry.ids)
        else:
            self._visible = set()

    def _toggle_group(self, ids: list[str]) -> None:
        if not ids:
            return
        if all(i in self._visible for i in ids):
            self._visible.difference_update(ids)
        else:
            self._visible.update(ids)
