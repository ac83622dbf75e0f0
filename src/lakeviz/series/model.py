"""
WaterQualityModel: the controller the rendering layer holds explicitly.

Owns exactly one SeriesRegistry and one VisibilityStore and rebuilds both together on
every load. Rendering code receives this object as an argument; there is no module-level
instance to look up.

Query surface
- get_all_series(), get_visible_series() (id set), get_visible_data() (visible Sessions in
  registry order), get_data() (every loaded Session in input order).
- visibility_tree(): year > date > series nodes with tri-state flags for the controls.

Mutations are delegated to `model.visibility` (toggle_series / toggle_by_date /
toggle_by_year / set_all); reads after a mutation always reflect it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from lakeviz.core.constants import DEFAULT_VISIBLE_COUNT, MIN_CONTROLS_SERIES
from lakeviz.core.errors import EmptyDatasetError
from lakeviz.core.grammar import TriState
from lakeviz.core.schema import Session

from .registry import Series, SeriesRegistry
from .visibility import VisibilityStore

__all__ = [
    "WaterQualityModel",
    "YearNode",
    "DateNode",
    "SeriesNode",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeriesNode:
    series: Series
    visible: bool


@dataclass(frozen=True)
class DateNode:
    day: date
    state: TriState
    series: tuple[SeriesNode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class YearNode:
    year: int
    state: TriState
    dates: tuple[DateNode, ...] = field(default_factory=tuple)


class WaterQualityModel:
    """
    Registry + visibility controller.

    Args:
        default_count (int): Series shown after each load (first k in registry order).

    Examples:
        >>> from lakeviz.core.schema import Session
        >>> m = WaterQualityModel(default_count=1)
        >>> m.load([Session(lake="Hague", date="2024-06-01"), Session(lake="Hague", date="2024-05-01")])
        >>> sorted(m.get_visible_series())
        ['Hague-0']
        >>> m.get_visible_data()[0].date
        '2024-05-01'
    """

    def __init__(self, default_count: int = DEFAULT_VISIBLE_COUNT) -> None:
        self.default_count = int(default_count)
        self._data: list[Session] = []
        self._registry = SeriesRegistry()
        self.visibility = VisibilityStore(self._registry)

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def load(self, sessions: Iterable[Session], default_count: int | None = None) -> None:
        """
        Replace the loaded data, rebuilding the registry and resetting visibility.

        Raises:
            EmptyDatasetError: If sessions is empty. The model is left empty (no series,
                nothing visible) before the error propagates.
        """
        data = list(sessions)
        if default_count is not None:
            self.default_count = int(default_count)
        try:
            registry = SeriesRegistry.build(data)
        except EmptyDatasetError:
            self._data = []
            self._registry = SeriesRegistry()
            self.visibility.clear()
            logger.warning("Load produced no sessions; registry cleared")
            raise
        self._data = data
        self._registry = registry
        self.visibility.reset(registry, self.default_count)
        logger.info(
            "Loaded %d sessions across %d lake(s); %d visible by default",
            len(registry),
            len(registry.lakes),
            len(self.visibility.visible_ids()),
        )

    @property
    def registry(self) -> SeriesRegistry:
        return self._registry

    @property
    def is_loaded(self) -> bool:
        return len(self._registry) > 0

    # ----------------------------
    # Query surface
    # ----------------------------

    def get_data(self) -> list[Session]:
        return list(self._data)

    def get_all_series(self) -> tuple[Series, ...]:
        return self._registry.series

    def get_visible_series(self) -> frozenset[str]:
        return self.visibility.visible_ids()

    def visible_series(self) -> list[Series]:
        """Visible Series objects in registry order (aligned with get_visible_data)."""
        return self.visibility.visible_series()

    def get_visible_data(self) -> list[Session]:
        return [s.session for s in self.visibility.visible_series()]

    def show_controls(self) -> bool:
        """Visibility controls are only worth offering above a handful of series."""
        return len(self._registry) > MIN_CONTROLS_SERIES

    def visibility_tree(self) -> list[YearNode]:
        """
        Build the year > date > series view for grouping controls.

        Years and dates ascend; series within a date keep registry order. Every flag is
        computed from the current visible set at call time.
        """
        visible = self.visibility.visible_ids()
        years: list[YearNode] = []
        for year in self._registry.years():
            date_nodes: list[DateNode] = []
            for day in self._registry.dates_in_year(year):
                members = self._registry.for_date(day)
                date_nodes.append(
                    DateNode(
                        day=day,
                        state=self.visibility.tri_state(s.id for s in members),
                        series=tuple(SeriesNode(s, s.id in visible) for s in members),
                    )
                )
            years.append(
                YearNode(year=year, state=self.visibility.year_state(year), dates=tuple(date_nodes))
            )
        return years
