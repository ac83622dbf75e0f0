"""
Canonical lakeviz vocabulary and helpers.

Defines measured parameters, selectable metrics (parameters plus derived correlation and
Secchi views), chart kinds, seasons, tri-state visibility summaries, and depth bands.
Includes zero-IO normalization helpers used across the stack.

Responsibilities
- Define enums whose serialized values match the field names of the raw records.
- Map derived metrics to the parameter pairs they correlate.
- Resolve the effective chart kind for a metric (derived metrics force the time view).

Design principles
-----------------
1) Wire names win:
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values: exactly the keys found in the JSON records
     (e.g., "DO", "SPC", "PH"), so `record[param.value]` works without a lookup table.

2) Derived metrics are not parameters:
   - `Metric.TEMP_OXYGEN` and friends select a view; they never appear on a Measurement.

Downstream usage
----------------
- lakeviz.core.schema reads measurement fields via `Parameter.value`.
- lakeviz.analysis uses `CORRELATION_PAIRS` to pick scatter axes.
- The Streamlit shell calls `resolve_view` on every metric/view change.

Examples
--------
>>> from lakeviz.core.grammar import metric_from_value, resolve_view, ChartKind, Metric
>>> metric_from_value("temp_oxygen") == Metric.TEMP_OXYGEN
True
>>> resolve_view(Metric.SECCHI, ChartKind.DEPTH)
<ChartKind.TIME: 'time'>
>>> parameter_label("DO")
'Dissolved Oxygen (mg/L)'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .constants import DEPTH_RANGE_SPECS, PARAMETER_LABELS

__all__ = [
    "Parameter",
    "Metric",
    "ChartKind",
    "Season",
    "TriState",
    "DepthRange",
    "CorrelationPair",
    "DEFAULT_DEPTH_RANGES",
    "CORRELATION_PAIRS",
    "SECCHI_SURFACE_PARAMETERS",
    "parameter_from_value",
    "metric_from_value",
    "chart_kind_from_value",
    "parameter_label",
    "resolve_view",
]


class Parameter(Enum):
    """
    A measured water-quality parameter (one optional numeric field per Measurement).
    """

    TEMPERATURE = "temperature"
    DO = "DO"
    SPC = "SPC"
    TDS = "TDS"
    PH = "PH"


class Metric(Enum):
    """
    A user-selectable metric: a raw parameter or a derived analysis view.
    """

    TEMPERATURE = "temperature"
    DO = "DO"
    SPC = "SPC"
    TDS = "TDS"
    PH = "PH"
    TEMP_OXYGEN = "temp_oxygen"
    CONDUCTIVITY_TDS = "conductivity_tds"
    PH_OXYGEN = "ph_oxygen"
    SECCHI = "secchi"

    @property
    def is_derived(self) -> bool:
        return self.value not in _PARAMETER_VALUES

    @property
    def parameter(self) -> Parameter | None:
        """The underlying Parameter, or None for derived metrics."""
        if self.is_derived:
            return None
        return Parameter(self.value)


class ChartKind(Enum):
    """
    Chart layout for raw-parameter metrics.

    - time: depth-band averages over sampling dates
    - depth: value on x, depth on y (inverted)
    - horizontal: depth on x, value on y
    """

    TIME = "time"
    DEPTH = "depth"
    HORIZONTAL = "horizontal"


class Season(Enum):
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class TriState(Enum):
    """
    Visibility summary over a group of series.

    Always derived from the current visible set on query; never stored.
    """

    NONE = "none"
    SOME = "some"
    ALL = "all"


@dataclass(frozen=True)
class DepthRange:
    """
    Inclusive depth band in meters.

    Attributes:
        name (str): Display name (e.g., "Surface (0-2m)").
        min (float): Lower bound, inclusive.
        max (float): Upper bound, inclusive.
    """

    name: str
    min: float
    max: float

    def contains(self, depth: float) -> bool:
        return self.min <= depth <= self.max


@dataclass(frozen=True)
class CorrelationPair:
    """
    Axes for a derived correlation metric.

    Attributes:
        x (Parameter): Parameter on the x axis.
        y (Parameter): Parameter on the y axis.
        title (str): Chart title stem.
        per_depth_range (bool): Draw one chart per configured depth band when True,
            otherwise a single chart over all depths.
    """

    x: Parameter
    y: Parameter
    title: str
    per_depth_range: bool


_PARAMETER_VALUES: Final[frozenset[str]] = frozenset(p.value for p in Parameter)

DEFAULT_DEPTH_RANGES: Final[tuple[DepthRange, ...]] = tuple(
    DepthRange(name, lo, hi) for name, lo, hi in DEPTH_RANGE_SPECS
)

CORRELATION_PAIRS: Final[dict[Metric, CorrelationPair]] = {
    Metric.TEMP_OXYGEN: CorrelationPair(
        Parameter.TEMPERATURE, Parameter.DO, "Temperature vs Dissolved Oxygen", True
    ),
    Metric.CONDUCTIVITY_TDS: CorrelationPair(
        Parameter.SPC, Parameter.TDS, "Specific Conductance vs Total Dissolved Solids", False
    ),
    Metric.PH_OXYGEN: CorrelationPair(Parameter.PH, Parameter.DO, "pH vs Dissolved Oxygen", True),
}

# Surface parameters plotted against Secchi depth, with axis labels.
SECCHI_SURFACE_PARAMETERS: Final[tuple[tuple[Parameter, str], ...]] = (
    (Parameter.TEMPERATURE, "Surface Temperature (°C)"),
    (Parameter.DO, "Surface Dissolved Oxygen (mg/L)"),
    (Parameter.PH, "Surface pH"),
)


def parameter_from_value(s: str | Parameter) -> Parameter:
    """
    Parse a record field name into a Parameter.

    Raises:
      ValueError: If s is not a known parameter.
    """
    if isinstance(s, Parameter):
        return s
    return Parameter(s)


def metric_from_value(s: str | Metric) -> Metric:
    """
    Parse a metric token (raw parameter or derived view) into a Metric.

    Raises:
      ValueError: If s is not a known metric.
    """
    if isinstance(s, Metric):
        return s
    return Metric(s)


def chart_kind_from_value(s: str | ChartKind) -> ChartKind:
    if isinstance(s, ChartKind):
        return s
    return ChartKind(s)


def parameter_label(param: str | Parameter | Metric) -> str:
    """Return the display label for a parameter or metric, falling back to the raw token."""
    key = param.value if isinstance(param, (Parameter, Metric)) else str(param)
    return PARAMETER_LABELS.get(key, key)


def resolve_view(metric: Metric, requested: ChartKind) -> ChartKind:
    """
    Return the chart kind actually drawn for a metric.

    Derived metrics (correlations, Secchi) have a single layout, so any requested view
    collapses to ChartKind.TIME; raw parameters honor the request.
    """
    if metric.is_derived:
        return ChartKind.TIME
    return requested
