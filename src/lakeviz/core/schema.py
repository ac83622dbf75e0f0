"""
Pydantic v2 models for raw sampling records.

Responsibilities
- Define `Measurement` (one depth sample) and `Session` (one sampling event).
- Normalize "not measured" to None: absent keys, nulls, non-numeric values, and NaN all
  become None rather than raising.
- Require only what is needed to place a session in the registry: `lake` and an
  ISO-parseable `date`.

Style
- Zero-IO (stdlib + pydantic only).
- Extra keys are preserved (extra="allow") so site-specific fields survive a round trip.

Examples
--------
>>> from lakeviz.core.schema import Session
>>> s = Session.model_validate({
...     "lake": "Hague",
...     "date": "2024-06-15",
...     "measurements": [{"depth": 0, "temperature": 21.5, "DO": "n/a"}],
...     "secchi_depth": [3.1, None, 3.3],
... })
>>> s.measurements[0].DO is None
True
>>> s.day.isoformat()
'2024-06-15'
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .dates import date_key, parse_timestamp
from .grammar import Parameter

__all__ = [
    "Measurement",
    "Session",
    "optional_float",
]


def optional_float(v: Any) -> float | None:
    """Coerce to float, mapping null, booleans, non-numeric strings, and NaN to None."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        f = float(v)
    elif isinstance(v, str):
        try:
            f = float(v.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(f) or math.isinf(f):
        return None
    return f


class Measurement(BaseModel):
    """
    One depth sample within a session.

    Attributes:
        depth (float): Sample depth in meters (>= 0).
        temperature (float | None): Water temperature (°C).
        DO (float | None): Dissolved oxygen (mg/L).
        SPC (float | None): Specific conductance (μS/cm).
        TDS (float | None): Total dissolved solids (mg/L).
        PH (float | None): pH.

    Notes:
        Any parameter may be None, meaning "not measured".
    """

    model_config = ConfigDict(extra="allow")

    depth: float = Field(ge=0)
    temperature: float | None = None
    DO: float | None = None
    SPC: float | None = None
    TDS: float | None = None
    PH: float | None = None

    @field_validator("temperature", "DO", "SPC", "TDS", "PH", mode="before")
    @classmethod
    def _coerce_parameter(cls, v: Any) -> float | None:
        return optional_float(v)

    def value(self, param: Parameter | str) -> float | None:
        """Return the value for a parameter (None when not measured)."""
        key = param.value if isinstance(param, Parameter) else str(param)
        return getattr(self, Parameter(key).value)


class Session(BaseModel):
    """
    One sampling event at one lake.

    Attributes:
        lake (str): Lake identifier.
        date (str): ISO date or datetime string as recorded.
        time (str | None): Optional time-of-day label.
        weather (str | None): Free-form weather description.
        air_temperature (float | None): Air temperature (°C).
        water_temperature (float | None): Surface water temperature (°C).
        measurers (Any): Names of the people sampling (free-form).
        measurements (list[Measurement]): Depth samples in sampling order (shallow→deep).
        secchi_depth (list[float | None]): Repeated Secchi readings; entries may be None.
        source_file (str | None): Name of the file the record was read from.

    Notes:
        - measurements entries that are not objects or lack a usable depth are dropped.
        - A scalar secchi_depth is treated as a single reading.
    """

    model_config = ConfigDict(extra="allow")

    lake: str
    date: str
    time: str | None = None
    weather: str | None = None
    air_temperature: float | None = None
    water_temperature: float | None = None
    measurers: Any = None
    measurements: list[Measurement] = Field(default_factory=list)
    secchi_depth: list[float | None] = Field(default_factory=list)
    source_file: str | None = None

    @field_validator("lake", mode="before")
    @classmethod
    def _normalize_lake(cls, v: Any) -> str:
        if v is None:
            raise ValueError("lake is required")
        s = str(v).strip()
        if not s:
            raise ValueError("lake must be non-empty")
        return s

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, v: Any) -> str:
        if isinstance(v, (date, datetime)):
            return v.isoformat()
        if not isinstance(v, str):
            raise ValueError(f"date must be an ISO string (got {v!r})")
        parse_timestamp(v)
        return v.strip()

    @field_validator("time", "weather", mode="before")
    @classmethod
    def _optional_text(cls, v: Any) -> str | None:
        if v is None:
            return None
        return str(v)

    @field_validator("air_temperature", "water_temperature", mode="before")
    @classmethod
    def _optional_number(cls, v: Any) -> float | None:
        return optional_float(v)

    @field_validator("measurements", mode="before")
    @classmethod
    def _keep_usable_measurements(cls, v: Any) -> list[Any]:
        if not isinstance(v, list):
            return []
        out: list[Any] = []
        for m in v:
            if isinstance(m, Measurement):
                out.append(m)
                continue
            if not isinstance(m, dict):
                continue
            depth = optional_float(m.get("depth"))
            if depth is None or depth < 0:
                continue
            out.append(m)
        return out

    @field_validator("secchi_depth", mode="before")
    @classmethod
    def _coerce_secchi(cls, v: Any) -> list[float | None]:
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            v = [v]
        return [optional_float(x) for x in v]

    @property
    def timestamp(self) -> datetime:
        return parse_timestamp(self.date)

    @property
    def day(self) -> date:
        return date_key(self.date)

    @property
    def year(self) -> int:
        return self.day.year

    @property
    def surface(self) -> Measurement | None:
        """First measurement in sampling order, or None when there are none."""
        return self.measurements[0] if self.measurements else None
