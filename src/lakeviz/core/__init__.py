"""
Core package for lakeviz contracts (vocabulary, record schemas, dates, errors, defaults).

## Contracts (single source of truth)
- Grammar — parameter/metric/view enums, depth bands, correlation pairs.
- Schema — pydantic models for raw sampling records (Measurement, Session).
- Dates — the one date-normalization path used by every grouping key.
- Errors — EmptyDatasetError, InsufficientDataError.
- Constants — dashboard defaults (visible count, palettes, season colors).

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Enum values equal the raw record field names ("DO", "SPC", ...).

## Downstream usage
- lakeviz.io — validates JSON records into `Session` models.
- lakeviz.series — orders sessions with `dates.parse_timestamp`, groups with `dates.date_key`.
- lakeviz.analysis — reads parameters through `Parameter` and raises `InsufficientDataError`.
- app — resolves the drawn view with `grammar.resolve_view`.

## Examples
```python
from lakeviz.core.grammar import Metric, ChartKind, resolve_view
resolve_view(Metric.TEMPERATURE, ChartKind.DEPTH)  # ChartKind.DEPTH
resolve_view(Metric.TEMP_OXYGEN, ChartKind.DEPTH)  # ChartKind.TIME
```
"""
