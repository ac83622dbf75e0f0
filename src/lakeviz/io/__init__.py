"""
lakeviz.io — Settings and JSON data loading.

## Responsibilities
- Resolve VizSettings from environment, TOML, and defaults.
- Discover data files and validate their records into lakeviz.core.schema.Session models.

## Public API
- VizSettings — configuration (defaults sourced from lakeviz.core.constants).
- load_sessions — discover + read; raises EmptyDatasetError when nothing loads.

## Import DAG discipline
- Depends only on stdlib, pydantic, and lakeviz.core.*.
- MUST NOT import series, analysis, viz, or app.

## Examples
```python
from lakeviz.io import VizSettings, load_sessions
sessions = load_sessions(VizSettings(data_dir="data"))  # doctest: +SKIP
```
"""

from __future__ import annotations

from .config import VizSettings
from .read import load_sessions

__all__ = [
    "VizSettings",
    "load_sessions",
]
