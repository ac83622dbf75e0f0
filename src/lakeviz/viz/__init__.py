"""
lakeviz.viz — Read-only color and legend helpers for dashboards.

## Public API
- colors — season buckets, time gradient, palette expansion, per-series line colors.
- base — joins analysis frames back to visible series and adds color columns.
- legend — per-lake and overall summaries of the visible data.

## Import DAG discipline
- Depends on lakeviz.core, lakeviz.series (read-only), and polars.
- Must not mutate visibility state; chart construction lives in the app package.
"""

from __future__ import annotations
