"""
lakeviz.analysis — Pure transforms over the visible session list.

## Public API
- aggregate — depth-band averages, raw depth profiles, paired-parameter scatter (Polars).
- regression — least-squares fit with R² for trend overlays.
- secchi — per-session Secchi means and Secchi vs surface-parameter pairs.

## Import DAG discipline
- Depends on lakeviz.core and polars; never touches visibility state or IO.
"""

from __future__ import annotations

from .aggregate import depth_bucket_average, measurements_frame, paired_scatter, raw_depth_series
from .regression import RegressionFit, fit_frame, linear_regression, trend_line
from .secchi import secchi_session_average, secchi_surface_pairs, secchi_time_series

__all__ = [
    "measurements_frame",
    "depth_bucket_average",
    "raw_depth_series",
    "paired_scatter",
    "RegressionFit",
    "linear_regression",
    "fit_frame",
    "trend_line",
    "secchi_session_average",
    "secchi_time_series",
    "secchi_surface_pairs",
]
