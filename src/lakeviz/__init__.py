"""
lakeviz — multi-parameter lake water-quality series, visibility, and analysis.

## Layers
- core — vocabulary, record schemas, date normalization, errors, defaults (zero-IO).
- io — settings (env/TOML) and JSON data loading.
- series — series registry, visibility store, and the WaterQualityModel controller.
- analysis — depth-band averages, depth profiles, paired scatter, regression, Secchi.
- viz — color model and legend summaries.

The Streamlit dashboard lives in the separate `app` package and consumes this library.
"""

from __future__ import annotations

__version__ = "0.1.0"
