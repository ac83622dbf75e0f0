"""
Dashboard defaults for lakeviz.

Defines the default visibility count, depth bands, per-lake base palettes, season colors,
gradient endpoints, and parameter labels consumed by the series, analysis, and viz layers.
This module is zero-IO and uses only the Python standard library.

Notes:
    - lakeviz.io.config.VizSettings sources its defaults here; override via env/TOML rather
      than editing these values.
    - Palettes are base colors only; lakeviz.viz.colors.expand_palette derives the rest.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "DEFAULT_VISIBLE_COUNT",
    "MIN_CONTROLS_SERIES",
    "DEPTH_RANGE_SPECS",
    "LAKE_PALETTES",
    "FALLBACK_PALETTE",
    "SEASON_COLORS",
    "GRADIENT_HUE_START",
    "GRADIENT_HUE_END",
    "GRADIENT_SATURATION",
    "GRADIENT_LIGHTNESS",
    "PALETTE_HUE_STEP",
    "PARAMETER_LABELS",
    "DATA_FILE_PREFIX",
]

# Number of series shown after a fresh load (global, in registry order).
DEFAULT_VISIBLE_COUNT: Final[int] = 12

# Visibility controls are not offered for registries this small.
MIN_CONTROLS_SERIES: Final[int] = 6

# (name, min_depth_m, max_depth_m); bounds are inclusive.
DEPTH_RANGE_SPECS: Final[tuple[tuple[str, float, float], ...]] = (
    ("Surface (0-2m)", 0.0, 2.0),
    ("Mid-depth (3-8m)", 3.0, 8.0),
    ("Deep (9m+)", 9.0, 50.0),
)

LAKE_PALETTES: Final[dict[str, tuple[str, ...]]] = {
    "Gunflint": ("#FF6B6B", "#FF8E53", "#FF9F43"),
    "Hague": ("#4ECDC4", "#45B7D1", "#6C5CE7"),
}

# Used for lakes without a configured palette.
FALLBACK_PALETTE: Final[tuple[str, ...]] = ("#7F8C8D", "#95A5A6", "#34495E")

SEASON_COLORS: Final[dict[str, str]] = {
    "spring": "#4CAF50",
    "summer": "#FF9800",
    "fall": "#FF5722",
    "winter": "#2196F3",
}

# Time gradient runs blue (earliest) to green (latest) at fixed saturation/lightness.
GRADIENT_HUE_START: Final[float] = 240.0
GRADIENT_HUE_END: Final[float] = 120.0
GRADIENT_SATURATION: Final[float] = 0.7
GRADIENT_LIGHTNESS: Final[float] = 0.5

# Hue rotation (degrees) applied per palette wrap-around.
PALETTE_HUE_STEP: Final[float] = 25.0

PARAMETER_LABELS: Final[dict[str, str]] = {
    "temperature": "Temperature (°C)",
    "DO": "Dissolved Oxygen (mg/L)",
    "SPC": "Specific Conductance (μS/cm)",
    "TDS": "Total Dissolved Solids (mg/L)",
    "PH": "pH Level",
    "temp_oxygen": "Temperature vs Oxygen Correlation",
    "conductivity_tds": "Conductivity vs TDS Correlation",
    "ph_oxygen": "pH vs Dissolved Oxygen Correlation",
    "secchi": "Secchi Depth Analysis",
}

# Data files in a directory listing must start with this prefix.
DATA_FILE_PREFIX: Final[str] = "water"
