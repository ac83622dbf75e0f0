"""
Shared UI helper utilities for the lakeviz Streamlit application.

This module centralizes small cross-cutting helpers (accelerators, time formatting,
checkbox labels, quick KPI computations) used by multiple UI components. Keeping these
here avoids circular imports and makes per-section modules leaner.

Notes:
    - All functions include Google-style docstrings.
    - This module contains no Streamlit state manipulation itself.
"""

from __future__ import annotations

from datetime import UTC, datetime

import altair as alt

from lakeviz.core.dates import format_date
from lakeviz.core.grammar import TriState
from lakeviz.series import WaterQualityModel

_STATE_MARKERS: dict[TriState, str] = {
    TriState.ALL: "●",
    TriState.SOME: "◐",
    TriState.NONE: "○",
}


def enable_vegafusion_optional() -> str | None:
    """Attempt to enable the VegaFusion accelerator for Altair if available.

    Returns:
        str | None: Short status message if enabling succeeded, otherwise None.
    """
    try:
        alt.data_transformers.enable("vegafusion")
        return "VegaFusion enabled (optional accelerator)."
    except Exception:
        return None


def humanize_ago(ts: float) -> str:
    """Convert a UNIX timestamp into a short humanized age string.

    Args:
        ts (float): UNIX timestamp (seconds since epoch).

    Returns:
        str: Humanized string like "32s ago", "5m ago", "2h ago", "3d ago",
        or "n/a" if conversion fails.
    """
    try:
        dt = datetime.fromtimestamp(ts, tz=UTC)
        now = datetime.now(tz=UTC)
        delta = (now - dt).total_seconds()
        if delta < 60:
            return f"{int(delta)}s ago"
        if delta < 3600:
            return f"{int(delta // 60)}m ago"
        if delta < 86400:
            return f"{int(delta // 3600)}h ago"
        return f"{int(delta // 86400)}d ago"
    except (OverflowError, OSError, ValueError):
        return "n/a"


def tri_state_label(text: str, state: TriState) -> str:
    """Prefix a group label with a marker for its tri-state (● all, ◐ some, ○ none).

    Streamlit checkboxes have no indeterminate display, so the partial state is shown
    in the label while the box itself reads checked only for TriState.ALL.

    Args:
        text (str): Group label (year or formatted date).
        state (TriState): Current state from the visibility store.

    Returns:
        str: Label such as "◐ 2024".
    """
    return f"{_STATE_MARKERS[state]} {text}"


def compute_overview_kpis(model: WaterQualityModel) -> dict[str, object]:
    """Compute quick summary figures for the loaded data.

    Args:
        model (WaterQualityModel): Loaded model.

    Returns:
        dict[str, object]: Keys "series_total", "series_visible", "lakes", "date_range"
        (formatted "Mon D, YYYY - Mon D, YYYY" over all loaded series, "" when empty).
    """
    series = model.get_all_series()
    days = [s.date for s in series]
    date_range = f"{format_date(min(days))} - {format_date(max(days))}" if days else ""
    return {
        "series_total": len(series),
        "series_visible": len(model.get_visible_series()),
        "lakes": len(model.registry.lakes),
        "date_range": date_range,
    }
