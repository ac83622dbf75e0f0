"""
Legend panel for the lakeviz Streamlit application.

Formats the summaries computed by lakeviz.viz.legend for the active metric:
- Correlation metrics: time-gradient swatches plus a data overview.
- Secchi depth: season swatches plus per-lake summaries.
- Raw parameters: per-lake swatch, dataset count and date range.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import streamlit as st

from lakeviz.core.grammar import ChartKind, Metric
from lakeviz.core.schema import Session
from lakeviz.viz.legend import (
    LakeSummary,
    data_overview,
    gradient_endpoints,
    lake_summaries,
    season_legend,
)


def _swatch(color: str, text: str) -> str:
    return (
        f'<span style="display:inline-block;width:14px;height:14px;border-radius:3px;'
        f'background:{color};margin-right:6px;vertical-align:middle"></span>{text}'
    )


def _render_lakes(summaries: Sequence[LakeSummary]) -> None:
    for s in summaries:
        st.markdown(_swatch(s.color, f"**{s.lake} Lake**"), unsafe_allow_html=True)
        st.caption(f"{s.datasets} dataset(s) · {s.date_range_label}")


def render_legend(
    metric: Metric,
    view: ChartKind,
    sessions: Sequence[Session],
    palettes: Mapping[str, Sequence[str]] | None = None,
) -> None:
    """Render the legend for the visible sessions.

    Args:
        metric (Metric): Active metric.
        view (ChartKind): Resolved chart view.
        sessions (Sequence[Session]): Visible sessions in registry order.
        palettes (Mapping[str, Sequence[str]] | None): Lake → base colors override.
    """
    st.subheader("Legend")
    if not sessions:
        st.caption("No datasets visible.")
        return

    if metric is Metric.SECCHI:
        st.markdown("**Seasonal Color Coding**")
        st.markdown(
            " ".join(_swatch(color, label) for label, color in season_legend()),
            unsafe_allow_html=True,
        )
        _render_lakes(lake_summaries(sessions, palettes))
        return

    if metric.is_derived:
        early, late = gradient_endpoints()
        st.markdown("**Time Gradient**")
        st.markdown(
            f"{_swatch(early, 'Earlier')} → {_swatch(late, 'Later')}", unsafe_allow_html=True
        )
        overview = data_overview(sessions)
        st.markdown(
            f"**Data Overview:**  \nLakes: {', '.join(overview.lakes)}  \n"
            f"Datasets: {overview.datasets}  \nDate Range: {overview.date_range_label}"
        )
        return

    if view in (ChartKind.DEPTH, ChartKind.HORIZONTAL):
        st.caption(
            "Each line is one sampling date; lines of a lake share its palette. "
            "Hover over points for details."
        )
    _render_lakes(lake_summaries(sessions, palettes))
