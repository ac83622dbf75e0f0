"""
Visibility controls (sidebar) for the lakeviz Streamlit application.

Renders Select All / Select None, a checkbox per year with the dates of that year in
an expander, and per-series checkboxes under each date. Every checkbox value is
written from the model's visibility store before the widget is created, and every
change is routed back through a store toggle, so the store stays the single source
of truth and groups read checked only when all their members are visible.
"""

from __future__ import annotations

import logging

import streamlit as st

from lakeviz.core.dates import format_date
from lakeviz.core.grammar import TriState
from lakeviz.series import WaterQualityModel

from .helpers import tri_state_label

logger = logging.getLogger(__name__)


def _bind(key: str, checked: bool) -> str:
    st.session_state[key] = checked
    return key


def render_visibility_controls(model: WaterQualityModel) -> None:
    """Render the dataset visibility tree in the sidebar.

    Args:
        model (WaterQualityModel): Loaded model; its visibility store is mutated by the
            widget callbacks.

    Notes:
        Nothing is rendered when the model has too few series to warrant controls
        (WaterQualityModel.show_controls).
    """
    if not model.show_controls():
        return
    store = model.visibility
    total = len(model.get_all_series())

    with st.sidebar:
        st.subheader("Datasets")
        st.caption(f"{len(model.get_visible_series())} of {total} visible")
        c1, c2 = st.columns(2)
        with c1:
            st.button("Select All", on_click=store.set_all, args=(True,), key="vis_select_all")
        with c2:
            st.button("Select None", on_click=store.set_all, args=(False,), key="vis_select_none")

        for year_node in model.visibility_tree():
            year = year_node.year
            st.checkbox(
                tri_state_label(str(year), year_node.state),
                key=_bind(f"vis_year_{year}", year_node.state is TriState.ALL),
                on_change=store.toggle_by_year,
                args=(year,),
            )
            with st.expander(f"{year} sampling dates", expanded=False):
                for date_node in year_node.dates:
                    day = date_node.day
                    st.checkbox(
                        tri_state_label(
                            f"{format_date(day)} ({len(date_node.series)})", date_node.state
                        ),
                        key=_bind(f"vis_date_{day.isoformat()}", date_node.state is TriState.ALL),
                        on_change=store.toggle_by_date,
                        args=(day,),
                    )
                    for node in date_node.series:
                        st.checkbox(
                            f" {node.series.lake} #{node.series.ordinal + 1}",
                            key=_bind(f"vis_series_{node.series.id}", node.visible),
                            on_change=store.toggle_series,
                            args=(node.series.id,),
                        )
        logger.debug("rendered visibility controls for %d series", total)
