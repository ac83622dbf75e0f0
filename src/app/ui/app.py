"""
Streamlit application orchestrator for lakeviz.

This module composes the global header, sidebar visibility controls, chart area and
legend while delegating supporting concerns to focused modules under app.ui.*
(header, sources, controls, legend, helpers).

Responsibilities:
    - Configure Streamlit page.
    - Resolve VizSettings (env > TOML > defaults) and apply CLI overrides.
    - Load sessions via app.data with configurable caching.
    - Keep one WaterQualityModel per browser session, rebuilt when the data changes.
    - Mount tab content (Charts, Data).

Notes:
    - Charts are produced by app.charts from frames built in lakeviz.analysis.
    - Derived metrics always render in the time view.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Any, cast

import altair as alt
import polars as pl
import streamlit as st

from app import charts as app_charts
from app.data import load_sessions
from lakeviz.analysis import (
    depth_bucket_average,
    paired_scatter,
    raw_depth_series,
    secchi_surface_pairs,
    secchi_time_series,
)
from lakeviz.core.errors import EmptyDatasetError
from lakeviz.core.grammar import (
    CORRELATION_PAIRS,
    SECCHI_SURFACE_PARAMETERS,
    ChartKind,
    Metric,
    Parameter,
    parameter_label,
)
from lakeviz.core.schema import Session
from lakeviz.io import VizSettings
from lakeviz.io.errors import IoConfigError, IoError
from lakeviz.series import Series, WaterQualityModel
from lakeviz.viz.base import attach_season_colors, attach_series_info, attach_time_gradient
from lakeviz.viz.legend import lake_summaries

from .controls import render_visibility_controls
from .header import render_header
from .helpers import compute_overview_kpis
from .legend import render_legend

logger = logging.getLogger(__name__)

_MODEL_KEY = "lakeviz_model"
_MODEL_SIG_KEY = "lakeviz_model_signature"


def _show(chart: alt.TopLevelMixin) -> None:
    st.altair_chart(cast(Any, chart), theme=None, use_container_width=True)


def _resolve_settings(default_data_dir: str | None, default_visible: int | None) -> VizSettings:
    try:
        settings = VizSettings.load()
    except IoConfigError as e:
        st.warning(f"Ignoring invalid configuration: {e}")
        settings = VizSettings()
    if default_data_dir:
        settings = replace(settings, data_dir=default_data_dir)
    if default_visible is not None:
        settings = replace(settings, default_visible=int(default_visible))
    return settings


def _session_model(sessions: list[Session], data_dir: str, default_visible: int) -> WaterQualityModel:
    """Return the per-browser-session model, reloading it when the data set changes.

    Visibility survives reruns and is only reset when the loaded data differ.
    """
    signature = (
        data_dir,
        default_visible,
        tuple((s.lake, s.date, s.time, s.source_file) for s in sessions),
    )
    model = st.session_state.get(_MODEL_KEY)
    if not isinstance(model, WaterQualityModel) or st.session_state.get(_MODEL_SIG_KEY) != signature:
        model = WaterQualityModel(default_count=default_visible)
        model.load(sessions)
        st.session_state[_MODEL_KEY] = model
        st.session_state[_MODEL_SIG_KEY] = signature
    return model


# ----------------------------
# Chart sections
# ----------------------------


def _render_time_series(
    param: Parameter, visible: Sequence[Session], settings: VizSettings
) -> None:
    lakes = lake_summaries(visible, settings.palettes)
    for rng in settings.depth_ranges:
        df = depth_bucket_average(visible, rng, param)
        _show(
            app_charts.time_series_chart(
                df, lakes=lakes, value_label=parameter_label(param), title=rng.name
            )
        )


def _render_depth_profiles(
    param: Parameter,
    view: ChartKind,
    visible_series: Sequence[Series],
    model: WaterQualityModel,
    settings: VizSettings,
) -> None:
    sessions = [s.session for s in visible_series]
    raw = raw_depth_series(sessions, param)
    raw = attach_series_info(raw, visible_series, model.registry, settings.palettes)
    lakes = list(dict.fromkeys(s.lake for s in visible_series))
    cols = st.columns(len(lakes)) if view is ChartKind.DEPTH and lakes else None
    for i, lake in enumerate(lakes):
        chart = app_charts.depth_profile_chart(
            raw.filter(pl.col("lake") == lake),
            value_label=parameter_label(param),
            title=f"{lake} Lake",
            horizontal=view is ChartKind.HORIZONTAL,
        )
        if cols is not None:
            with cols[i]:
                _show(chart)
        else:
            _show(chart)


def _render_correlation(metric: Metric, visible: Sequence[Session], settings: VizSettings) -> None:
    pair = CORRELATION_PAIRS[metric]
    x_label, y_label = parameter_label(pair.x), parameter_label(pair.y)
    if pair.per_depth_range:
        for rng in settings.depth_ranges:
            df = attach_time_gradient(paired_scatter(visible, pair.x, pair.y, rng))
            _show(
                app_charts.correlation_chart(
                    df, x_label=x_label, y_label=y_label, title=f"{pair.title} - {rng.name}"
                )
            )
    else:
        df = attach_time_gradient(paired_scatter(visible, pair.x, pair.y))
        _show(app_charts.correlation_chart(df, x_label=x_label, y_label=y_label, title=pair.title))


def _render_secchi(visible: Sequence[Session], settings: VizSettings) -> None:
    lakes = lake_summaries(visible, settings.palettes)
    ts = secchi_time_series(visible)
    if ts.height:
        ts = attach_season_colors(ts)
    _show(app_charts.secchi_time_series_chart(ts, lakes=lakes))

    st.subheader("Secchi Depth vs Surface Parameters")
    cols = st.columns(len(SECCHI_SURFACE_PARAMETERS))
    for col, (param, label) in zip(cols, SECCHI_SURFACE_PARAMETERS, strict=True):
        pairs = secchi_surface_pairs(visible, param)
        if pairs.height:
            pairs = attach_season_colors(pairs)
        with col:
            _show(app_charts.secchi_correlation_chart(pairs, x_label=label))


def render_charts(
    metric: Metric, view: ChartKind, model: WaterQualityModel, settings: VizSettings
) -> None:
    """Draw the charts for the active metric/view from the model's visible sessions."""
    visible_series = model.visible_series()
    visible = [s.session for s in visible_series]
    param = metric.parameter
    st.subheader(parameter_label(metric))
    if not visible:
        st.info("No datasets visible. Use the sidebar to select sampling dates.")
        return
    if metric is Metric.SECCHI:
        _render_secchi(visible, settings)
    elif metric in CORRELATION_PAIRS:
        _render_correlation(metric, visible, settings)
    elif param is None:
        st.info(f"No chart layout for {parameter_label(metric)}.")
    elif view is ChartKind.TIME:
        _render_time_series(param, visible, settings)
    else:
        _render_depth_profiles(param, view, visible_series, model, settings)


def streamlit_app(
    default_data_dir: str | None = None,
    default_visible: int | None = None,
) -> None:
    """Render the lakeviz Streamlit application.

    Args:
        default_data_dir (str | None): Data directory preselected in the header; overrides
            the configured VizSettings.data_dir when given.
        default_visible (int | None): Series visible after each load; overrides
            VizSettings.default_visible when given.

    Returns:
        None

    Notes:
        - Uses app.ui.header.render_header to render the global controls and compute a
          CacheConfig used by the loader in app.data.
        - When no data files are found, a demo dataset is written to the data directory.
    """
    st.set_page_config(page_title="Lake Water Quality", layout="wide")

    settings = _resolve_settings(default_data_dir, default_visible)
    selection = render_header(
        default_data_dir=settings.data_dir,
        file_prefix=settings.file_prefix,
    )
    if not selection.data_dir:
        st.error(f"Select a data directory (contains {settings.file_prefix}*.json) from the header.")
        return

    try:
        with st.spinner("Loading water quality data ..."):
            sessions = load_sessions(selection.data_dir, settings.file_prefix, cfg=selection.cache)
    except (IoError, EmptyDatasetError) as e:
        logger.warning("Load failed for %s: %s", selection.data_dir, e)
        st.error(f"Error loading data: {e}")
        return

    model = _session_model(sessions, selection.data_dir, settings.default_visible)
    render_visibility_controls(model)

    tab_charts, tab_data = st.tabs(["Charts", "Data"])

    with tab_charts:
        kpi = compute_overview_kpis(model)
        c1, c2, c3, c4 = st.columns(4)
        with c1:
            st.metric("Datasets", kpi["series_total"])
        with c2:
            st.metric("Visible", kpi["series_visible"])
        with c3:
            st.metric("Lakes", kpi["lakes"])
        with c4:
            st.caption(f"Date range: {kpi['date_range']}")

        main, side = st.columns([0.78, 0.22])
        with main:
            render_charts(selection.metric, selection.view, model, settings)
        with side:
            render_legend(
                selection.metric, selection.view, model.get_visible_data(), settings.palettes
            )

    with tab_data:
        head_n = st.number_input(
            "Show first N sessions", min_value=5, value=100, step=25, key="data_head_n"
        )
        rows = [
            {
                "series_id": s.id,
                "lake": s.lake,
                "date": s.date,
                "visible": model.visibility.is_visible(s.id),
                "measurements": len(s.session.measurements),
                "secchi_readings": len(s.session.secchi_depth),
                "source_file": s.session.source_file,
            }
            for s in model.get_all_series()
        ]
        st.dataframe(pl.DataFrame(rows).head(int(head_n)), width="stretch")
        st.text(f"Sessions: {len(rows)}, Visible: {len(model.get_visible_series())}")
