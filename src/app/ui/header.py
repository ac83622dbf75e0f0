"""
Header (global controls) for the lakeviz Streamlit application.

This module renders the top-of-page controls, including:
- Data directory selection and discovery preferences (watch roots).
- Manual refresh button and demo-data creation on empty trees.
- Metric and chart-view selectors.
- Cache preferences panel and construction of the CacheConfig used by data loaders.

Notes:
    - Avoids performing heavy IO directly; uses ui.sources for scanning and caching.
    - The chart-view selector is disabled for derived metrics, which always use the
      time view (see lakeviz.core.grammar.resolve_view).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import streamlit as st

from app.data import CacheConfig
from lakeviz.core.grammar import (
    ChartKind,
    Metric,
    chart_kind_from_value,
    metric_from_value,
    parameter_label,
    resolve_view,
)

from .helpers import enable_vegafusion_optional, humanize_ago
from .sources import cached_list_sources, create_demo_data

_VIEW_LABELS: dict[ChartKind, str] = {
    ChartKind.TIME: "Time Series",
    ChartKind.DEPTH: "Depth Profile",
    ChartKind.HORIZONTAL: "Horizontal Depth Profile",
}


@dataclass(frozen=True)
class HeaderSelection:
    """Values chosen in the header for the current rerun."""

    data_dir: str
    metric: Metric
    view: ChartKind
    cache: CacheConfig


def render_header(
    *,
    default_data_dir: str,
    file_prefix: str,
) -> HeaderSelection:
    """Render the global header and return the current selection.

    The header provides:
      - Data directory selector populated from directories holding "<prefix>*.json".
      - Preferences for watch roots.
      - Metric selector (raw parameters, derived correlations, Secchi depth).
      - View selector (time, depth, horizontal), disabled for derived metrics.
      - Cache controls: TTL and persist-to-disk toggle.

    Args:
        default_data_dir (str): Directory preselected on first render (from VizSettings).
        file_prefix (str): Data file name prefix used for discovery.

    Returns:
        HeaderSelection: Data directory (may be empty), metric, resolved view and cache config.

    Notes:
        - When no data directories are found, a demo dataset is written under
          `default_data_dir` and discovery is re-run.
    """
    st.markdown("### Lake Water Quality")
    accel_msg = enable_vegafusion_optional()
    if accel_msg:
        st.caption(accel_msg)

    # Session defaults
    if "watch_roots" not in st.session_state:
        st.session_state["watch_roots"] = sorted({".", default_data_dir})
    if "cache_ttl" not in st.session_state:
        st.session_state["cache_ttl"] = 600
    if "cache_persist" not in st.session_state:
        st.session_state["cache_persist"] = False

    roots = tuple(sorted(set(map(str, st.session_state["watch_roots"] or ["."]))))
    sources = cached_list_sources(roots, file_prefix)

    if not sources:
        try:
            demo_path = create_demo_data(Path(default_data_dir), file_prefix)
            st.success(f"No data files found. Wrote demo data to {demo_path}")
            cached_list_sources.clear()
            sources = cached_list_sources(roots, file_prefix)
        except OSError as e:
            st.error(f"Failed to write demo data: {e}")

    c1, c2, c3, c4 = st.columns([0.34, 0.26, 0.22, 0.18])

    # Data directory selector
    option_to_path: dict[str, str] = {}
    options: list[str] = []
    for item in sources:
        label = f"{item['name']} ({item['files']} file(s)) updated {humanize_ago(item['mtime'])}"
        option_to_path[label] = item["path"]
        options.append(label)

    default_index = 0
    wanted = str(Path(default_data_dir).resolve())
    if st.session_state.get("selected_source_label") in options:
        default_index = options.index(st.session_state["selected_source_label"])
    else:
        for lab, pth in option_to_path.items():
            if pth == wanted:
                default_index = options.index(lab)
                break

    with c1:
        selected_label = st.selectbox(
            "Data directory",
            options=options or ["(no data found)"],
            index=default_index if options else 0,
            key="source_selector_header",
        )
        data_dir = option_to_path.get(selected_label, "") if options else ""
        st.caption(data_dir or f"Select a directory containing {file_prefix}*.json files.")
        with st.expander("Preferences", expanded=False):
            roots_all = st.multiselect(
                "Watch roots",
                options=sorted(set(st.session_state["watch_roots"] + [".", "data"])),
                default=st.session_state["watch_roots"],
                help="Directories scanned recursively for data files.",
                key="pref_watch_roots",
            )
            add_root = st.text_input(
                "Add root (absolute or relative path)",
                value="",
                placeholder="e.g., data/2024 or /abs/path/to/data",
                key="pref_watch_add_root",
            )
            if add_root:
                p = Path(add_root)
                if p.exists():
                    if str(p) not in roots_all:
                        roots_all.append(str(p))
                else:
                    st.caption("Path does not exist; not added.")
            st.session_state["watch_roots"] = roots_all or ["."]
            if st.button("Refresh"):
                cached_list_sources.clear()
                st.rerun()

    # Metric + view
    metric_options = [m.value for m in Metric]
    with c2:
        metric_value = st.selectbox(
            "Metric",
            options=metric_options,
            format_func=lambda v: parameter_label(metric_from_value(v)),
            key="metric_select",
        )
    metric = metric_from_value(metric_value)

    view_options = [k.value for k in ChartKind]
    with c3:
        view_value = st.selectbox(
            "View",
            options=view_options,
            format_func=lambda v: _VIEW_LABELS[chart_kind_from_value(v)],
            disabled=metric.is_derived,
            key="view_select",
        )
        if metric.is_derived:
            st.caption("Derived metrics use the time view.")
    view = resolve_view(metric, chart_kind_from_value(view_value))

    # Cache preferences
    with c4:
        with st.expander("Cache", expanded=False):
            ttl = st.number_input(
                "Cache TTL (seconds)",
                min_value=0,
                value=int(st.session_state["cache_ttl"]),
                step=60,
                help="0 disables TTL",
                key="cache_ttl_header",
            )
            persist = st.checkbox(
                "Persist to disk",
                value=bool(st.session_state["cache_persist"]),
                key="cache_persist_header",
            )
            st.session_state["cache_ttl"] = int(ttl)
            st.session_state["cache_persist"] = bool(persist)

    st.session_state["selected_source_label"] = selected_label

    cache_cfg = CacheConfig(
        ttl=int(st.session_state["cache_ttl"]) if int(st.session_state["cache_ttl"]) > 0 else None,
        persist=bool(st.session_state["cache_persist"]),
    )
    return HeaderSelection(data_dir=data_dir, metric=metric, view=view, cache=cache_cfg)
