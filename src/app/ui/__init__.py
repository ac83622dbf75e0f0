"""
lakeviz App UI package.

This package contains the decomposed Streamlit UI for the lake water-quality
dashboard. It exposes high-level orchestration and focused modules for separate
concerns.

Modules:
    - app: Streamlit application orchestrator (streamlit_app).
    - header: Global header (data directory picker, metric/view, cache preferences).
    - sources: Data directory discovery, caching, and demo-data creation.
    - controls: Sidebar visibility tree (years, dates, series).
    - legend: Legend panel per metric.
    - helpers: Small cross-cutting helpers (accelerators, time formatting, KPIs).

Usage:
    from app.ui import streamlit_app
    streamlit_app(default_data_dir="data", default_visible=12)
"""

from __future__ import annotations

from .app import streamlit_app
from .header import render_header

__all__ = [
    "streamlit_app",
    "render_header",
]
