from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import streamlit as st

from lakeviz.core.schema import Session
from lakeviz.io import VizSettings
from lakeviz.io.read import load_sessions as _read_sessions

__all__ = [
    "CacheConfig",
    "load_sessions",
]

# ---------- Cache configuration (factory of cached callables) ----------


@dataclass(frozen=True)
class CacheConfig:
    """Hashable cache configuration for Streamlit @st.cache_data.

    Note: Streamlit's decorator parameters (ttl, persist) are fixed at decoration
    time. We build and memoize decorated callables per (name, ttl, persist) so the
    app can switch these at runtime while still benefiting from caching.
    """

    ttl: int | None = None
    persist: bool = False


# Registry of decorated functions by (loader_name, CacheConfig)
_CACHE_REGISTRY: dict[tuple[str, CacheConfig], Callable[..., Any]] = {}


def _get_cached(loader_name: str, cfg: CacheConfig, fn: Callable[..., Any]) -> Callable[..., Any]:
    key = (loader_name, cfg)
    if key in _CACHE_REGISTRY:
        return _CACHE_REGISTRY[key]
    if cfg.persist:
        wrapped = st.cache_data(persist="disk", ttl=cfg.ttl)(fn)
    else:
        wrapped = st.cache_data(ttl=cfg.ttl)(fn)
    _CACHE_REGISTRY[key] = wrapped
    return wrapped


# ---------- Loaders (internal implementations) ----------


def _load_sessions_impl(data_dir: str, file_prefix: str) -> list[Session]:
    # Hashable scalar args only; the cache key is (data_dir, file_prefix).
    return _read_sessions(VizSettings(data_dir=data_dir, file_prefix=file_prefix))


# ---------- Public loader APIs (dispatch to cached implementations) ----------


def load_sessions(
    data_dir: str, file_prefix: str, *, cfg: CacheConfig = CacheConfig()
) -> list[Session]:
    """Load and validate every session under data_dir (cached per CacheConfig).

    Raises:
        lakeviz.io.errors.IoReadError: If data_dir does not exist.
        lakeviz.core.errors.EmptyDatasetError: If no sessions were read.
    """
    fn = _get_cached("load_sessions", cfg, _load_sessions_impl)
    return fn(data_dir, file_prefix)  # type: ignore[no-any-return]
