"""
Configuration for lakeviz data loading and dashboard defaults.

Defines VizSettings, a frozen dataclass carrying runtime configuration. Defaults are sourced
from lakeviz.core.constants (the single source of truth).

Source of truth
- lakeviz.core.constants.DEFAULT_VISIBLE_COUNT, DEPTH_RANGE_SPECS, LAKE_PALETTES,
  DATA_FILE_PREFIX

Import DAG discipline
- Depends only on stdlib and lakeviz.core.
- Does not import higher layers (series, analysis, viz, app).

Notes
- Precedence: environment > TOML > defaults.
- Invalid values in env/TOML are ignored (the previous value is kept); invalid values passed
  to `validated()` raise IoConfigError.
"""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from lakeviz.core.constants import DATA_FILE_PREFIX, DEFAULT_VISIBLE_COUNT, LAKE_PALETTES
from lakeviz.core.grammar import DEFAULT_DEPTH_RANGES, DepthRange

from .errors import IoConfigError


_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def _default_palettes() -> dict[str, tuple[str, ...]]:
    return {lake: tuple(colors) for lake, colors in LAKE_PALETTES.items()}


@dataclass(frozen=True)
class VizSettings:
    """
    Runtime settings for lakeviz.

    Attributes:
        data_dir (str): Directory holding the JSON data files.
        file_prefix (str): Only files named "<prefix>*.json" are picked up from a listing.
        default_visible (int): Series shown after each load (first k in registry order).
        depth_ranges (tuple[DepthRange, ...]): Depth bands for time series and correlations.
        palettes (dict[str, tuple[str, ...]]): Lake → base colors.

    Examples:
        >>> from lakeviz.io.config import VizSettings
        >>> VizSettings(data_dir="data", default_visible=6)  # doctest: +ELLIPSIS
        VizSettings(...)
    """

    data_dir: str = "data"
    file_prefix: str = DATA_FILE_PREFIX
    default_visible: int = DEFAULT_VISIBLE_COUNT
    depth_ranges: tuple[DepthRange, ...] = DEFAULT_DEPTH_RANGES
    palettes: dict[str, tuple[str, ...]] = field(default_factory=_default_palettes)

    def validated(self) -> VizSettings:
        """
        Check value ranges.

        Raises:
            IoConfigError: If default_visible < 0, a depth band has min > max, a palette
                color is not '#rgb'/'#rrggbb', or the data_dir is empty.
        """
        if not self.data_dir:
            raise IoConfigError("data_dir must be non-empty")
        if self.default_visible < 0:
            raise IoConfigError(f"default_visible must be >= 0 (got {self.default_visible})")
        for r in self.depth_ranges:
            if r.min > r.max:
                raise IoConfigError(f"depth range {r.name!r} has min > max")
        for lake, colors in self.palettes.items():
            bad = [c for c in colors if not _HEX_COLOR.fullmatch(c.strip())]
            if bad:
                raise IoConfigError(f"palette for {lake!r} has non-hex colors: {bad}")
        return self

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: VizSettings, cfg: dict[str, Any] | None) -> VizSettings:
        """Apply a loose config mapping onto VizSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "data_dir" in cfg and isinstance(cfg["data_dir"], str):
            s = replace(s, data_dir=cfg["data_dir"])

        if "file_prefix" in cfg and isinstance(cfg["file_prefix"], str):
            s = replace(s, file_prefix=cfg["file_prefix"])

        if "default_visible" in cfg:
            try:
                s = replace(s, default_visible=int(cfg["default_visible"]))
            except (TypeError, ValueError):
                pass

        # depth_ranges: list of {name, min, max}; a malformed entry discards the whole list
        if "depth_ranges" in cfg and isinstance(cfg["depth_ranges"], list):
            ranges: list[DepthRange] = []
            try:
                for item in cfg["depth_ranges"]:
                    ranges.append(
                        DepthRange(str(item["name"]), float(item["min"]), float(item["max"]))
                    )
            except (KeyError, TypeError, ValueError):
                ranges = []
            if ranges:
                s = replace(s, depth_ranges=tuple(ranges))

        if "palettes" in cfg and isinstance(cfg["palettes"], dict):
            palettes = dict(s.palettes)
            for lake, colors in cfg["palettes"].items():
                if isinstance(colors, list) and colors and all(isinstance(c, str) for c in colors):
                    palettes[str(lake)] = tuple(colors)
            s = replace(s, palettes=palettes)

        return s

    @classmethod
    def from_env(cls, base: VizSettings | None = None, prefix: str = "LAKEVIZ_") -> VizSettings:
        """
        Build VizSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - LAKEVIZ_DATA_DIR
            - LAKEVIZ_FILE_PREFIX
            - LAKEVIZ_DEFAULT_VISIBLE
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        v = get("DATA_DIR")
        if v:
            mapping["data_dir"] = v
        v = get("FILE_PREFIX")
        if v:
            mapping["file_prefix"] = v
        v = get("DEFAULT_VISIBLE")
        if v:
            mapping["default_visible"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> VizSettings:
        """
        Build VizSettings from a TOML file.

        Search order when `path` is None:
            1) ./lakeviz.toml (with either a top-level [viz] table or direct keys)
            2) ./pyproject.toml under [tool.lakeviz]

        Returns defaults if no file is present or the file cannot be parsed.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "lakeviz.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("lakeviz") if isinstance(tool, dict) else None
            else:
                if "viz" in data and isinstance(data["viz"], dict):
                    cfg = data["viz"]
                else:
                    cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> VizSettings:
        """
        Load VizSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (lakeviz.toml, pyproject.toml).

        Raises:
            IoConfigError: If the merged settings fail VizSettings.validated().
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s.validated()
