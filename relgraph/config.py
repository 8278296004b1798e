"""Color map and build configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from .models import LayoutMode

DEFAULT_COLOR_MAP: Mapping[str, str] = MappingProxyType(
    {
        # Platform categories
        "data warehouse": "#5470c6",
        "data lake": "#91cc75",
        "stream processing": "#fac858",
        "big data platform": "#ee6666",
        "data mesh": "#9a60b4",
        "unknown": "#73c0de",
        # Node roles
        "source": "#34A853",
        "downstream": "#EA4335",
        "mixed": "#AA46BC",
        "dataplatform": "#4285F4",
        # Link and emphasis colors
        "bridge": "#9370DB",
        "highlight": "#FFD700",
    }
)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read."""


@dataclass(frozen=True)
class ColorMap:
    """Semantic key -> display color. Keys are matched case-insensitively."""

    colors: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_COLOR_MAP))

    def __post_init__(self) -> None:
        normalized = {str(k).lower(): str(v) for k, v in self.colors.items() if v}
        object.__setattr__(self, "colors", MappingProxyType(normalized))

    @classmethod
    def default(cls) -> ColorMap:
        return cls()

    @classmethod
    def coerce(cls, value: ColorMap | Mapping[str, str] | None) -> ColorMap:
        """Accept a ColorMap, a plain mapping layered over the defaults, or None."""
        if isinstance(value, ColorMap):
            return value
        if isinstance(value, Mapping):
            return cls().merged(value)
        return cls()

    def get(self, key: str | None, default: str | None = None) -> str | None:
        if key is None:
            return default
        return self.colors.get(str(key).lower(), default)

    def __getitem__(self, key: str) -> str:
        return self.colors[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self.colors

    def merged(self, overrides: Mapping[str, Any]) -> ColorMap:
        colors = dict(self.colors)
        for k, v in overrides.items():
            if isinstance(k, str) and isinstance(v, str) and v.strip():
                colors[k.lower()] = v.strip()
        return ColorMap(colors)


@dataclass(frozen=True)
class SizeRule:
    """Log-scaled symbol size bounds; platforms use a fixed oversized constant."""

    min_size: float = 8.0
    max_size: float = 25.0
    log_base: float = 1.5
    scale: float = 2.0
    platform_size: float = 50.0


@dataclass(frozen=True)
class ColumnBand:
    layers: int
    sub_columns: int


@dataclass(frozen=True)
class ColumnBands:
    """Layer and sub-column counts per role for the column layout."""

    source: ColumnBand = ColumnBand(layers=25, sub_columns=6)
    downstream: ColumnBand = ColumnBand(layers=25, sub_columns=6)
    mixed: ColumnBand = ColumnBand(layers=8, sub_columns=3)


@dataclass(frozen=True)
class BuildOptions:
    mode: LayoutMode = LayoutMode.TRADITIONAL
    bridge_threshold: int = 3
    seed: int | None = None
    size: SizeRule = field(default_factory=SizeRule)
    colors: ColorMap = field(default_factory=ColorMap)
    column: ColumnBands = field(default_factory=ColumnBands)

    def with_mode(self, mode: LayoutMode | str) -> BuildOptions:
        return replace(self, mode=parse_mode(mode, self.mode))


def parse_mode(value: Any, default: LayoutMode = LayoutMode.TRADITIONAL) -> LayoutMode:
    """Parse a layout mode name; unknown names fall back to `default`."""
    if isinstance(value, LayoutMode):
        return value
    if isinstance(value, str):
        try:
            return LayoutMode(value.strip().lower())
        except ValueError:
            return default
    return default


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _positive_float(value: Any, default: float) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError):
        return default
    return out if out > 0 else default


def _positive_int(value: Any, default: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        return default
    return value


def _column_bands(raw: dict[str, Any]) -> ColumnBands:
    base = ColumnBands()
    bands = {}
    for role in ("source", "downstream", "mixed"):
        default = getattr(base, role)
        entry = _coerce_dict(raw.get(role))
        bands[role] = ColumnBand(
            layers=_positive_int(entry.get("layers"), default.layers),
            sub_columns=_positive_int(entry.get("sub_columns"), default.sub_columns),
        )
    return ColumnBands(**bands)


def load_color_map(path: Path) -> ColorMap:
    """Load a YAML mapping of color overrides layered over the defaults."""
    data = _read_yaml(path)
    colors = _coerce_dict(data.get("colors")) if "colors" in data else data
    return ColorMap().merged(colors)


def load_config(path: Path) -> BuildOptions:
    """
    Load build options from YAML.

    Shape: {mode, threshold, seed, colors: {...}, size: {...}, column: {...}},
    where column maps source/downstream/mixed to {layers, sub_columns}.
    Invalid entries are skipped and their defaults kept.
    """
    data = _read_yaml(path)
    defaults = BuildOptions()

    threshold = data.get("threshold", defaults.bridge_threshold)
    if not isinstance(threshold, int) or isinstance(threshold, bool) or threshold < 0:
        threshold = defaults.bridge_threshold

    seed = data.get("seed")
    if not isinstance(seed, int) or isinstance(seed, bool):
        seed = None

    size_raw = _coerce_dict(data.get("size"))
    base = SizeRule()
    size = SizeRule(
        min_size=_positive_float(size_raw.get("min"), base.min_size),
        max_size=_positive_float(size_raw.get("max"), base.max_size),
        log_base=_positive_float(size_raw.get("log_base"), base.log_base),
        scale=_positive_float(size_raw.get("scale"), base.scale),
        platform_size=_positive_float(size_raw.get("platform"), base.platform_size),
    )
    if size.max_size < size.min_size or size.log_base == 1.0:
        size = base

    return BuildOptions(
        mode=parse_mode(data.get("mode"), defaults.mode),
        bridge_threshold=threshold,
        seed=seed,
        size=size,
        colors=ColorMap().merged(_coerce_dict(data.get("colors"))),
        column=_column_bands(_coerce_dict(data.get("column"))),
    )


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    return data
