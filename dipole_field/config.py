"""
Settings for the dipole field model, tracer, grid sampler and summary.

Every visualization heuristic (distance floor, near-zero cutoff, arrow
length bounds, colors) is a named field here rather than a literal in the
algorithms. Settings are frozen dataclasses; a YAML file can override any
subset of them:

    field:
      coulomb_constant: 9.0e+9
      min_distance: 0.3
    trace:
      seeds_per_charge: 16
    grid:
      grid_size: 10
      weak_color: blue
    summary:
      reference_radius: 5.0
    dipole:
      magnitude: 1.0e-9
      separation: 6.0
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from matplotlib.colors import to_rgb

logger = logging.getLogger(__name__)

RGB = Tuple[float, float, float]


class ConfigError(ValueError):
    """Raised for malformed configuration files."""


def _require_positive(name: str, value: float):
    if not value > 0:
        raise ValueError(f"{name} must be > 0, got {value!r}")


@dataclass(frozen=True)
class FieldSettings:
    coulomb_constant: float = 9e9
    # distance floor applied in the inverse-square term
    min_distance: float = 0.3

    def __post_init__(self):
        _require_positive("min_distance", self.min_distance)


@dataclass(frozen=True)
class TraceSettings:
    seeds_per_charge: int = 16
    steps_per_line: int = 100
    step_length: float = 0.2
    seed_radius: float = 0.3

    def __post_init__(self):
        if self.seeds_per_charge < 0 or self.steps_per_line < 0:
            raise ValueError("seeds_per_charge and steps_per_line must be >= 0")
        _require_positive("step_length", self.step_length)
        _require_positive("seed_radius", self.seed_radius)


@dataclass(frozen=True)
class GridSettings:
    grid_size: int = 10
    spacing: float = 1.0
    min_strength: float = 0.1
    max_strength: float = 1.0
    # nodes whose field magnitude is below this are dropped
    epsilon: float = 1e-10
    weak_color: str = "#0000ff"
    strong_color: str = "#ff0000"

    def __post_init__(self):
        if self.grid_size < 0:
            raise ValueError(f"grid_size must be >= 0, got {self.grid_size!r}")
        _require_positive("spacing", self.spacing)
        if self.max_strength <= self.min_strength:
            raise ValueError("max_strength must be greater than min_strength")
        # fail early on unknown color names
        self.weak_rgb()
        self.strong_rgb()

    def weak_rgb(self) -> RGB:
        return to_rgb(self.weak_color)

    def strong_rgb(self) -> RGB:
        return to_rgb(self.strong_color)


@dataclass(frozen=True)
class SummarySettings:
    reference_radius: float = 5.0


@dataclass(frozen=True)
class DipoleSettings:
    magnitude: float = 1e-9
    separation: float = 6.0

    def __post_init__(self):
        _require_positive("separation", self.separation)


@dataclass(frozen=True)
class VisualizationConfig:
    field: FieldSettings = dataclasses.field(default_factory=FieldSettings)
    trace: TraceSettings = dataclasses.field(default_factory=TraceSettings)
    grid: GridSettings = dataclasses.field(default_factory=GridSettings)
    summary: SummarySettings = dataclasses.field(default_factory=SummarySettings)
    dipole: DipoleSettings = dataclasses.field(default_factory=DipoleSettings)


_SECTIONS = {
    "field": FieldSettings,
    "trace": TraceSettings,
    "grid": GridSettings,
    "summary": SummarySettings,
    "dipole": DipoleSettings,
}

def _to_int(value):
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


def _to_float(value):
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


# field annotations are strings under postponed evaluation
_NUMERIC = {"float": _to_float, "int": _to_int}


def _build_section(name: str, cls, base, values: Any):
    if values is None:
        return base
    if not isinstance(values, dict):
        raise ConfigError(f"section '{name}' must be a mapping, got {type(values).__name__}")
    types = {f.name: f.type for f in dataclasses.fields(cls)}
    unknown = sorted(set(values) - set(types))
    if unknown:
        raise ConfigError(f"unknown key(s) in section '{name}': {', '.join(unknown)}")
    try:
        # YAML 1.1 reads "9e9" as a string
        coerced = {k: _NUMERIC[types[k]](v) if types[k] in _NUMERIC else v
                   for k, v in values.items()}
        return dataclasses.replace(base, **coerced)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid value in section '{name}': {e}") from e


def config_from_dict(data: Optional[Dict[str, Any]],
                     base: Optional[VisualizationConfig] = None) -> VisualizationConfig:
    """Overlay a plain mapping (as read from YAML) on ``base`` section by section."""
    base = base or VisualizationConfig()
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError("configuration root must be a mapping")
    unknown = sorted(set(data) - set(_SECTIONS))
    if unknown:
        raise ConfigError(f"unknown section(s): {', '.join(unknown)}")
    sections = {
        name: _build_section(name, cls, getattr(base, name), data.get(name))
        for name, cls in _SECTIONS.items()
    }
    return VisualizationConfig(**sections)


def load_config(path: Union[str, Path],
                base: Optional[VisualizationConfig] = None) -> VisualizationConfig:
    """
    Load a YAML configuration file.

    Raises:
        FileNotFoundError: if ``path`` does not exist
        ConfigError: on YAML syntax errors, unknown keys or invalid values
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing {path}: {e}") from e
    logger.debug("loaded configuration from %s", path)
    return config_from_dict(data, base)


def override(config: VisualizationConfig, section: str, **values) -> VisualizationConfig:
    """Return a copy of ``config`` with the non-None ``values`` replaced in ``section``."""
    values = {k: v for k, v in values.items() if v is not None}
    if not values:
        return config
    updated = dataclasses.replace(getattr(config, section), **values)
    return dataclasses.replace(config, **{section: updated})
