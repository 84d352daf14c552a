"""
dipole_field — electrostatic field of a point-charge dipole.

`dipole_field` computes and renders the field of two equal and opposite
point charges: Coulomb superposition, field lines traced from small spheres
around each charge, a sampled 3D vector-field grid with magnitude-driven
arrow length and color, and three scalar figures (flux through a reference
sphere, net charge, force between the charges).

Typical usage (CLI):
    python -m dipole_field                  # 3D view with the default dipole
    python -m dipole_field --view 2d --plane xz --save-2d dipole.png
    python -m dipole_field --view none      # print the summary only

Typical usage (library):
    from dipole_field import FieldScene
    scene = FieldScene.from_config()
    snapshot = scene.refresh()
    snapshot.streamlines, snapshot.samples, snapshot.summary

All computations are pure functions of an immutable charge set and frozen
settings; each refresh returns a complete new snapshot.

Environment / installation:
    pip install .
    (or `pip install -e .[test]` for development)

Internal modules:
- charges.py     : PointCharge and the default dipole.
- config.py      : settings dataclasses and the YAML loader.
- field.py       : field evaluator (superposition with a distance floor).
- streamlines.py : Fibonacci-sphere seeds and forward-Euler field lines.
- grid.py        : lattice sampling, log-scaled lengths, linear colors.
- summary.py     : flux, net charge, Coulomb force and their display strings.
- core.py        : FieldScene context and FieldSnapshot.
- viz_3d.py      : pyvista view.
- viz_2d.py      : matplotlib planar projection.
- cli.py         : command-line interface.
- utils.py       : plane bases and projections.

Version: 1.0.0
"""

from .charges import PointCharge, dipole
from .config import (
    ConfigError,
    DipoleSettings,
    FieldSettings,
    GridSettings,
    SummarySettings,
    TraceSettings,
    VisualizationConfig,
    load_config,
)
from .core import FieldScene, FieldSnapshot, refresh
from .field import evaluate_field, field_at_points
from .grid import GridSample, sample_grid
from .streamlines import trace_field_lines
from .summary import InsufficientChargesError, ScalarSummary, compute_summary, format_summary

__all__ = [
    "PointCharge",
    "dipole",
    "ConfigError",
    "DipoleSettings",
    "FieldSettings",
    "GridSettings",
    "SummarySettings",
    "TraceSettings",
    "VisualizationConfig",
    "load_config",
    "FieldScene",
    "FieldSnapshot",
    "refresh",
    "evaluate_field",
    "field_at_points",
    "GridSample",
    "sample_grid",
    "trace_field_lines",
    "InsufficientChargesError",
    "ScalarSummary",
    "compute_summary",
    "format_summary",
]

__version__ = "1.0.0"
