"""
CLI for dipole_field.

- Compute streamlines, grid samples and the scalar summary for a dipole
- Visualize in 2D/3D
"""

from __future__ import annotations

from typing import Optional, Sequence
import argparse
import logging

from .config import VisualizationConfig, load_config, override
from .core import FieldScene
from .summary import format_summary
from . import viz_2d, viz_3d

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None):
    p = argparse.ArgumentParser(description="Dipole electric field (dipole_field CLI)")

    p.add_argument(
        "--config",
        help="YAML settings file (sections: field, trace, grid, summary, dipole).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging.",
    )

    # -------------------------------------------------------------------------
    # Charges and field model
    # -------------------------------------------------------------------------
    p.add_argument(
        "--charge",
        type=float,
        help="Magnitude of each dipole charge (C). Default 1e-9.",
    )
    p.add_argument(
        "--separation",
        type=float,
        help="Distance between the two charges. Default 6.",
    )
    p.add_argument(
        "--coulomb-constant",
        type=float,
        help="Visualization Coulomb constant k. Default 9e9.",
    )
    p.add_argument(
        "--min-distance",
        type=float,
        help="Distance floor in the inverse-square term. Default 0.3.",
    )

    # -------------------------------------------------------------------------
    # Streamlines
    # -------------------------------------------------------------------------
    p.add_argument("--seeds", type=int, help="Seeds per charge.")
    p.add_argument("--steps", type=int, help="Points per streamline.")
    p.add_argument("--step-length", type=float, help="Integration step length.")
    p.add_argument("--seed-radius", type=float, help="Radius of the seed sphere.")

    # -------------------------------------------------------------------------
    # Grid
    # -------------------------------------------------------------------------
    p.add_argument("--grid-size", type=int, help="Lattice cells per axis.")
    p.add_argument("--spacing", type=float, help="Lattice spacing.")
    p.add_argument("--weak-color", help="Arrow color for weak fields (any matplotlib color).")
    p.add_argument("--strong-color", help="Arrow color for strong fields.")

    # -------------------------------------------------------------------------
    # Summary
    # -------------------------------------------------------------------------
    p.add_argument(
        "--reference-radius",
        type=float,
        help="Radius of the reference sphere used for the flux figure.",
    )

    # -------------------------------------------------------------------------
    # View
    # -------------------------------------------------------------------------
    p.add_argument(
        "--view",
        choices=["2d", "3d", "both", "none"],
        default="3d",
        help="Visualization mode. 'none' only prints the summary.",
    )
    p.add_argument(
        "--plane",
        choices=["xy", "yz", "xz"],
        default="xy",
        help="Projection plane for the 2D view.",
    )
    p.add_argument(
        "--slab",
        type=float,
        help="Half-thickness of the slab of grid arrows shown in 2D.",
    )
    p.add_argument(
        "--figsize",
        nargs=2,
        type=float,
        default=[8, 7],
        help="2D figure size (W H in inches).",
    )
    p.add_argument(
        "--fig-lims",
        nargs=4,
        type=float,
        help="2D window (xmin xmax ymin ymax).",
    )
    p.add_argument(
        "--save-2d",
        help="Path to save the 2D figure (PNG, PDF...). If not given, just shows it.",
    )
    p.add_argument(
        "--screenshot",
        help="Render the 3D view off screen and save it to this path.",
    )
    p.add_argument(
        "--no-streamlines",
        action="store_true",
        help="Skip streamline tracing.",
    )
    p.add_argument(
        "--no-grid",
        action="store_true",
        help="Skip the grid vector field.",
    )

    return p.parse_args(argv)


def build_config(args) -> VisualizationConfig:
    """Config file (if any) first, then command-line overrides."""
    config = load_config(args.config) if args.config else VisualizationConfig()
    config = override(config, "dipole", magnitude=args.charge, separation=args.separation)
    config = override(config, "field", coulomb_constant=args.coulomb_constant,
                      min_distance=args.min_distance)
    config = override(config, "trace", seeds_per_charge=args.seeds, steps_per_line=args.steps,
                      step_length=args.step_length, seed_radius=args.seed_radius)
    config = override(config, "grid", grid_size=args.grid_size, spacing=args.spacing,
                      weak_color=args.weak_color, strong_color=args.strong_color)
    config = override(config, "summary", reference_radius=args.reference_radius)
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # --- Settings ------------------------------------------------------------
    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 2

    # --- Compute -------------------------------------------------------------
    scene = FieldScene.from_config(config)
    snapshot = scene.refresh(
        streamlines=not args.no_streamlines,
        grid=not args.no_grid,
    )

    for text in format_summary(snapshot.summary).values():
        print(text)

    # -------------------------------------------------------------------------
    # Visualization modes
    # -------------------------------------------------------------------------
    if args.view in ("3d", "both"):
        viz_3d.plot_snapshot_pyvista(
            scene.charges,
            snapshot,
            show=args.screenshot is None,
            screenshot=args.screenshot,
        )

    if args.view in ("2d", "both"):
        viz_2d.plot_snapshot_2d(
            scene.charges,
            snapshot,
            plane=args.plane,
            slab=args.slab,
            figsize=tuple(args.figsize),
            fig_lims=tuple(args.fig_lims) if args.fig_lims else None,
            save_path=args.save_2d,
            show=args.save_2d is None,
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
