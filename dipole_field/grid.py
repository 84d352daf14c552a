from __future__ import annotations
import logging
import numpy as np
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .charges import PointCharge
from .config import FieldSettings, GridSettings
from .field import DEFAULT_FIELD, field_at_points, field_magnitudes, normalize_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class GridSample:
    """One lattice node: where it is, the field there, and how to draw it."""

    position: np.ndarray
    field: np.ndarray
    magnitude: float
    direction: np.ndarray
    length: float
    color: Tuple[float, float, float]


def lattice_points(grid_size: int, spacing: float) -> np.ndarray:
    """(grid_size+1)^3 nodes centred on the origin; x outermost, z innermost."""
    axis = (np.arange(grid_size + 1) - grid_size / 2.0) * spacing
    X, Y, Z = np.meshgrid(axis, axis, axis, indexing="ij")
    return np.c_[X.ravel(), Y.ravel(), Z.ravel()]


def scaled_lengths(magnitudes, settings: GridSettings) -> np.ndarray:
    """Log-compressed arrow length, clamped to [min_strength, max_strength]."""
    m = np.asarray(magnitudes, float)
    with np.errstate(divide="ignore"):
        raw = np.log10(m * 10.0)
    return np.clip(raw, settings.min_strength, settings.max_strength)


def magnitude_colors(magnitudes, settings: GridSettings) -> np.ndarray:
    """
    Linear blend from weak to strong color.

    The blend factor uses the raw magnitude, not the log-scaled length, so
    color saturates long before arrow length does.
    """
    m = np.asarray(magnitudes, float)
    t = (m - settings.min_strength) / (settings.max_strength - settings.min_strength)
    t = np.clip(t, 0.0, 1.0)[:, None]
    weak = np.array(settings.weak_rgb())
    strong = np.array(settings.strong_rgb())
    return weak + (strong - weak) * t


def sample_grid(charges: Sequence[PointCharge],
                settings: GridSettings = GridSettings(),
                field_settings: FieldSettings = DEFAULT_FIELD) -> List[GridSample]:
    nodes = lattice_points(settings.grid_size, settings.spacing)
    E = field_at_points(nodes, charges, field_settings)
    mags = field_magnitudes(E)
    keep = mags >= settings.epsilon

    skipped = int(np.count_nonzero(~keep))
    if skipped:
        logger.debug("skipped %d near-zero grid nodes", skipped)

    nodes, E, mags = nodes[keep], E[keep], mags[keep]
    directions = normalize_rows(E)
    lengths = scaled_lengths(mags, settings)
    colors = magnitude_colors(mags, settings)

    samples = [
        GridSample(
            position=nodes[k],
            field=E[k],
            magnitude=float(mags[k]),
            direction=directions[k],
            length=float(lengths[k]),
            color=tuple(float(c) for c in colors[k]),
        )
        for k in range(len(nodes))
    ]
    logger.debug("sampled %d grid nodes", len(samples))
    return samples
