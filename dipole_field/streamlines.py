from __future__ import annotations
import logging
import numpy as np
from typing import List, Sequence

from .charges import PointCharge
from .config import FieldSettings, TraceSettings
from .field import DEFAULT_FIELD, field_at_points, normalize_rows

logger = logging.getLogger(__name__)


def sphere_seeds(center, count: int, radius: float) -> np.ndarray:
    """
    Spiral (Fibonacci-sphere style) points on a sphere around ``center``.

    phi_i = acos(-1 + 2 i / N), theta_i = sqrt(N pi) phi_i, i = 0..N-1.
    """
    if count <= 0:
        return np.zeros((0, 3))
    i = np.arange(count, dtype=float)
    phi = np.arccos(-1.0 + 2.0 * i / count)
    theta = np.sqrt(count * np.pi) * phi
    offsets = np.c_[np.sin(phi) * np.cos(theta), np.sin(phi) * np.sin(theta), np.cos(phi)]
    return np.asarray(center, float) + radius * offsets


def seed_points(charges: Sequence[PointCharge], settings: TraceSettings) -> np.ndarray:
    """All seeds, grouped by charge in input order."""
    if not charges:
        return np.zeros((0, 3))
    return np.vstack([
        sphere_seeds(c.position, settings.seeds_per_charge, settings.seed_radius)
        for c in charges
    ])


def trace_field_lines(charges: Sequence[PointCharge],
                      settings: TraceSettings = TraceSettings(),
                      field_settings: FieldSettings = DEFAULT_FIELD) -> List[np.ndarray]:
    """
    Forward-Euler streamlines along the field direction.

    Returns one (steps_per_line, 3) array per seed. Each step records the
    current point, then advances it by ``step_length`` along the unit field
    direction; a zero field gives a zero step. Lines are not clipped to any
    region.
    """
    return trace_from_seeds(seed_points(charges, settings), charges, settings, field_settings)


def trace_from_seeds(seeds, charges: Sequence[PointCharge],
                     settings: TraceSettings = TraceSettings(),
                     field_settings: FieldSettings = DEFAULT_FIELD) -> List[np.ndarray]:
    """Integrate every row of ``seeds`` (N, 3) for ``steps_per_line`` points."""
    seeds = np.asarray(seeds, float).reshape(-1, 3)
    n_lines, n_steps = len(seeds), settings.steps_per_line
    lines = np.empty((n_lines, n_steps, 3))
    current = seeds.copy()
    for step in range(n_steps):
        lines[:, step] = current
        direction = normalize_rows(field_at_points(current, charges, field_settings))
        current = current + direction * settings.step_length
    logger.debug("traced %d streamlines x %d points", n_lines, n_steps)
    return [line for line in lines]
