"""Coulomb field of a set of point charges (superposition)."""
from __future__ import annotations
import numpy as np
from typing import Sequence

from .charges import PointCharge
from .config import FieldSettings

DEFAULT_FIELD = FieldSettings()


def normalize_rows(vectors: np.ndarray) -> np.ndarray:
    """Row-wise unit vectors; zero-length rows stay zero instead of NaN."""
    v = np.asarray(vectors, float)
    norms = np.linalg.norm(v, axis=-1, keepdims=True)
    return np.divide(v, norms, out=np.zeros_like(v), where=norms > 0)


def field_at_points(points, charges: Sequence[PointCharge],
                    settings: FieldSettings = DEFAULT_FIELD) -> np.ndarray:
    """
    Field at each row of ``points`` (N, 3).

    The distance in the inverse-square term is floored at
    ``settings.min_distance`` so points on or next to a charge stay finite.
    """
    P = np.atleast_2d(np.asarray(points, float))
    E = np.zeros_like(P)
    for charge in charges:
        r = P - charge.as_array()
        dist = np.maximum(np.linalg.norm(r, axis=1), settings.min_distance)
        strength = settings.coulomb_constant * charge.value / (dist * dist)
        E += strength[:, None] * normalize_rows(r)
    return E


def evaluate_field(position, charges: Sequence[PointCharge],
                   settings: FieldSettings = DEFAULT_FIELD) -> np.ndarray:
    """Field vector (3,) at a single position."""
    return field_at_points(np.asarray(position, float).reshape(1, 3), charges, settings)[0]


def field_magnitudes(field: np.ndarray) -> np.ndarray:
    return np.linalg.norm(field, axis=-1)
