from __future__ import annotations
import numpy as np
from typing import Tuple

Basis = Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]


def fixed_basis(plane: str) -> Basis:
    """Origin, two in-plane axes and the normal for a Cartesian plane name."""
    if plane == 'xy': return np.zeros(3), np.array([1.,0.,0.]), np.array([0.,1.,0.]), np.array([0.,0.,1.])
    if plane == 'yz': return np.zeros(3), np.array([0.,1.,0.]), np.array([0.,0.,1.]), np.array([1.,0.,0.])
    if plane == 'xz': return np.zeros(3), np.array([1.,0.,0.]), np.array([0.,0.,1.]), np.array([0.,1.,0.])
    raise ValueError("plane must be 'xy'|'yz'|'xz'")


def project_points(points, basis: Basis) -> np.ndarray:
    C, e1, e2, _ = basis
    R = np.atleast_2d(np.asarray(points, float)) - C
    return np.c_[R @ e1, R @ e2]


def project_vectors(vectors, basis: Basis) -> np.ndarray:
    _, e1, e2, _ = basis
    V = np.atleast_2d(np.asarray(vectors, float))
    return np.c_[V @ e1, V @ e2]


def filter_by_slab(points, basis: Basis, half_thickness: float | None) -> np.ndarray:
    """Boolean mask of points with |(r-C)·n| <= h; everything when h is None."""
    C, _, _, n = basis
    r = np.atleast_2d(np.asarray(points, float))
    if half_thickness is None:
        return np.ones(len(r), dtype=bool)
    return np.abs((r - C) @ n) <= float(half_thickness)
