from __future__ import annotations
import numpy as np
from dataclasses import dataclass
from typing import Sequence, Tuple

Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class PointCharge:
    """A point charge: fixed position and signed magnitude."""

    position: Vector3
    value: float

    def __post_init__(self):
        pos = tuple(float(c) for c in self.position)
        if len(pos) != 3:
            raise ValueError(f"charge position must have 3 components, got {len(pos)}")
        object.__setattr__(self, "position", pos)
        object.__setattr__(self, "value", float(self.value))

    def as_array(self) -> np.ndarray:
        return np.array(self.position, float)


def dipole(magnitude: float = 1e-9, separation: float = 6.0) -> Tuple[PointCharge, PointCharge]:
    """+q at (+d/2, 0, 0) and -q at (-d/2, 0, 0)."""
    half = separation / 2.0
    return (
        PointCharge((half, 0.0, 0.0), abs(magnitude)),
        PointCharge((-half, 0.0, 0.0), -abs(magnitude)),
    )


def charge_positions(charges: Sequence[PointCharge]) -> np.ndarray:
    if not charges:
        return np.zeros((0, 3))
    return np.array([c.position for c in charges], float)


def charge_values(charges: Sequence[PointCharge]) -> np.ndarray:
    return np.array([c.value for c in charges], float)
