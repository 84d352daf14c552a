"""
Scene context and refresh.

``FieldScene`` holds the charge set and settings explicitly; ``refresh``
computes a complete new ``FieldSnapshot`` that the renderer swaps in as a
whole. Nothing here keeps state between calls.
"""
from __future__ import annotations
import logging
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .charges import PointCharge, dipole
from .config import VisualizationConfig
from .field import evaluate_field
from .grid import GridSample, sample_grid
from .streamlines import trace_field_lines
from .summary import ScalarSummary, compute_summary

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class FieldSnapshot:
    streamlines: List[np.ndarray]
    samples: List[GridSample]
    summary: ScalarSummary


@dataclass(frozen=True)
class FieldScene:
    charges: Tuple[PointCharge, ...]
    config: VisualizationConfig = field(default_factory=VisualizationConfig)

    def __post_init__(self):
        object.__setattr__(self, "charges", tuple(self.charges))

    @classmethod
    def from_config(cls, config: Optional[VisualizationConfig] = None) -> "FieldScene":
        """Dipole scene built from ``config.dipole``."""
        config = config or VisualizationConfig()
        charges = dipole(config.dipole.magnitude, config.dipole.separation)
        return cls(charges, config)

    def field_at(self, position) -> np.ndarray:
        return evaluate_field(position, self.charges, self.config.field)

    def streamlines(self) -> List[np.ndarray]:
        return trace_field_lines(self.charges, self.config.trace, self.config.field)

    def samples(self) -> List[GridSample]:
        return sample_grid(self.charges, self.config.grid, self.config.field)

    def summary(self) -> ScalarSummary:
        return compute_summary(self.charges, self.config.summary, self.config.field)

    def refresh(self, streamlines: bool = True, grid: bool = True) -> FieldSnapshot:
        snap = FieldSnapshot(
            streamlines=self.streamlines() if streamlines else [],
            samples=self.samples() if grid else [],
            summary=self.summary(),
        )
        logger.info("refresh: %d streamlines, %d grid samples",
                    len(snap.streamlines), len(snap.samples))
        if grid and not snap.samples:
            logger.warning("grid produced no samples above epsilon")
        return snap


def refresh(charges: Sequence[PointCharge],
            config: Optional[VisualizationConfig] = None) -> FieldSnapshot:
    return FieldScene(tuple(charges), config or VisualizationConfig()).refresh()
