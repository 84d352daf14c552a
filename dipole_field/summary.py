from __future__ import annotations
import numpy as np
from dataclasses import dataclass
from typing import Dict, Sequence

from .charges import PointCharge, charge_values
from .config import FieldSettings, SummarySettings
from .field import DEFAULT_FIELD, evaluate_field


class InsufficientChargesError(ValueError):
    """The Coulomb force term needs at least two charges."""


@dataclass(frozen=True)
class ScalarSummary:
    flux: float
    net_charge: float
    coulomb_force: float


def simplified_flux(charges: Sequence[PointCharge], radius: float,
                    field_settings: FieldSettings = DEFAULT_FIELD) -> float:
    """|E(origin)| times the area of a sphere of ``radius``; a point sample, not a surface integral."""
    E0 = evaluate_field((0.0, 0.0, 0.0), charges, field_settings)
    return float(np.linalg.norm(E0) * 4.0 * np.pi * radius ** 2)


def net_charge(charges: Sequence[PointCharge]) -> float:
    return float(np.sum(charge_values(charges)))


def coulomb_force(charges: Sequence[PointCharge],
                  field_settings: FieldSettings = DEFAULT_FIELD) -> float:
    """Signed k q0 q1 / d^2 between the first two charges; negative means attraction."""
    if len(charges) < 2:
        raise InsufficientChargesError(
            f"insufficient charges: coulomb force needs 2, got {len(charges)}"
        )
    q0, q1 = charges[0], charges[1]
    d = np.linalg.norm(q0.as_array() - q1.as_array())
    if d == 0:
        raise ValueError("coulomb force is undefined for coincident charges")
    return float(field_settings.coulomb_constant * q0.value * q1.value / d ** 2)


def compute_summary(charges: Sequence[PointCharge],
                    settings: SummarySettings = SummarySettings(),
                    field_settings: FieldSettings = DEFAULT_FIELD) -> ScalarSummary:
    return ScalarSummary(
        flux=simplified_flux(charges, settings.reference_radius, field_settings),
        net_charge=net_charge(charges),
        coulomb_force=coulomb_force(charges, field_settings),
    )


def format_summary(summary: ScalarSummary) -> Dict[str, str]:
    """Display strings, scientific notation with two fractional digits."""
    return {
        "flux": f"Flux: {summary.flux:.2e} N·m²/C",
        "net_charge": f"Net charge: {summary.net_charge:.2e} C",
        "coulomb_force": f"Coulomb force: {summary.coulomb_force:.2e} N",
    }
