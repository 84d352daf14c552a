"""Tests for the scalar summary and the scene snapshot."""

import numpy as np
import pytest

from dipole_field.charges import PointCharge, dipole
from dipole_field.config import GridSettings, SummarySettings, TraceSettings, VisualizationConfig
from dipole_field.core import FieldScene, refresh
from dipole_field.summary import (
    InsufficientChargesError,
    ScalarSummary,
    compute_summary,
    coulomb_force,
    net_charge,
    format_summary,
)


class TestScalarSummary:

    def test_reference_dipole(self, reference_dipole):
        s = compute_summary(reference_dipole)
        assert s.coulomb_force == pytest.approx(-2.5e-10)
        assert s.net_charge == 0.0
        # |E(0)| = 2, sphere of radius 5
        assert s.flux == pytest.approx(2.0 * 4.0 * np.pi * 25.0)

    def test_reference_radius(self, reference_dipole):
        s = compute_summary(reference_dipole, SummarySettings(reference_radius=1.0))
        assert s.flux == pytest.approx(8.0 * np.pi)

    def test_repulsion_is_positive(self):
        charges = [PointCharge((0, 0, 0), 1e-9), PointCharge((0, 3, 0), 2e-9)]
        assert coulomb_force(charges) == pytest.approx(9e9 * 2e-18 / 9.0)

    def test_single_charge_fails(self, lone_charge):
        with pytest.raises(InsufficientChargesError, match="insufficient charges"):
            compute_summary(lone_charge)

    def test_no_charges_fails(self):
        with pytest.raises(InsufficientChargesError):
            coulomb_force([])

    def test_force_inside_field_floor(self):
        """The field's distance floor does not apply to the force between the charges."""
        s = compute_summary(dipole(1e-9, 0.2))
        assert s.coulomb_force == pytest.approx(9e9 * 1e-9 * -1e-9 / 0.2 ** 2)

    def test_coincident_charges_fail(self):
        charges = [PointCharge((1, 1, 1), 1e-9), PointCharge((1, 1, 1), -1e-9)]
        with pytest.raises(ValueError, match="coincident"):
            coulomb_force(charges)

    def test_net_charge_sums_all(self):
        charges = [PointCharge((0, 0, 0), 1.0), PointCharge((1, 0, 0), 2.5), PointCharge((2, 0, 0), -0.5)]
        assert net_charge(charges) == pytest.approx(3.0)

    def test_format(self):
        labels = format_summary(ScalarSummary(flux=628.3185, net_charge=0.0, coulomb_force=-2.5e-10))
        assert labels["flux"] == "Flux: 6.28e+02 N·m²/C"
        assert labels["net_charge"] == "Net charge: 0.00e+00 C"
        assert labels["coulomb_force"] == "Coulomb force: -2.50e-10 N"


class TestFieldScene:

    @pytest.fixture
    def config(self):
        return VisualizationConfig(
            trace=TraceSettings(seeds_per_charge=6, steps_per_line=20),
            grid=GridSettings(grid_size=4),
        )

    def test_from_config_builds_dipole(self, config):
        scene = FieldScene.from_config(config)
        assert [c.value for c in scene.charges] == [1e-9, -1e-9]

    def test_refresh(self, config):
        snap = FieldScene.from_config(config).refresh()
        assert len(snap.streamlines) == 12
        assert 0 < len(snap.samples) <= 125
        assert snap.summary.coulomb_force == pytest.approx(-2.5e-10)

    def test_refresh_can_skip_parts(self, config):
        snap = FieldScene.from_config(config).refresh(streamlines=False, grid=False)
        assert snap.streamlines == [] and snap.samples == []

    def test_refresh_returns_new_snapshot(self, reference_dipole, config):
        a = refresh(reference_dipole, config)
        b = refresh(reference_dipole, config)
        assert a is not b
        assert a.summary == b.summary

    def test_charges_are_not_shared_mutable_state(self, reference_dipole, config):
        charges = list(reference_dipole)
        scene = FieldScene(charges, config)
        charges.append(PointCharge((0, 0, 0), 1.0))
        assert len(scene.charges) == 2
