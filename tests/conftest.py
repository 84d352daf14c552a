import matplotlib

matplotlib.use("Agg")

import pytest

from dipole_field.charges import PointCharge, dipole


@pytest.fixture
def reference_dipole():
    """+1e-9 at (3, 0, 0) and -1e-9 at (-3, 0, 0)."""
    return dipole(1e-9, 6.0)


@pytest.fixture
def lone_charge():
    return (PointCharge((0.0, 0.0, 0.0), 1e-9),)
