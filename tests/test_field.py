"""
Unit tests for the charge set and the field evaluator.

Covers superposition, the distance floor near charges and the zero-vector
normalization policy.
"""

import numpy as np
import pytest

from dipole_field.charges import PointCharge, dipole, charge_values
from dipole_field.config import FieldSettings
from dipole_field.field import evaluate_field, field_at_points, normalize_rows


class TestPointCharge:
    """PointCharge construction and the default dipole."""

    def test_position_is_float_tuple(self):
        c = PointCharge([1, 2, 3], 2)
        assert c.position == (1.0, 2.0, 3.0)
        assert isinstance(c.value, float)

    def test_wrong_dimension_rejected(self):
        with pytest.raises(ValueError, match="3 components"):
            PointCharge((1.0, 2.0), 1.0)

    def test_is_immutable(self):
        c = PointCharge((0, 0, 0), 1.0)
        with pytest.raises(AttributeError):
            c.value = 2.0

    def test_dipole_layout(self, reference_dipole):
        pos, neg = reference_dipole
        assert pos.position == (3.0, 0.0, 0.0) and pos.value == 1e-9
        assert neg.position == (-3.0, 0.0, 0.0) and neg.value == -1e-9
        assert charge_values(dipole(-2.0)).tolist() == [2.0, -2.0]


class TestFieldEvaluator:
    """Coulomb superposition with the visualization distance floor."""

    def test_empty_charge_list_gives_zero(self):
        assert np.array_equal(evaluate_field((1.0, 2.0, 3.0), []), np.zeros(3))

    def test_dipole_field_at_origin(self, reference_dipole):
        """Both charges push the field towards -x with unit strength each."""
        E = evaluate_field((0.0, 0.0, 0.0), reference_dipole)
        assert np.allclose(E, [-2.0, 0.0, 0.0])

    def test_inverse_square_direction(self):
        q = (PointCharge((0.0, 0.0, 0.0), 1e-9),)
        E = evaluate_field((0.0, 2.0, 0.0), q)
        assert np.allclose(E, [0.0, 9.0 / 4.0, 0.0])

    def test_superposition(self, reference_dipole):
        a, b = reference_dipole
        P = np.array([[0.5, 1.0, -2.0], [4.0, 0.1, 0.0], [-3.2, 0.0, 0.0]])
        both = field_at_points(P, [a, b])
        separate = field_at_points(P, [a]) + field_at_points(P, [b])
        assert np.allclose(both, separate)

    def test_field_at_charge_is_finite(self, reference_dipole):
        """Only the other charge contributes at a charge's own position."""
        E = evaluate_field((3.0, 0.0, 0.0), reference_dipole)
        assert np.all(np.isfinite(E))
        assert np.allclose(E, [-0.25, 0.0, 0.0])

    def test_distance_floor(self, reference_dipole):
        E = evaluate_field((3.1, 0.0, 0.0), reference_dipole)
        expected = 9.0 / 0.3 ** 2 - 9.0 / 6.1 ** 2
        assert E[0] == pytest.approx(expected)

    def test_custom_settings(self):
        q = (PointCharge((0.0, 0.0, 0.0), 1.0),)
        settings = FieldSettings(coulomb_constant=2.0, min_distance=1.0)
        assert np.allclose(evaluate_field((0.5, 0.0, 0.0), q, settings), [2.0, 0.0, 0.0])

    def test_non_positive_floor_rejected(self):
        with pytest.raises(ValueError):
            FieldSettings(min_distance=0.0)

    def test_vectorized_matches_pointwise(self, reference_dipole):
        P = np.random.default_rng(0).normal(size=(20, 3)) * 4
        many = field_at_points(P, reference_dipole)
        single = np.array([evaluate_field(p, reference_dipole) for p in P])
        assert np.allclose(many, single)


class TestNormalize:
    def test_zero_vector_stays_zero(self):
        assert np.array_equal(normalize_rows(np.zeros((1, 3))), np.zeros((1, 3)))

    def test_rows(self):
        out = normalize_rows(np.array([[3.0, 0.0, 4.0], [0.0, 0.0, 0.0]]))
        assert np.allclose(out, [[0.6, 0.0, 0.8], [0.0, 0.0, 0.0]])
        assert not np.any(np.isnan(out))
