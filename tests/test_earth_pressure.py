"""Tests for lateral earth pressure (Rankine, Coulomb, at-rest)."""

import numpy as np
import pytest

from pygeocalc.earth_pressure import (
    at_rest_coefficient,
    at_rest_force,
    at_rest_pressure,
    coulomb_active_coefficient,
    coulomb_active_force,
    coulomb_passive_coefficient,
    coulomb_passive_force,
    lateral_force,
    rankine_active_coefficient,
    rankine_active_force,
    rankine_active_pressure,
    rankine_active_pressure_cohesive,
    rankine_passive_coefficient,
    rankine_passive_force,
    rankine_passive_pressure,
    rankine_passive_pressure_cohesive,
    surcharge_pressure,
    tension_crack_depth,
)
from pygeocalc.errors import DomainError, InvalidInputError


class TestRankineCoefficients:
    def test_reference_values(self):
        assert rankine_active_coefficient(30.0) == pytest.approx(0.333, abs=0.01)
        assert rankine_passive_coefficient(30.0) == pytest.approx(3.0, abs=0.1)

    def test_frictionless_soil(self):
        assert rankine_active_coefficient(0.0) == pytest.approx(1.0)
        assert rankine_passive_coefficient(0.0) == pytest.approx(1.0)

    def test_reciprocal(self):
        for phi in np.linspace(0, 60, 13):
            Ka = rankine_active_coefficient(phi)
            Kp = rankine_passive_coefficient(phi)
            assert Ka * Kp == pytest.approx(1.0)

    def test_passive_exceeds_active(self):
        for phi in np.linspace(0.5, 44.9, 50):
            assert rankine_passive_coefficient(phi) > rankine_active_coefficient(phi)

    def test_monotonicity(self):
        phi = np.linspace(0, 89, 200)
        Ka = np.array([rankine_active_coefficient(p) for p in phi])
        Kp = np.array([rankine_passive_coefficient(p) for p in phi])
        assert np.all(np.diff(Ka) < 0)
        assert np.all(np.diff(Kp) > 0)
        assert np.all(Ka > 0)

    @pytest.mark.parametrize("phi", [-1.0, 90.0, 120.0])
    def test_invalid_angle(self, phi):
        with pytest.raises(InvalidInputError, match="phi"):
            rankine_active_coefficient(phi)
        with pytest.raises(InvalidInputError, match="phi"):
            rankine_passive_coefficient(phi)


class TestRankinePressures:
    def test_active_pressure_reference(self):
        assert rankine_active_pressure(0.333, 18.0, 3.0) == pytest.approx(18.0, abs=0.5)

    def test_active_force_reference(self):
        assert rankine_active_force(0.333, 18.0, 5.0) == pytest.approx(75.0, abs=1.0)

    def test_force_is_integral_of_pressure(self):
        Ka, gamma, H = 0.3, 19.0, 6.0
        z = np.linspace(0, H, 2001)
        sigma = np.array([rankine_active_pressure(Ka, gamma, zi) for zi in z])
        assert rankine_active_force(Ka, gamma, H) == pytest.approx(
            np.trapezoid(sigma, z), rel=1e-6,
        )

    def test_zero_depth(self):
        assert rankine_active_pressure(0.3, 18.0, 0.0) == 0.0
        assert rankine_active_force(0.3, 18.0, 0.0) == 0.0

    def test_passive(self):
        assert rankine_passive_pressure(3.0, 18.0, 2.0) == pytest.approx(108.0)
        assert rankine_passive_force(3.0, 18.0, 2.0) == pytest.approx(108.0)

    @pytest.mark.parametrize(
        "args, name",
        [
            ((0.3, 0.0, 1.0), "gamma"),
            ((0.3, -18.0, 1.0), "gamma"),
            ((0.3, 18.0, -1.0), "z"),
            ((0.0, 18.0, 1.0), "K"),
        ],
    )
    def test_invalid_pressure_inputs(self, args, name):
        with pytest.raises(InvalidInputError, match=name):
            rankine_active_pressure(*args)

    def test_negative_height(self):
        with pytest.raises(InvalidInputError, match="H"):
            rankine_active_force(0.3, 18.0, -5.0)


class TestCohesiveSoil:
    def test_tension_zone_clipped(self):
        # Ka = 0.25, √Ka = 0.5: 0.25·20·2 − 2·10·0.5 = 0
        assert rankine_active_pressure_cohesive(0.25, 20.0, 2.0, 10.0) == pytest.approx(0.0)
        assert rankine_active_pressure_cohesive(0.25, 20.0, 1.0, 10.0) == 0.0

    def test_below_tension_crack(self):
        assert rankine_active_pressure_cohesive(0.25, 20.0, 4.0, 10.0) == pytest.approx(10.0)

    def test_tension_crack_depth_matches_zero_pressure(self):
        zc = tension_crack_depth(10.0, 20.0, 0.25)
        assert zc == pytest.approx(2.0)
        assert rankine_active_pressure_cohesive(0.25, 20.0, zc, 10.0) == pytest.approx(0.0, abs=1e-12)

    def test_cohesionless_matches_plain(self):
        assert rankine_active_pressure_cohesive(0.3, 18.0, 4.0, 0.0) == pytest.approx(
            rankine_active_pressure(0.3, 18.0, 4.0)
        )

    def test_passive_cohesive(self):
        # 4·18·1 + 2·5·2
        assert rankine_passive_pressure_cohesive(4.0, 18.0, 1.0, 5.0) == pytest.approx(92.0)

    def test_negative_cohesion(self):
        with pytest.raises(InvalidInputError, match="c"):
            rankine_active_pressure_cohesive(0.3, 18.0, 1.0, -1.0)

    def test_surcharge(self):
        assert surcharge_pressure(0.5, 20.0) == pytest.approx(10.0)
        with pytest.raises(InvalidInputError, match="q"):
            surcharge_pressure(0.5, -1.0)


class TestCoulomb:
    def test_reduces_to_rankine(self):
        for phi in np.linspace(0, 45, 10):
            assert coulomb_active_coefficient(phi) == pytest.approx(
                rankine_active_coefficient(phi)
            )
            assert coulomb_passive_coefficient(phi) == pytest.approx(
                rankine_passive_coefficient(phi)
            )

    def test_wall_friction_reference(self):
        # Das, Principles of Foundation Engineering, Table 7.3: φ=30°, δ=20°
        assert coulomb_active_coefficient(30.0, delta=20.0) == pytest.approx(0.297, abs=0.002)

    def test_wall_friction_lowers_active(self):
        assert coulomb_active_coefficient(30.0, delta=15.0) < coulomb_active_coefficient(30.0)

    def test_wall_friction_raises_passive(self):
        assert coulomb_passive_coefficient(30.0, delta=10.0) > coulomb_passive_coefficient(30.0)

    def test_sloping_backfill_raises_active(self):
        assert coulomb_active_coefficient(30.0, beta=15.0) > coulomb_active_coefficient(30.0)

    def test_backfill_at_friction_angle(self):
        Ka = coulomb_active_coefficient(30.0, beta=30.0)
        assert 0.0 < Ka < 1.0

    def test_backfill_steeper_than_phi(self):
        with pytest.raises(InvalidInputError, match="beta"):
            coulomb_active_coefficient(30.0, beta=35.0)

    def test_wall_friction_exceeds_phi(self):
        with pytest.raises(InvalidInputError, match="delta"):
            coulomb_active_coefficient(30.0, delta=31.0)
        with pytest.raises(InvalidInputError, match="delta"):
            coulomb_passive_coefficient(30.0, delta=31.0)

    def test_extreme_wall_inclination(self):
        with pytest.raises(DomainError):
            coulomb_active_coefficient(45.0, delta=40.0, theta=60.0)

    def test_no_finite_passive_wedge(self):
        with pytest.raises(DomainError, match="passive"):
            coulomb_passive_coefficient(40.0, delta=40.0, beta=40.0)

    def test_invalid_theta(self):
        with pytest.raises(InvalidInputError, match="theta"):
            coulomb_active_coefficient(30.0, theta=90.0)

    def test_forces(self):
        Ka = coulomb_active_coefficient(30.0, delta=20.0)
        assert coulomb_active_force(Ka, 18.0, 4.0) == pytest.approx(0.5 * Ka * 18.0 * 16.0)
        assert coulomb_passive_force(3.0, 18.0, 2.0) == pytest.approx(lateral_force(3.0, 18.0, 2.0))


class TestAtRest:
    def test_jaky(self):
        assert at_rest_coefficient(30.0) == pytest.approx(0.5)
        assert at_rest_coefficient(0.0) == pytest.approx(1.0)

    def test_overconsolidation(self):
        assert at_rest_coefficient(30.0, ocr=4.0) == pytest.approx(1.0)

    def test_between_active_and_one(self):
        for phi in np.linspace(5, 45, 9):
            K0 = at_rest_coefficient(phi)
            assert rankine_active_coefficient(phi) < K0 < 1.0

    def test_invalid_ocr(self):
        with pytest.raises(InvalidInputError, match="ocr"):
            at_rest_coefficient(30.0, ocr=0.5)

    def test_pressure_and_force(self):
        assert at_rest_pressure(0.5, 18.0, 2.0) == pytest.approx(18.0)
        assert at_rest_force(0.5, 18.0, 2.0) == pytest.approx(18.0)
