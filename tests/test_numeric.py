"""Tests for the numeric utilities and argument validators."""

import numpy as np
import pytest

from pygeocalc.errors import DomainError, GeotechError, InvalidInputError
from pygeocalc.numeric import (
    approx_equal,
    deg_to_rad,
    finite,
    rad_to_deg,
    require_finite,
    require_friction_angle,
    require_non_negative,
    require_positive,
    require_range,
    safe_exp,
    safe_log,
    safe_sqrt,
    safe_tan,
)


class TestAngles:
    def test_deg_to_rad(self):
        assert deg_to_rad(180.0) == pytest.approx(np.pi)
        assert deg_to_rad(0.0) == 0.0

    def test_round_trip(self):
        for angle in np.linspace(-360, 360, 37):
            assert rad_to_deg(deg_to_rad(angle)) == pytest.approx(angle)

    def test_returns_python_float(self):
        assert type(deg_to_rad(30)) is float


class TestApproxEqual:
    def test_within_tolerance(self):
        assert approx_equal(1.0, 1.0 + 1e-12)
        assert approx_equal(0.333, 1.0 / 3.0, tolerance=0.01)

    def test_boundary_is_inclusive(self):
        assert approx_equal(1.0, 1.5, tolerance=0.5)

    def test_outside_tolerance(self):
        assert not approx_equal(1.0, 1.1, tolerance=0.01)

    def test_negative_tolerance(self):
        with pytest.raises(InvalidInputError, match="tolerance"):
            approx_equal(1.0, 1.0, tolerance=-1.0)


class TestSafeTranscendentals:
    def test_tan(self):
        assert safe_tan(45.0) == pytest.approx(1.0)
        assert safe_tan(-45.0) == pytest.approx(-1.0)

    @pytest.mark.parametrize("angle", [90.0, -90.0, 135.0])
    def test_tan_outside_domain(self, angle):
        with pytest.raises(DomainError):
            safe_tan(angle)

    @pytest.mark.parametrize(
        "func, value",
        [
            (safe_tan, float("nan")),
            (safe_tan, "45"),
            (safe_sqrt, None),
            (safe_sqrt, float("inf")),
            (safe_exp, True),
            (safe_log, float("nan")),
        ],
    )
    def test_bad_arguments_are_invalid_input(self, func, value):
        with pytest.raises(InvalidInputError):
            func(value)
        with pytest.raises(ValueError):
            func(value)

    def test_sqrt(self):
        assert safe_sqrt(4.0) == 2.0
        assert safe_sqrt(0.0) == 0.0
        with pytest.raises(DomainError, match="negative"):
            safe_sqrt(-1e-9)

    def test_exp_overflow(self):
        assert safe_exp(0.0) == 1.0
        with pytest.raises(DomainError, match="not finite"):
            safe_exp(1000.0)

    def test_exp_underflow_is_zero(self):
        assert safe_exp(-1000.0) == 0.0

    def test_log(self):
        assert safe_log(np.e) == pytest.approx(1.0)
        with pytest.raises(DomainError):
            safe_log(0.0)

    def test_finite(self):
        assert finite(2) == 2.0
        with pytest.raises(DomainError):
            finite(float("inf"))


class TestValidators:
    def test_error_hierarchy(self):
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(InvalidInputError, GeotechError)
        assert issubclass(DomainError, ArithmeticError)
        assert issubclass(DomainError, GeotechError)

    def test_error_carries_parameter(self):
        with pytest.raises(InvalidInputError) as info:
            require_positive("B", 0.0)
        assert info.value.name == "B"
        assert info.value.value == 0.0
        assert "B=0.0" in str(info.value)

    @pytest.mark.parametrize("value", [True, "3.0", None, [1.0]])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(InvalidInputError, match="real number"):
            require_finite("x", value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidInputError, match="finite"):
            require_finite("x", value)

    def test_numpy_scalars_accepted(self):
        assert require_positive("x", np.float64(2.5)) == 2.5
        assert require_non_negative("x", np.int64(0)) == 0.0

    def test_non_negative(self):
        assert require_non_negative("z", 0.0) == 0.0
        with pytest.raises(InvalidInputError, match=">= 0"):
            require_non_negative("z", -0.1)

    def test_range_bounds(self):
        assert require_range("n", 0.0, 0.0, 1.0) == 0.0
        with pytest.raises(InvalidInputError, match=r"\[0.0, 1.0\)"):
            require_range("n", 1.0, 0.0, 1.0, high_inclusive=False)
        with pytest.raises(InvalidInputError, match=r"\(0.0, 1.0\]"):
            require_range("n", 0.0, 0.0, 1.0, low_inclusive=False)

    def test_friction_angle(self):
        assert require_friction_angle(0.0) == 0.0
        assert require_friction_angle(50.0, maximum=50.0, inclusive=True) == 50.0
        with pytest.raises(InvalidInputError, match="phi"):
            require_friction_angle(90.0)
        with pytest.raises(InvalidInputError):
            require_friction_angle(-1.0)
