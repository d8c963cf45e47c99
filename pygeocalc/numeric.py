"""Numeric utilities shared by every formula group.

Angle conversion, approximate comparison, transcendental wrappers that
refuse to return NaN or infinity, and the argument validators used at
the entry of every public formula.

Functions
---------
deg_to_rad, rad_to_deg
    Angle conversion.
approx_equal
    Absolute-tolerance float comparison.
safe_tan, safe_sqrt, safe_exp, safe_log
    Transcendental wrappers raising :class:`DomainError`.
finite
    Guard for computed intermediates.
require_finite, require_positive, require_non_negative, require_range,
require_friction_angle
    Argument validators raising :class:`InvalidInputError`.
"""

from __future__ import annotations

import logging
import numbers

import numpy as np

from pygeocalc.config import DEFAULT_TOLERANCE
from pygeocalc.errors import DomainError, InvalidInputError

logger = logging.getLogger(__name__)


# ======================================================================
# Angles and comparison
# ======================================================================


def deg_to_rad(angle: float) -> float:
    """Convert an angle from degrees to radians."""
    return float(np.radians(require_finite("angle", angle)))


def rad_to_deg(angle: float) -> float:
    """Convert an angle from radians to degrees."""
    return float(np.degrees(require_finite("angle", angle)))


def approx_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Return ``True`` iff ``|a - b| <= tolerance``.

    Args:
        a: First value.
        b: Second value.
        tolerance: Absolute tolerance, must be >= 0.

    Raises:
        InvalidInputError: If *tolerance* is negative or any argument
            is not a finite real number.
    """
    a = require_finite("a", a)
    b = require_finite("b", b)
    tolerance = require_non_negative("tolerance", tolerance)
    return abs(a - b) <= tolerance


# ======================================================================
# Transcendental wrappers
# ======================================================================


def safe_tan(angle_deg: float) -> float:
    """Tangent of an angle given in degrees.

    The tangent is only evaluated on the open interval (-90°, 90°), which
    is where every 45° ± φ/2 argument in this package must land.

    Raises:
        InvalidInputError: If the angle is not a finite real number.
        DomainError: If the angle is outside (-90°, 90°).
    """
    angle_deg = require_finite("angle_deg", angle_deg)
    if not -90.0 < angle_deg < 90.0:
        logger.debug("tan(%g°) rejected: outside (-90°, 90°)", angle_deg)
        raise DomainError(f"tan({angle_deg!r}°) is undefined outside (-90°, 90°)")
    return float(np.tan(np.radians(angle_deg)))


def safe_sqrt(x: float) -> float:
    """Square root of a non-negative number.

    Raises:
        InvalidInputError: If *x* is not a finite real number.
        DomainError: If *x* is negative.
    """
    x = require_finite("x", x)
    if x < 0.0:
        logger.debug("sqrt(%g) rejected: negative radicand", x)
        raise DomainError(f"sqrt({x!r}) has a negative radicand")
    return float(np.sqrt(x))


def safe_exp(x: float) -> float:
    """Exponential that raises instead of overflowing to ``inf``.

    Raises:
        InvalidInputError: If *x* is not a finite real number.
        DomainError: If the result is not finite.
    """
    x = require_finite("x", x)
    with np.errstate(over="ignore"):
        result = np.exp(x)
    return finite(result, f"exp({x!r})")


def safe_log(x: float) -> float:
    """Natural logarithm of a strictly positive number.

    Raises:
        InvalidInputError: If *x* is not a finite real number.
        DomainError: If *x* <= 0.
    """
    x = require_finite("x", x)
    if x <= 0.0:
        logger.debug("log(%g) rejected: non-positive argument", x)
        raise DomainError(f"log({x!r}) requires a positive argument")
    return float(np.log(x))


def finite(value: float, what: str = "result") -> float:
    """Return *value* as a float, or raise if it is NaN or infinite.

    Raises:
        DomainError: If *value* is not finite.
    """
    value = float(value)
    if not np.isfinite(value):
        logger.debug("%s evaluated to %r", what, value)
        raise DomainError(f"{what} is not finite ({value!r})")
    return value


# ======================================================================
# Argument validation
# ======================================================================


def _reject(name: str, value: object, requirement: str) -> InvalidInputError:
    logger.debug("invalid input %s=%r: %s", name, value, requirement)
    return InvalidInputError(name, value, requirement)


def require_finite(name: str, value: float) -> float:
    """Return *value* as a float if it is a finite real number.

    Booleans and non-numeric types are rejected instead of coerced.

    Raises:
        InvalidInputError: Otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise _reject(name, value, "must be a real number")
    value = float(value)
    if not np.isfinite(value):
        raise _reject(name, value, "must be finite")
    return value


def require_positive(name: str, value: float) -> float:
    """Return *value* if it is finite and > 0."""
    value = require_finite(name, value)
    if value <= 0.0:
        raise _reject(name, value, "must be > 0")
    return value


def require_non_negative(name: str, value: float) -> float:
    """Return *value* if it is finite and >= 0."""
    value = require_finite(name, value)
    if value < 0.0:
        raise _reject(name, value, "must be >= 0")
    return value


def require_range(
    name: str,
    value: float,
    low: float,
    high: float,
    low_inclusive: bool = True,
    high_inclusive: bool = True,
) -> float:
    """Return *value* if it lies within the given interval.

    Args:
        name: Parameter name used in the error message.
        value: Value to check.
        low: Lower bound.
        high: Upper bound.
        low_inclusive: Whether *low* itself is allowed.
        high_inclusive: Whether *high* itself is allowed.

    Raises:
        InvalidInputError: If *value* is outside the interval.
    """
    value = require_finite(name, value)
    above_low = value >= low if low_inclusive else value > low
    below_high = value <= high if high_inclusive else value < high
    if not (above_low and below_high):
        left = "[" if low_inclusive else "("
        right = "]" if high_inclusive else ")"
        raise _reject(name, value, f"must lie in {left}{low!r}, {high!r}{right}")
    return value


def require_friction_angle(phi: float, maximum: float = 90.0, inclusive: bool = False) -> float:
    """Validate a friction angle in degrees: ``0 <= phi < maximum``.

    Args:
        phi: Friction angle (degrees).
        maximum: Upper bound (degrees).
        inclusive: Allow ``phi == maximum``.
    """
    return require_range("phi", phi, 0.0, maximum, high_inclusive=inclusive)
