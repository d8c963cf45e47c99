"""Coulomb wedge theory for lateral earth pressure.

Extends Rankine to rough, inclined walls and sloping backfill.  Angle
conventions (all degrees):

φ (phi)
    Soil friction angle.
δ (delta)
    Wall-soil interface friction angle, ``0 <= delta <= phi``.
θ (theta)
    Inclination of the wall back from the vertical, positive when the
    wall leans away from the backfill.
β (beta)
    Backfill slope above the horizontal.

With δ = θ = β = 0 both coefficients reduce to the Rankine values.

References
----------
- Das, B. M. (2011), *Principles of Foundation Engineering*, 7th ed.,
  §7.6 and §7.12.
"""

from __future__ import annotations

import logging

import numpy as np

from pygeocalc.errors import DomainError, InvalidInputError
from pygeocalc.earth_pressure.rankine import lateral_force
from pygeocalc.numeric import (
    finite,
    require_friction_angle,
    require_range,
    safe_sqrt,
)

logger = logging.getLogger(__name__)


def _validate_angles(
    phi: float, delta: float, theta: float, beta: float,
) -> tuple[float, float, float, float]:
    phi = require_friction_angle(phi)
    delta = require_range("delta", delta, 0.0, phi)
    theta = require_range("theta", theta, -90.0, 90.0, False, False)
    beta = require_range("beta", beta, -90.0, 90.0, False, False)
    return phi, delta, theta, beta


def _positive_cosine(angle: float, label: str) -> float:
    value = float(np.cos(angle))
    if value <= 0.0:
        logger.debug("Coulomb term %s = %g is not positive", label, value)
        raise DomainError(f"{label} must be positive, got {value!r}")
    return value


def _positive_coefficient(value: float, label: str) -> float:
    value = finite(value, label)
    if value <= 0.0:
        raise DomainError(f"{label} vanishes for this wall geometry")
    return value


def coulomb_active_coefficient(
    phi: float,
    delta: float = 0.0,
    theta: float = 0.0,
    beta: float = 0.0,
) -> float:
    """Coulomb active earth pressure coefficient.

    Ka = cos²(φ−θ) / [cos²θ · cos(δ+θ) · (1 + √(sin(φ+δ)·sin(φ−β) / (cos(δ+θ)·cos(θ−β))))²]

    Args:
        phi: Friction angle φ (degrees), ``0 <= phi < 90``.
        delta: Wall friction angle δ (degrees), ``0 <= delta <= phi``.
        theta: Wall-back inclination θ from vertical (degrees).
        beta: Backfill slope β (degrees), ``beta <= phi``.

    Returns:
        Ka (–), > 0.

    Raises:
        InvalidInputError: If an angle is out of range, including a
            backfill steeper than the friction angle.
        DomainError: If a cosine term of the denominator is not positive.
    """
    phi, delta, theta, beta = _validate_angles(phi, delta, theta, beta)
    if beta > phi:
        logger.debug("backfill slope %g° exceeds friction angle %g°", beta, phi)
        raise InvalidInputError("beta", beta, f"must be <= phi ({phi!r})")

    p, d, t, b = np.radians([phi, delta, theta, beta])
    cos_dt = _positive_cosine(d + t, "cos(delta + theta)")
    cos_tb = _positive_cosine(t - b, "cos(theta - beta)")

    radicand = np.sin(p + d) * np.sin(p - b) / (cos_dt * cos_tb)
    root = safe_sqrt(float(radicand))

    Ka = np.cos(p - t) ** 2 / (np.cos(t) ** 2 * cos_dt * (1.0 + root) ** 2)
    logger.debug(
        "Coulomb Ka(phi=%g, delta=%g, theta=%g, beta=%g) = %g",
        phi, delta, theta, beta, Ka,
    )
    return _positive_coefficient(Ka, "Coulomb Ka")


def coulomb_passive_coefficient(
    phi: float,
    delta: float = 0.0,
    theta: float = 0.0,
    beta: float = 0.0,
) -> float:
    """Coulomb passive earth pressure coefficient.

    Kp = cos²(φ+θ) / [cos²θ · cos(δ−θ) · (1 − √(sin(φ+δ)·sin(φ+β) / (cos(δ−θ)·cos(β−θ))))²]

    The plane-wedge assumption overestimates Kp for δ > φ/2; callers
    designing for large wall friction should prefer a log-spiral method.

    Args:
        phi: Friction angle φ (degrees), ``0 <= phi < 90``.
        delta: Wall friction angle δ (degrees), ``0 <= delta <= phi``.
        theta: Wall-back inclination θ from vertical (degrees).
        beta: Backfill slope β (degrees), ``beta >= -phi``.

    Returns:
        Kp (–), > 0.

    Raises:
        InvalidInputError: If an angle is out of range.
        DomainError: If the square-root term reaches 1 (no finite passive
            wedge) or a cosine term is not positive.
    """
    phi, delta, theta, beta = _validate_angles(phi, delta, theta, beta)
    if beta < -phi:
        logger.debug("backfill slope %g° below -phi (%g°)", beta, -phi)
        raise InvalidInputError("beta", beta, f"must be >= -phi ({-phi!r})")

    p, d, t, b = np.radians([phi, delta, theta, beta])
    cos_dt = _positive_cosine(d - t, "cos(delta - theta)")
    cos_bt = _positive_cosine(b - t, "cos(beta - theta)")

    radicand = np.sin(p + d) * np.sin(p + b) / (cos_dt * cos_bt)
    root = safe_sqrt(float(radicand))
    if root >= 1.0:
        logger.debug("Coulomb passive root term %g >= 1", root)
        raise DomainError(
            f"no finite passive wedge for phi={phi!r}, delta={delta!r}, "
            f"theta={theta!r}, beta={beta!r}"
        )

    Kp = np.cos(p + t) ** 2 / (np.cos(t) ** 2 * cos_dt * (1.0 - root) ** 2)
    logger.debug(
        "Coulomb Kp(phi=%g, delta=%g, theta=%g, beta=%g) = %g",
        phi, delta, theta, beta, Kp,
    )
    return _positive_coefficient(Kp, "Coulomb Kp")


def coulomb_active_force(Ka: float, gamma: float, H: float) -> float:
    """Active thrust Pa = ½·Ka·γ·H² (kN/m), inclined at δ to the wall normal."""
    return lateral_force(Ka, gamma, H)


def coulomb_passive_force(Kp: float, gamma: float, H: float) -> float:
    """Passive resistance Pp = ½·Kp·γ·H² (kN/m)."""
    return lateral_force(Kp, gamma, H)
