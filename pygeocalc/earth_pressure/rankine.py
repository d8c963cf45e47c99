"""Rankine lateral earth pressure.

Smooth vertical wall, horizontal backfill.  The coefficients follow from
the Mohr-Coulomb failure state of a soil element::

    Ka = tan²(45° − φ/2)
    Kp = tan²(45° + φ/2)

Pressures grow linearly with depth, so the resultant of a distribution
over a height H is ½·K·γ·H² acting at H/3 above the base.

References
----------
- Das, B. M. (2010), *Principles of Geotechnical Engineering*, 7th ed.,
  Chapter 13.
"""

from __future__ import annotations

from pygeocalc.numeric import (
    require_friction_angle,
    require_non_negative,
    require_positive,
    safe_sqrt,
    safe_tan,
)


# ======================================================================
# Coefficients
# ======================================================================


def rankine_active_coefficient(phi: float) -> float:
    """Active earth pressure coefficient Ka = tan²(45° − φ/2).

    Args:
        phi: Friction angle φ (degrees), ``0 <= phi < 90``.

    Returns:
        Ka (–), in (0, 1].
    """
    phi = require_friction_angle(phi)
    return safe_tan(45.0 - phi / 2.0) ** 2


def rankine_passive_coefficient(phi: float) -> float:
    """Passive earth pressure coefficient Kp = tan²(45° + φ/2).

    Args:
        phi: Friction angle φ (degrees), ``0 <= phi < 90``.

    Returns:
        Kp (–), >= 1.
    """
    phi = require_friction_angle(phi)
    return safe_tan(45.0 + phi / 2.0) ** 2


# ======================================================================
# Pressures and resultants
# ======================================================================


def lateral_pressure(K: float, gamma: float, z: float) -> float:
    """Lateral pressure σh = K·γ·z for any earth pressure coefficient.

    Args:
        K: Earth pressure coefficient (–), > 0.
        gamma: Unit weight γ (kN/m³), > 0.
        z: Depth below the top of the wall (m), >= 0.

    Returns:
        Pressure (kPa).
    """
    K = require_positive("K", K)
    gamma = require_positive("gamma", gamma)
    z = require_non_negative("z", z)
    return K * gamma * z


def lateral_force(K: float, gamma: float, H: float) -> float:
    """Resultant of a triangular pressure distribution, ½·K·γ·H².

    Args:
        K: Earth pressure coefficient (–), > 0.
        gamma: Unit weight γ (kN/m³), > 0.
        H: Wall height (m), >= 0.

    Returns:
        Force per metre run of wall (kN/m).
    """
    K = require_positive("K", K)
    gamma = require_positive("gamma", gamma)
    H = require_non_negative("H", H)
    return 0.5 * K * gamma * H ** 2


def rankine_active_pressure(Ka: float, gamma: float, z: float) -> float:
    """Active pressure σa = Ka·γ·z (kPa)."""
    return lateral_pressure(Ka, gamma, z)


def rankine_active_force(Ka: float, gamma: float, H: float) -> float:
    """Active thrust Pa = ½·Ka·γ·H² (kN/m)."""
    return lateral_force(Ka, gamma, H)


def rankine_passive_pressure(Kp: float, gamma: float, z: float) -> float:
    """Passive pressure σp = Kp·γ·z (kPa)."""
    return lateral_pressure(Kp, gamma, z)


def rankine_passive_force(Kp: float, gamma: float, H: float) -> float:
    """Passive resistance Pp = ½·Kp·γ·H² (kN/m)."""
    return lateral_force(Kp, gamma, H)


# ----------------------------------------------------------------------
# c-φ soils
# ----------------------------------------------------------------------


def rankine_active_pressure_cohesive(Ka: float, gamma: float, z: float, c: float) -> float:
    """Active pressure in a c-φ soil, σa = Ka·γ·z − 2c·√Ka.

    Negative values inside the tension crack zone are returned as zero,
    since soil cannot pull on the wall.

    Args:
        Ka: Active coefficient (–), > 0.
        gamma: Unit weight (kN/m³), > 0.
        z: Depth (m), >= 0.
        c: Cohesion (kPa), >= 0.

    Returns:
        Active pressure (kPa), >= 0.
    """
    c = require_non_negative("c", c)
    sigma = lateral_pressure(Ka, gamma, z) - 2.0 * c * safe_sqrt(Ka)
    return max(0.0, sigma)


def rankine_passive_pressure_cohesive(Kp: float, gamma: float, z: float, c: float) -> float:
    """Passive pressure in a c-φ soil, σp = Kp·γ·z + 2c·√Kp (kPa)."""
    c = require_non_negative("c", c)
    return lateral_pressure(Kp, gamma, z) + 2.0 * c * safe_sqrt(Kp)


def tension_crack_depth(c: float, gamma: float, Ka: float) -> float:
    """Depth of the tension zone, zc = 2c / (γ·√Ka).

    Args:
        c: Cohesion (kPa), >= 0.
        gamma: Unit weight (kN/m³), > 0.
        Ka: Active coefficient (–), > 0.

    Returns:
        Depth (m) above which the active pressure is zero.
    """
    c = require_non_negative("c", c)
    gamma = require_positive("gamma", gamma)
    Ka = require_positive("Ka", Ka)
    return 2.0 * c / (gamma * safe_sqrt(Ka))


def surcharge_pressure(K: float, q: float) -> float:
    """Uniform lateral pressure K·q from a surface surcharge q (kPa)."""
    K = require_positive("K", K)
    q = require_non_negative("q", q)
    return K * q
