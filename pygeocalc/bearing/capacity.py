"""Ultimate and allowable bearing capacity of shallow footings.

Terzaghi's general equation for a strip footing::

    qu = c·Nc + q·Nq + ½·γ·B·Nγ

with empirical shape corrections for square (1.3, 0.4) and circular
(1.3, 0.3) footings.  Stresses in kPa, unit weights in kN/m³, widths in m.
"""

from __future__ import annotations

from pygeocalc.bearing.factors import terzaghi_factors
from pygeocalc.errors import InvalidInputError
from pygeocalc.numeric import require_non_negative, require_positive


def _terzaghi_capacity(
    c: float,
    q: float,
    gamma: float,
    B: float,
    phi: float,
    cohesion_shape: float,
    weight_shape: float,
    ngamma_method: str,
) -> float:
    c = require_non_negative("c", c)
    q = require_non_negative("q", q)
    gamma = require_positive("gamma", gamma)
    B = require_positive("B", B)
    f = terzaghi_factors(phi, ngamma_method)
    return cohesion_shape * c * f.Nc + q * f.Nq + weight_shape * gamma * B * f.Ngamma


def terzaghi_bearing_capacity(
    c: float,
    q: float,
    gamma: float,
    B: float,
    phi: float,
    ngamma_method: str = "coduto",
) -> float:
    """Ultimate bearing capacity of a strip footing.

    qu = c·Nc + q·Nq + 0.5·γ·B·Nγ

    Args:
        c: Cohesion (kPa), >= 0.
        q: Overburden pressure at footing level, γ·Df (kPa), >= 0.
        gamma: Unit weight of the soil below the footing (kN/m³), > 0.
        B: Footing width (m), > 0.
        phi: Friction angle φ (degrees), ``0 <= phi <= 50``.
        ngamma_method: Nγ fit, see :func:`~pygeocalc.bearing.factors.terzaghi_ngamma`.

    Returns:
        qu (kPa).
    """
    return _terzaghi_capacity(c, q, gamma, B, phi, 1.0, 0.5, ngamma_method)


def terzaghi_bearing_capacity_square(
    c: float,
    q: float,
    gamma: float,
    B: float,
    phi: float,
    ngamma_method: str = "coduto",
) -> float:
    """Ultimate bearing capacity of a square footing of side B.

    qu = 1.3·c·Nc + q·Nq + 0.4·γ·B·Nγ
    """
    return _terzaghi_capacity(c, q, gamma, B, phi, 1.3, 0.4, ngamma_method)


def terzaghi_bearing_capacity_circular(
    c: float,
    q: float,
    gamma: float,
    B: float,
    phi: float,
    ngamma_method: str = "coduto",
) -> float:
    """Ultimate bearing capacity of a circular footing of diameter B.

    qu = 1.3·c·Nc + q·Nq + 0.3·γ·B·Nγ
    """
    return _terzaghi_capacity(c, q, gamma, B, phi, 1.3, 0.3, ngamma_method)


def bearing_capacity_design(qu: float, Fs: float) -> float:
    """Allowable bearing capacity qa = qu / Fs.

    Args:
        qu: Ultimate bearing capacity (kPa), >= 0.
        Fs: Factor of safety, > 0.

    Raises:
        InvalidInputError: If *Fs* <= 0.
    """
    qu = require_non_negative("qu", qu)
    Fs = require_positive("Fs", Fs)
    return qu / Fs


def overburden_pressure(gamma: float, Df: float) -> float:
    """Overburden q = γ·Df at the footing base (kPa)."""
    gamma = require_positive("gamma", gamma)
    Df = require_non_negative("Df", Df)
    return gamma * Df


def net_bearing_capacity(qu: float, q: float) -> float:
    """Net ultimate bearing capacity qu − q (kPa).

    Raises:
        InvalidInputError: If the overburden exceeds *qu*.
    """
    qu = require_non_negative("qu", qu)
    q = require_non_negative("q", q)
    if q > qu:
        raise InvalidInputError("q", q, f"must not exceed qu ({qu!r})")
    return qu - q
