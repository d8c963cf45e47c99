"""Weight-volume relationships of a three-phase soil.

Degree of saturation and water content are percentages throughout this
module; void ratio and porosity are fractions.
"""

from __future__ import annotations

import numpy as np

from pygeocalc.config import GAMMA_W
from pygeocalc.errors import InvalidInputError
from pygeocalc.numeric import (
    require_non_negative,
    require_positive,
    require_range,
)


def void_ratio(n: float) -> float:
    """Void ratio e = n / (1 − n), for porosity ``0 <= n < 1``."""
    n = require_range("n", n, 0.0, 1.0, high_inclusive=False)
    return n / (1.0 - n)


def porosity(e: float) -> float:
    """Porosity n = e / (1 + e), for void ratio ``e >= 0``."""
    e = require_non_negative("e", e)
    return e / (1.0 + e)


def degree_of_saturation(Vw: float, Vv: float) -> float:
    """Degree of saturation S = Vw / Vv · 100 (%).

    Args:
        Vw: Volume of water, ``0 <= Vw <= Vv``.
        Vv: Volume of voids, > 0.
    """
    Vv = require_positive("Vv", Vv)
    Vw = require_non_negative("Vw", Vw)
    if Vw > Vv:
        raise InvalidInputError("Vw", Vw, f"must not exceed Vv ({Vv!r})")
    return Vw / Vv * 100.0


def dry_density(rho: float, w: float) -> float:
    """Dry density ρd = ρ / (1 + w/100).

    Args:
        rho: Bulk density, > 0 (any mass/volume unit).
        w: Water content (%), >= 0.

    Returns:
        ρd in the unit of *rho*.
    """
    rho = require_positive("rho", rho)
    w = require_non_negative("w", w)
    return rho / (1.0 + w / 100.0)


def water_content(S: float, e: float, Gs: float) -> float:
    """Water content w = S · e / Gs (%), from S·e = w·Gs.

    Args:
        S: Degree of saturation (%), within [0, 100].
        e: Void ratio, >= 0.
        Gs: Specific gravity of solids, > 0.
    """
    S = require_range("S", S, 0.0, 100.0)
    e = require_non_negative("e", e)
    Gs = require_positive("Gs", Gs)
    return S * e / Gs


def dry_unit_weight(Gs: float, e: float, gamma_w: float = GAMMA_W) -> float:
    """Dry unit weight γd = Gs · γw / (1 + e) (kN/m³)."""
    Gs = require_positive("Gs", Gs)
    e = require_non_negative("e", e)
    gamma_w = require_positive("gamma_w", gamma_w)
    return Gs * gamma_w / (1.0 + e)


def saturated_unit_weight(Gs: float, e: float, gamma_w: float = GAMMA_W) -> float:
    """Saturated unit weight γsat = (Gs + e) · γw / (1 + e) (kN/m³)."""
    Gs = require_positive("Gs", Gs)
    e = require_non_negative("e", e)
    gamma_w = require_positive("gamma_w", gamma_w)
    return (Gs + e) * gamma_w / (1.0 + e)


def submerged_unit_weight(gamma_sat: float, gamma_w: float = GAMMA_W) -> float:
    """Buoyant unit weight γ' = γsat − γw (kN/m³).

    Raises:
        InvalidInputError: If *gamma_sat* does not exceed *gamma_w*.
    """
    gamma_w = require_positive("gamma_w", gamma_w)
    gamma_sat = require_range("gamma_sat", gamma_sat, gamma_w, np.inf, low_inclusive=False)
    return gamma_sat - gamma_w
