"""Earth pressure at rest (no lateral wall movement)."""

from __future__ import annotations

import numpy as np

from pygeocalc.earth_pressure.rankine import lateral_force, lateral_pressure
from pygeocalc.numeric import require_friction_angle, require_range


def at_rest_coefficient(phi: float, ocr: float = 1.0) -> float:
    """Coefficient of earth pressure at rest.

    K0 = (1 − sin φ) · OCR^(sin φ)

    Jaky's expression for normally consolidated soil, with the
    Mayne & Kulhawy (1982) over-consolidation multiplier.

    Args:
        phi: Friction angle φ (degrees), ``0 <= phi < 90``.
        ocr: Over-consolidation ratio, >= 1.

    Returns:
        K0 (–), > 0.
    """
    phi = require_friction_angle(phi)
    ocr = require_range("ocr", ocr, 1.0, np.inf)
    sin_phi = float(np.sin(np.radians(phi)))
    return (1.0 - sin_phi) * ocr ** sin_phi


def at_rest_pressure(K0: float, gamma: float, z: float) -> float:
    """At-rest pressure σ0 = K0·γ·z (kPa)."""
    return lateral_pressure(K0, gamma, z)


def at_rest_force(K0: float, gamma: float, H: float) -> float:
    """At-rest thrust P0 = ½·K0·γ·H² (kN/m)."""
    return lateral_force(K0, gamma, H)
