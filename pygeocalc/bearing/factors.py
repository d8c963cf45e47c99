"""Terzaghi bearing capacity factors Nc, Nq and Nγ.

Nq and Nc follow Terzaghi (1943) closed forms::

    a  = exp((3π/4 − φ/2)·tan φ)
    Nq = a² / (2·cos²(45° + φ/2))
    Nc = (Nq − 1)·cot φ            (φ > 0)
    Nc = 5.7                       (φ = 0, Terzaghi's tabulated value)

Since 2·cos²(45° + φ/2) = 1 − sin φ, Nq − 1 is evaluated as::

    Nq − 1 = (expm1(g) + sin φ) / (1 − sin φ),   g = (3π/2 − φ)·tan φ

which has no cancellation as φ → 0, where Nc → 1 + 3π/2.

Terzaghi never gave Nγ in closed form; it is taken from one of several
published fits, selected with the ``method`` keyword:

``"coduto"``
    2(Nq + 1)·tan φ / (1 + 0.4·sin 4φ) with Terzaghi's Nq, Coduto (2001),
    a fit to Terzaghi's tabulated values.  Default.
``"vesic"``
    2(Nq* + 1)·tan φ, Vesic (1973).
``"meyerhof"``
    (Nq* − 1)·tan(1.4φ), Meyerhof (1963).

Nq* = exp(π·tan φ)·tan²(45° + φ/2) is the Prandtl–Reissner factor that
the Vesic and Meyerhof expressions were published with.

Every fit is zero at φ = 0 and strictly increasing on [0°, 50°], which
is the domain accepted here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from pygeocalc.config import (
    MAX_BEARING_FRICTION_ANGLE,
    TERZAGHI_NC_PHI0,
    ZERO_ANGLE_TOLERANCE,
)
from pygeocalc.errors import InvalidInputError
from pygeocalc.numeric import (
    approx_equal,
    deg_to_rad,
    finite,
    require_friction_angle,
    safe_exp,
    safe_tan,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BearingFactors:
    """Terzaghi bearing capacity factors for one friction angle.

    Attributes:
        Nc: Cohesion factor.
        Nq: Surcharge factor.
        Ngamma: Self-weight factor.
    """

    Nc: float
    Nq: float
    Ngamma: float


def _bearing_angle(phi: float) -> float:
    return require_friction_angle(phi, MAX_BEARING_FRICTION_ANGLE, inclusive=True)


def _is_frictionless(phi: float) -> bool:
    return approx_equal(phi, 0.0, ZERO_ANGLE_TOLERANCE)


def _terzaghi_nq_minus_one(phi: float) -> float:
    phi_rad = deg_to_rad(phi)
    sin_phi = float(np.sin(phi_rad))
    g = (1.5 * np.pi - phi_rad) * safe_tan(phi)
    return finite((np.expm1(g) + sin_phi) / (1.0 - sin_phi), "Nq - 1")


def terzaghi_nq(phi: float) -> float:
    """Surcharge factor Nq.

    Args:
        phi: Friction angle φ (degrees), ``0 <= phi <= 50``.

    Returns:
        Nq (–), exactly 1 at φ = 0.
    """
    phi = _bearing_angle(phi)
    if _is_frictionless(phi):
        return 1.0
    return 1.0 + _terzaghi_nq_minus_one(phi)


def terzaghi_nc(phi: float) -> float:
    """Cohesion factor Nc.

    Args:
        phi: Friction angle φ (degrees), ``0 <= phi <= 50``.

    Returns:
        Nc (–); 5.7 at φ = 0, tending to 1 + 3π/2 just above it.
    """
    phi = _bearing_angle(phi)
    if _is_frictionless(phi):
        return TERZAGHI_NC_PHI0
    return finite(_terzaghi_nq_minus_one(phi) / safe_tan(phi), "Nc")


def _reissner_nq(phi: float) -> float:
    return safe_exp(np.pi * safe_tan(phi)) * safe_tan(45.0 + phi / 2.0) ** 2


# ----------------------------------------------------------------------
# Nγ fits
# ----------------------------------------------------------------------


def _ngamma_coduto(phi: float) -> float:
    return 2.0 * (terzaghi_nq(phi) + 1.0) * safe_tan(phi) / (1.0 + 0.4 * np.sin(deg_to_rad(4.0 * phi)))


def _ngamma_vesic(phi: float) -> float:
    return 2.0 * (_reissner_nq(phi) + 1.0) * safe_tan(phi)


def _ngamma_meyerhof(phi: float) -> float:
    return (_reissner_nq(phi) - 1.0) * safe_tan(1.4 * phi)


NGAMMA_METHODS: dict[str, Callable[[float], float]] = {
    "coduto": _ngamma_coduto,
    "vesic": _ngamma_vesic,
    "meyerhof": _ngamma_meyerhof,
}


def terzaghi_ngamma(phi: float, method: str = "coduto") -> float:
    """Self-weight factor Nγ.

    Args:
        phi: Friction angle φ (degrees), ``0 <= phi <= 50``.
        method: Name of the fit, one of :data:`NGAMMA_METHODS`.

    Returns:
        Nγ (–); 0 at φ = 0.

    Raises:
        InvalidInputError: If *method* is unknown or *phi* out of range.
    """
    try:
        fit = NGAMMA_METHODS[method]
    except KeyError:
        raise InvalidInputError(
            "method", method, f"must be one of {sorted(NGAMMA_METHODS)}"
        ) from None
    phi = _bearing_angle(phi)
    if _is_frictionless(phi):
        return 0.0
    value = fit(phi)
    logger.debug("Ngamma[%s](phi=%g) = %g", method, phi, value)
    return finite(value, "Ngamma")


def terzaghi_factors(phi: float, ngamma_method: str = "coduto") -> BearingFactors:
    """All three Terzaghi factors for a friction angle.

    Args:
        phi: Friction angle φ (degrees), ``0 <= phi <= 50``.
        ngamma_method: Nγ fit, see :func:`terzaghi_ngamma`.

    Returns:
        :class:`BearingFactors`.
    """
    return BearingFactors(
        Nc=terzaghi_nc(phi),
        Nq=terzaghi_nq(phi),
        Ngamma=terzaghi_ngamma(phi, ngamma_method),
    )
