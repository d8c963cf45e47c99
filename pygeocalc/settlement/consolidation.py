"""Terzaghi one-dimensional consolidation.

Time factor and average degree of consolidation::

    Tv = cv · t / H²

where H is the drainage path length: half the layer thickness when both
faces drain, the full thickness when only one does.

Average degree of consolidation
-------------------------------
The exact solution is the Fourier series::

    U = 1 − Σ 2/M² · exp(−M² Tv),   M = π(2m + 1)/2

:func:`consolidation_degree` uses the two standard closed-form limits
instead, switching at a crossover Tv_c (default 0.213)::

    U = 2 · √(Tv / π)                     Tv <= Tv_c
    U = 1 − (8/π²) · exp(−π² Tv / 4)      Tv >  Tv_c

Both branches are increasing and cross near Tv = 0.21303.  Tv_c is
restricted to [0.2, 0.213]: the exponential branch then starts at or
above the value the square-root branch ends on, so U is non-decreasing
over [0, ∞), with U(0) = 0 and U → 1.  At the default the step between
the branches is about 1.3e-6.  Over the whole accepted range the error
against the exact series stays within 0.22 % of U, the worst case being
just above Tv_c = 0.2.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from pygeocalc.config import (
    CONSOLIDATION_CROSSOVER_TV,
    KPA_PER_MPA,
    MAX_CONSOLIDATION_CROSSOVER_TV,
    MIN_CONSOLIDATION_CROSSOVER_TV,
)
from pygeocalc.errors import InvalidInputError
from pygeocalc.numeric import (
    require_non_negative,
    require_positive,
    require_range,
    safe_exp,
    safe_log,
    safe_sqrt,
)

logger = logging.getLogger(__name__)

_SERIES_LEAD = 8.0 / np.pi ** 2
_SERIES_RATE = np.pi ** 2 / 4.0


def _crossover(value: float) -> float:
    return require_range(
        "crossover", value, MIN_CONSOLIDATION_CROSSOVER_TV, MAX_CONSOLIDATION_CROSSOVER_TV,
    )


def time_factor(cv: float, t: float, H: float) -> float:
    """Dimensionless time factor Tv = cv · t / H².

    Args:
        cv: Coefficient of consolidation (m²/s), > 0.
        t: Time since loading (s), >= 0.
        H: Drainage path length (m), > 0.

    Returns:
        Tv (–).
    """
    cv = require_positive("cv", cv)
    t = require_non_negative("t", t)
    H = require_positive("H", H)
    return cv * t / H ** 2


def consolidation_time(Tv: float, cv: float, H: float) -> float:
    """Time t = Tv · H² / cv needed to reach a time factor (s)."""
    Tv = require_non_negative("Tv", Tv)
    cv = require_positive("cv", cv)
    H = require_positive("H", H)
    return Tv * H ** 2 / cv


def consolidation_degree(Tv: float, crossover: float = CONSOLIDATION_CROSSOVER_TV) -> float:
    """Average degree of consolidation U as a fraction in [0, 1].

    Args:
        Tv: Time factor, >= 0.
        crossover: Time factor at which the square-root branch hands over
            to the exponential branch, ``0.2 <= crossover <= 0.213``.

    Returns:
        U (–).
    """
    Tv = require_non_negative("Tv", Tv)
    crossover = _crossover(crossover)
    if Tv <= crossover:
        U = 2.0 * safe_sqrt(Tv / np.pi)
        branch = "sqrt"
    else:
        U = 1.0 - _SERIES_LEAD * safe_exp(-_SERIES_RATE * Tv)
        branch = "exp"
    logger.debug("U(Tv=%g) = %g via %s branch", Tv, U, branch)
    return U


def time_factor_for_degree(U: float, crossover: float = CONSOLIDATION_CROSSOVER_TV) -> float:
    """Time factor needed to reach an average degree of consolidation.

    Inverse of :func:`consolidation_degree` for the same *crossover*.
    Degrees falling in the small step between the two branches map to
    the crossover itself.

    Args:
        U: Degree of consolidation as a fraction, ``0 <= U < 1``.
        crossover: See :func:`consolidation_degree`.

    Returns:
        Tv (–).
    """
    U = require_range("U", U, 0.0, 1.0, high_inclusive=False)
    crossover = _crossover(crossover)
    if U <= 2.0 * safe_sqrt(crossover / np.pi):
        return np.pi * U ** 2 / 4.0
    Tv = -safe_log((1.0 - U) / _SERIES_LEAD) / _SERIES_RATE
    return max(crossover, Tv)


def consolidation_settlement_final(mv: float, sigma_z: float, H: float) -> float:
    """Final primary consolidation settlement s = mv · (σz / 1000) · H.

    Args:
        mv: Coefficient of volume compressibility (MPa⁻¹), > 0.
        sigma_z: Vertical stress increment (kPa), >= 0.
        H: Layer thickness (m), >= 0.

    Returns:
        Settlement (m).
    """
    mv = require_positive("mv", mv)
    sigma_z = require_non_negative("sigma_z", sigma_z)
    H = require_non_negative("H", H)
    return mv * (sigma_z / KPA_PER_MPA) * H


def settlement_at_time(s_final: float, U: float) -> float:
    """Consolidation settlement reached at degree U: s(t) = U · s_final."""
    s_final = require_non_negative("s_final", s_final)
    U = require_range("U", U, 0.0, 1.0)
    return U * s_final


def excess_pore_pressure(
    z: ArrayLike,
    Tv: float,
    H: float,
    u0: float,
    n_terms: int = 100,
) -> np.ndarray:
    """Terzaghi isochrone of excess pore pressure.

    u(z, Tv) = Σ 2·u0/M · sin(M z / H) · exp(−M² Tv)

    for a doubly drained layer of thickness 2H under an initially
    uniform excess pressure u0.

    Args:
        z: Depth(s) below the top drainage face (m), within [0, 2H].
        Tv: Time factor, >= 0.
        H: Drainage path length, half the layer thickness (m), > 0.
        u0: Initial excess pore pressure (kPa), >= 0.
        n_terms: Number of Fourier series terms, >= 1.

    Returns:
        Excess pore pressure array, same shape as *z*.
    """
    Tv = require_non_negative("Tv", Tv)
    H = require_positive("H", H)
    u0 = require_non_negative("u0", u0)
    if isinstance(n_terms, bool) or not isinstance(n_terms, (int, np.integer)) or n_terms < 1:
        raise InvalidInputError("n_terms", n_terms, "must be a positive integer")

    z_arr = np.asarray(z, dtype=float)
    if not np.all(np.isfinite(z_arr)) or np.any(z_arr < 0.0) or np.any(z_arr > 2.0 * H):
        raise InvalidInputError("z", z, f"must lie in [0, {2.0 * H!r}]")

    u = np.zeros_like(z_arr)
    for m in range(n_terms):
        M = np.pi * (2 * m + 1) / 2.0
        u += 2.0 * u0 / M * np.sin(M * z_arr / H) * np.exp(-(M ** 2) * Tv)
    return u
