"""Heave and piping under upward seepage."""

from __future__ import annotations

import numpy as np

from pygeocalc.config import GAMMA_W
from pygeocalc.numeric import (
    require_finite,
    require_positive,
    require_range,
)


def critical_hydraulic_gradient(Gs: float, e: float) -> float:
    """Critical (quick-condition) gradient icr = (Gs − 1) / (1 + e).

    Args:
        Gs: Specific gravity of solids, > 1.
        e: Void ratio, > -1.

    Returns:
        icr (–).
    """
    Gs = require_range("Gs", Gs, 1.0, np.inf, low_inclusive=False)
    e = require_range("e", e, -1.0, np.inf, low_inclusive=False)
    return (Gs - 1.0) / (1.0 + e)


def is_piping(i: float, icr: float) -> bool:
    """Whether the exit gradient reaches the critical gradient, ``i >= icr``.

    This is a threshold decision, so the comparison is exact: a gradient
    equal to *icr* counts as piping.
    """
    i = require_finite("i", i)
    icr = require_finite("icr", icr)
    return i >= icr


def piping_safety_factor(i: float, icr: float) -> float:
    """Factor of safety against piping, Fs = icr / i.

    Args:
        i: Exit gradient, > 0.
        icr: Critical gradient, > 0.
    """
    i = require_positive("i", i)
    icr = require_positive("icr", icr)
    return icr / i


def seepage_force(i: float, gamma_w: float = GAMMA_W) -> float:
    """Seepage force per unit volume of soil, j = i · γw (kN/m³)."""
    i = require_finite("i", i)
    gamma_w = require_positive("gamma_w", gamma_w)
    return i * gamma_w
