"""Darcy's law for saturated one-dimensional flow.

    v = k · i,   Q = k · i · A,   i = Δh / L

Conductivity k in m/s, heads and lengths in m, areas in m².
"""

from __future__ import annotations

from pygeocalc.numeric import (
    require_finite,
    require_non_negative,
    require_positive,
    require_range,
)


def hydraulic_gradient(dh: float, L: float) -> float:
    """Hydraulic gradient i = Δh / L.

    Args:
        dh: Head loss Δh (m).  Sign gives the flow direction.
        L: Flow path length (m), > 0.

    Returns:
        i (–).
    """
    dh = require_finite("dh", dh)
    L = require_positive("L", L)
    return dh / L


def darcy_velocity(k: float, i: float) -> float:
    """Discharge (superficial) velocity v = k · i (m/s).

    Args:
        k: Hydraulic conductivity (m/s), >= 0.
        i: Hydraulic gradient (–).
    """
    k = require_non_negative("k", k)
    i = require_finite("i", i)
    return k * i


def darcy_flow_rate(k: float, i: float, A: float) -> float:
    """Flow rate Q = k · i · A (m³/s).

    Args:
        k: Hydraulic conductivity (m/s), >= 0.
        i: Hydraulic gradient (–).
        A: Gross cross-sectional area normal to flow (m²), >= 0.
    """
    A = require_non_negative("A", A)
    return darcy_velocity(k, i) * A


def seepage_velocity(v: float, n: float) -> float:
    """Average pore-water velocity vs = v / n (m/s).

    Args:
        v: Discharge velocity (m/s).
        n: Porosity, ``0 < n <= 1``.
    """
    v = require_finite("v", v)
    n = require_range("n", n, 0.0, 1.0, low_inclusive=False)
    return v / n


def flow_net_discharge(k: float, dh: float, Nf: float, Nd: float) -> float:
    """Seepage per metre run from a flow net, q = k · Δh · Nf / Nd (m³/s/m).

    Args:
        k: Hydraulic conductivity (m/s), >= 0.
        dh: Total head loss across the net (m), >= 0.
        Nf: Number of flow channels, > 0.
        Nd: Number of equipotential drops, > 0.
    """
    k = require_non_negative("k", k)
    dh = require_non_negative("dh", dh)
    Nf = require_positive("Nf", Nf)
    Nd = require_positive("Nd", Nd)
    return k * dh * Nf / Nd
