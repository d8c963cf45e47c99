"""Settlement of a single compressible layer.

Unit conventions differ between forms and are part of each contract:

- :func:`settlement_layer` takes the coefficient of compressibility in
  MPa⁻¹ and the stress increment in kPa, and converts kPa to MPa.
- :func:`settlement_layer_es` and :func:`elastic_settlement` take the
  modulus and the stress in the *same* unit; no conversion is applied.
- :func:`settlement_compression_index` is dimensionless in stress.

All settlements are returned in the length unit of the thickness (m).
"""

from __future__ import annotations

import numpy as np

from pygeocalc.config import KPA_PER_MPA
from pygeocalc.numeric import (
    require_non_negative,
    require_positive,
    require_range,
)


def _initial_void_ratio(e0: float) -> float:
    return require_range("e0", e0, -1.0, np.inf, low_inclusive=False)


def settlement_layer(av: float, e0: float, sigma_z: float, Hi: float) -> float:
    """Layer settlement from the coefficient of compressibility.

    s = av · (σz / 1000) · Hi / (1 + e0)

    Args:
        av: Coefficient of compressibility a_v (MPa⁻¹), >= 0.
        e0: Initial void ratio, > -1.
        sigma_z: Additional vertical stress at mid-layer (kPa), >= 0.
        Hi: Layer thickness (m), >= 0.

    Returns:
        Settlement (m).
    """
    av = require_non_negative("av", av)
    e0 = _initial_void_ratio(e0)
    sigma_z = require_non_negative("sigma_z", sigma_z)
    Hi = require_non_negative("Hi", Hi)
    return av * (sigma_z / KPA_PER_MPA) * Hi / (1.0 + e0)


def settlement_layer_es(Es: float, sigma_z: float, Hi: float) -> float:
    """Layer settlement from the compression (oedometric) modulus.

    s = (σz / Es) · Hi

    Args:
        Es: Compression modulus, > 0, same stress unit as *sigma_z*.
        sigma_z: Additional vertical stress, >= 0.
        Hi: Layer thickness (m), >= 0.

    Returns:
        Settlement (m).
    """
    Es = require_positive("Es", Es)
    sigma_z = require_non_negative("sigma_z", sigma_z)
    Hi = require_non_negative("Hi", Hi)
    return sigma_z / Es * Hi


def settlement_compression_index(
    Cc: float,
    e0: float,
    H: float,
    sigma0: float,
    delta_sigma: float,
) -> float:
    """Primary consolidation settlement of a normally consolidated clay.

    s = Cc · H / (1 + e0) · log10((σ0 + Δσ) / σ0)

    Args:
        Cc: Compression index (–), >= 0.
        e0: Initial void ratio, > -1.
        H: Layer thickness (m), >= 0.
        sigma0: Initial effective stress at mid-layer (kPa), > 0.
        delta_sigma: Stress increment (kPa), >= 0.

    Returns:
        Settlement (m).
    """
    Cc = require_non_negative("Cc", Cc)
    e0 = _initial_void_ratio(e0)
    H = require_non_negative("H", H)
    sigma0 = require_positive("sigma0", sigma0)
    delta_sigma = require_non_negative("delta_sigma", delta_sigma)
    return Cc * H / (1.0 + e0) * float(np.log10((sigma0 + delta_sigma) / sigma0))


def elastic_settlement(
    q: float,
    B: float,
    Es: float,
    nu: float,
    influence: float = 1.0,
) -> float:
    """Immediate (elastic) settlement of a flexible footing.

    s = q · B · (1 − ν²) · I / Es

    Args:
        q: Net applied pressure, >= 0, same unit as *Es*.
        B: Footing width (m), > 0.
        Es: Young's modulus of the soil, > 0.
        nu: Poisson's ratio, ``0 <= nu < 0.5``.
        influence: Shape/rigidity influence factor I, > 0.

    Returns:
        Settlement (m).
    """
    q = require_non_negative("q", q)
    B = require_positive("B", B)
    Es = require_positive("Es", Es)
    nu = require_range("nu", nu, 0.0, 0.5, high_inclusive=False)
    influence = require_positive("influence", influence)
    return q * B * (1.0 - nu ** 2) * influence / Es
