"""Shallow foundation bearing capacity (Terzaghi)."""

from pygeocalc.bearing.factors import (
    BearingFactors,
    NGAMMA_METHODS,
    terzaghi_nc,
    terzaghi_nq,
    terzaghi_ngamma,
    terzaghi_factors,
)
from pygeocalc.bearing.capacity import (
    terzaghi_bearing_capacity,
    terzaghi_bearing_capacity_square,
    terzaghi_bearing_capacity_circular,
    bearing_capacity_design,
    overburden_pressure,
    net_bearing_capacity,
)

__all__ = [
    "BearingFactors",
    "NGAMMA_METHODS",
    "terzaghi_nc",
    "terzaghi_nq",
    "terzaghi_ngamma",
    "terzaghi_factors",
    "terzaghi_bearing_capacity",
    "terzaghi_bearing_capacity_square",
    "terzaghi_bearing_capacity_circular",
    "bearing_capacity_design",
    "overburden_pressure",
    "net_bearing_capacity",
]
