"""Groundwater seepage: Darcy flow and piping checks."""

from pygeocalc.seepage.darcy import (
    hydraulic_gradient,
    darcy_velocity,
    darcy_flow_rate,
    seepage_velocity,
    flow_net_discharge,
)
from pygeocalc.seepage.piping import (
    critical_hydraulic_gradient,
    is_piping,
    piping_safety_factor,
    seepage_force,
)

__all__ = [
    "hydraulic_gradient",
    "darcy_velocity",
    "darcy_flow_rate",
    "seepage_velocity",
    "flow_net_discharge",
    "critical_hydraulic_gradient",
    "is_piping",
    "piping_safety_factor",
    "seepage_force",
]
