"""Lateral earth pressure: Rankine, Coulomb and at-rest."""

from pygeocalc.earth_pressure.rankine import (
    lateral_pressure,
    lateral_force,
    rankine_active_coefficient,
    rankine_passive_coefficient,
    rankine_active_pressure,
    rankine_active_force,
    rankine_passive_pressure,
    rankine_passive_force,
    rankine_active_pressure_cohesive,
    rankine_passive_pressure_cohesive,
    tension_crack_depth,
    surcharge_pressure,
)
from pygeocalc.earth_pressure.coulomb import (
    coulomb_active_coefficient,
    coulomb_passive_coefficient,
    coulomb_active_force,
    coulomb_passive_force,
)
from pygeocalc.earth_pressure.at_rest import (
    at_rest_coefficient,
    at_rest_pressure,
    at_rest_force,
)

__all__ = [
    "lateral_pressure",
    "lateral_force",
    "rankine_active_coefficient",
    "rankine_passive_coefficient",
    "rankine_active_pressure",
    "rankine_active_force",
    "rankine_passive_pressure",
    "rankine_passive_force",
    "rankine_active_pressure_cohesive",
    "rankine_passive_pressure_cohesive",
    "tension_crack_depth",
    "surcharge_pressure",
    "coulomb_active_coefficient",
    "coulomb_passive_coefficient",
    "coulomb_active_force",
    "coulomb_passive_force",
    "at_rest_coefficient",
    "at_rest_pressure",
    "at_rest_force",
]
