"""
pygeocalc: closed-form geotechnical engineering formulas.

Every function is pure: it validates its scalar arguments, evaluates one
formula and returns a float (or a small frozen dataclass).  Invalid
arguments raise :class:`~pygeocalc.errors.InvalidInputError`; an
intermediate leaving its mathematical domain raises
:class:`~pygeocalc.errors.DomainError`.  No function returns NaN or inf.

Subpackages
-----------
earth_pressure
    Rankine, Coulomb and at-rest lateral earth pressure.
bearing
    Terzaghi bearing capacity factors and ultimate/allowable capacity.
settlement
    Layer settlement, time factor and degree of consolidation.
seepage
    Darcy flow, hydraulic gradients and piping checks.
phase
    Void ratio, porosity, saturation and density relations.

Modules
-------
numeric
    Angle conversion, comparison, safe transcendental wrappers.
errors
    Exception hierarchy.
config
    Physical constants and numeric defaults.
"""

import logging

from pygeocalc import (
    config,
    errors,
    numeric,
    earth_pressure,
    bearing,
    settlement,
    seepage,
    phase,
)
from pygeocalc.errors import DomainError, GeotechError, InvalidInputError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "config",
    "errors",
    "numeric",
    "earth_pressure",
    "bearing",
    "settlement",
    "seepage",
    "phase",
    "GeotechError",
    "InvalidInputError",
    "DomainError",
]
