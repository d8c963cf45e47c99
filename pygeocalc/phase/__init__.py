"""Soil phase relationships: void ratio, porosity, saturation, density."""

from pygeocalc.phase.relations import (
    void_ratio,
    porosity,
    degree_of_saturation,
    dry_density,
    water_content,
    dry_unit_weight,
    saturated_unit_weight,
    submerged_unit_weight,
)

__all__ = [
    "void_ratio",
    "porosity",
    "degree_of_saturation",
    "dry_density",
    "water_content",
    "dry_unit_weight",
    "saturated_unit_weight",
    "submerged_unit_weight",
]
