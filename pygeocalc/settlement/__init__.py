"""Settlement and one-dimensional consolidation."""

from pygeocalc.settlement.layer import (
    settlement_layer,
    settlement_layer_es,
    settlement_compression_index,
    elastic_settlement,
)
from pygeocalc.settlement.consolidation import (
    time_factor,
    consolidation_time,
    consolidation_degree,
    time_factor_for_degree,
    consolidation_settlement_final,
    settlement_at_time,
    excess_pore_pressure,
)

__all__ = [
    "settlement_layer",
    "settlement_layer_es",
    "settlement_compression_index",
    "elastic_settlement",
    "time_factor",
    "consolidation_time",
    "consolidation_degree",
    "time_factor_for_degree",
    "consolidation_settlement_final",
    "settlement_at_time",
    "excess_pore_pressure",
]
