"""
Coop Climate — Growth Package
Weight and feed-conversion projections, husbandry targets.
"""

from .projector import (
    GrowthProjection,
    GrowthProjector,
    project_growth,
    standard_weight,
    base_growth_rate,
    fcr_target,
)
from .husbandry import ConsumptionTargets, stocking_density, consumption_targets, growth_stage

__all__ = [
    'GrowthProjection', 'GrowthProjector', 'project_growth',
    'standard_weight', 'base_growth_rate', 'fcr_target',
    'ConsumptionTargets', 'stocking_density', 'consumption_targets', 'growth_stage',
]
