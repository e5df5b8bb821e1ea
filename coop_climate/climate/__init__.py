"""
Coop Climate — Climate Package
Equipment aggregation, indoor climate simulation, and advisories.
"""

from .aggregator import EquipmentTotals, aggregate_equipment, ventilation_effect, count_active
from .recommendations import (
    Advisory,
    AdvisoryType,
    ActionCode,
    AdvisoryRule,
    ClimateReading,
    RULES,
    TEMPERATURE_ACTIONS,
    generate_recommendations,
    has_action,
)
from .simulator import ClimateSimulator, SimulationResult, compute_climate
from .adjustments import EquipmentAdjustment, plan_adjustments, apply_adjustments

__all__ = [
    # Aggregation
    'EquipmentTotals', 'aggregate_equipment', 'ventilation_effect', 'count_active',
    # Advisories
    'Advisory', 'AdvisoryType', 'ActionCode', 'AdvisoryRule', 'ClimateReading',
    'RULES', 'TEMPERATURE_ACTIONS', 'generate_recommendations', 'has_action',
    # Simulation
    'ClimateSimulator', 'SimulationResult', 'compute_climate',
    # Adjustments
    'EquipmentAdjustment', 'plan_adjustments', 'apply_adjustments',
]
