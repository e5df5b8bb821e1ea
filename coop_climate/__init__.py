"""
Coop Climate — Broiler House Climate Model
Indoor climate simulation, climate advisories and growth projections
for a mechanically ventilated poultry house.

Two entry points:
- compute_climate(): equipment + weather -> inside climate and advisories
- project_growth(): flock + climate -> weight and FCR projection
"""

__version__ = "1.0.0"

from .config import (
    FANS,
    HEATERS,
    INLETS,
    CLIMATE,
    GROWTH,
    CONSUMPTION,
    AGE_TARGETS,
    GROWTH_STAGES,
    FCR_TARGETS,
    TargetBand,
    get_target_band,
)

from .core import (
    Enclosure,
    Equipment,
    EquipmentType,
    Fan,
    Heater,
    Inlet,
    WeatherSnapshot,
    Flock,
    equipment_from_dict,
    equipment_list_from_dicts,
)

from .climate import (
    Advisory,
    AdvisoryType,
    ActionCode,
    ClimateSimulator,
    SimulationResult,
    EquipmentTotals,
    aggregate_equipment,
    generate_recommendations,
    compute_climate,
    plan_adjustments,
)

from .growth import (
    GrowthProjection,
    GrowthProjector,
    project_growth,
    stocking_density,
    consumption_targets,
    growth_stage,
)

__all__ = [
    # Version info
    "__version__",

    # Config
    "FANS",
    "HEATERS",
    "INLETS",
    "CLIMATE",
    "GROWTH",
    "CONSUMPTION",
    "AGE_TARGETS",
    "GROWTH_STAGES",
    "FCR_TARGETS",
    "TargetBand",
    "get_target_band",

    # Records
    "Enclosure",
    "Equipment",
    "EquipmentType",
    "Fan",
    "Heater",
    "Inlet",
    "WeatherSnapshot",
    "Flock",
    "equipment_from_dict",
    "equipment_list_from_dicts",

    # Climate
    "Advisory",
    "AdvisoryType",
    "ActionCode",
    "ClimateSimulator",
    "SimulationResult",
    "EquipmentTotals",
    "aggregate_equipment",
    "generate_recommendations",
    "compute_climate",
    "plan_adjustments",

    # Growth
    "GrowthProjection",
    "GrowthProjector",
    "project_growth",
    "stocking_density",
    "consumption_targets",
    "growth_stage",
]
