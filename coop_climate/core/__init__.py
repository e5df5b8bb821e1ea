"""
Coop Climate — Core Package
House geometry, equipment inventory, weather and flock records.
"""

from .enclosure import Enclosure
from .equipment import (
    Equipment,
    EquipmentType,
    Fan,
    Heater,
    Inlet,
    equipment_from_dict,
    equipment_list_from_dicts,
)
from .weather import WeatherSnapshot
from .flock import Flock
from .rounding import round_half_up

__all__ = [
    # Geometry
    "Enclosure",

    # Equipment
    "Equipment",
    "EquipmentType",
    "Fan",
    "Heater",
    "Inlet",
    "equipment_from_dict",
    "equipment_list_from_dicts",

    # Conditions
    "WeatherSnapshot",
    "Flock",

    "round_half_up",
]
