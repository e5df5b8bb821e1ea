"""
Coop Climate — Equipment Aggregator
Reduces the equipment inventory to the scalars the climate model needs.
"""

from dataclasses import dataclass
from typing import Dict, Iterable
import logging

from ..core.equipment import Equipment, EquipmentType
from ..config import FANS, INLETS, CLIMATE, FanConfig, InletConfig, ClimateConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EquipmentTotals:
    """Combined effect of the equipment inventory."""
    total_heating: float = 0.0        # kW delivered by active heaters
    total_cooling: float = 0.0        # Fan capacity units from active fans
    active_fans: int = 0
    active_heaters: int = 0
    inlet_count: int = 0
    fan_power_kw: float = 0.0         # Electrical draw of active fans
    inlet_area_m2: float = 0.0        # Open inlet area

    def to_dict(self) -> Dict:
        return {
            "totalHeating": self.total_heating,
            "totalCooling": self.total_cooling,
            "activeFans": self.active_fans,
            "activeHeaters": self.active_heaters,
            "inletCount": self.inlet_count,
            "fanPowerKw": self.fan_power_kw,
            "inletAreaM2": self.inlet_area_m2,
        }


def aggregate_equipment(
    equipment: Iterable[Equipment],
    fan_config: FanConfig = FANS,
) -> EquipmentTotals:
    """
    Sum heating and cooling over the inventory.

    Heaters and fans only count while active. Inlets are counted here for
    reporting; their cooling depends on wind and is computed by
    ventilation_effect().
    """
    total_heating = 0.0
    total_cooling = 0.0
    fan_power = 0.0
    inlet_area = 0.0
    active_fans = 0
    active_heaters = 0
    inlet_count = 0

    for item in equipment:
        kind = item.equipment_type
        if kind is EquipmentType.HEATER:
            if item.is_active:
                total_heating += item.heat_output_kw()
                active_heaters += 1
        elif kind is EquipmentType.FAN:
            if item.is_active:
                total_cooling += item.cooling_capacity(fan_config)
                fan_power += item.power_draw_kw(fan_config)
                active_fans += 1
        elif kind is EquipmentType.INLET:
            inlet_area += item.effective_area_m2()
            inlet_count += 1
        else:
            raise TypeError(f"Not an equipment variant: {item!r}")

    return EquipmentTotals(
        total_heating=total_heating,
        total_cooling=total_cooling,
        active_fans=active_fans,
        active_heaters=active_heaters,
        inlet_count=inlet_count,
        fan_power_kw=fan_power,
        inlet_area_m2=inlet_area,
    )


def ventilation_effect(
    equipment: Iterable[Equipment],
    wind_speed: float,
    inlet_config: InletConfig = INLETS,
    climate_config: ClimateConfig = CLIMATE,
) -> float:
    """
    Temperature drop (°C) from wind-driven air through the inlets.

    Every inlet contributes according to its opening, whether or not it is
    flagged active.
    """
    total = 0.0
    for item in equipment:
        if item.equipment_type is not EquipmentType.INLET:
            continue
        velocity = item.surface * inlet_config.velocity_factor / 100 * item.current_setting
        total += (velocity * inlet_config.cooling_factor
                  * wind_speed * climate_config.wind_ventilation_factor)
    return total


def count_active(equipment: Iterable[Equipment], kind: EquipmentType) -> int:
    """Number of active items of one variant."""
    return sum(1 for item in equipment if item.equipment_type is kind and item.is_active)
