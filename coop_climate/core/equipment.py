"""
Coop Climate — Equipment
Climate-control equipment inventory: fans, heaters and air inlets.

Each piece of equipment is one variant of a tagged union. The variant
carries its own specification field (fan diameter, heater power, inlet
surface); fields absent from a stored record default to 0.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional
from enum import Enum
import logging

from ..config import FANS, INLETS, FanConfig, InletConfig

logger = logging.getLogger(__name__)


class EquipmentType(Enum):
    """Equipment variants, valued by their record tag."""
    FAN = "fan"
    HEATER = "heater"
    INLET = "inlet"


@dataclass(frozen=True)
class Equipment:
    """Fields common to every equipment variant."""
    is_active: bool = False
    current_setting: float = 0.0   # % speed / output / opening, 0-100
    equipment_id: Optional[str] = None
    name: str = ""

    equipment_type = None  # Set by each variant

    @property
    def fraction(self) -> float:
        """Setting as a 0-1 fraction."""
        return self.current_setting / 100

    def with_setting(self, setting: float, is_active: Optional[bool] = None) -> "Equipment":
        """Copy with a new setting (and optionally a new active flag)."""
        active = self.is_active if is_active is None else is_active
        return replace(self, current_setting=setting, is_active=active)

    def specification(self) -> Dict[str, float]:
        raise NotImplementedError

    def to_dict(self) -> Dict:
        return {
            "id": self.equipment_id,
            "type": self.equipment_type.value,
            "name": self.name,
            "isActive": self.is_active,
            "currentSetting": self.current_setting,
            "specification": self.specification(),
        }


@dataclass(frozen=True)
class Fan(Equipment):
    """Exhaust fan, sized by blade diameter."""
    diameter: float = 0.0   # cm

    equipment_type = EquipmentType.FAN

    def cooling_capacity(self, config: FanConfig = FANS) -> float:
        """Airflow contribution (capacity units) at the current setting."""
        return self.diameter * config.airflow_factor * self.fraction

    def power_draw_kw(self, config: FanConfig = FANS) -> float:
        if not self.is_active:
            return 0.0
        return self.diameter * config.power_factor * self.fraction

    def airflow_m3_per_h(self, config: FanConfig = FANS) -> int:
        if not self.is_active:
            return 0
        return round(self.cooling_capacity(config) * config.minutes_per_hour)

    def specification(self) -> Dict[str, float]:
        return {"diameter": self.diameter}


@dataclass(frozen=True)
class Heater(Equipment):
    """Space heater, rated in kW."""
    power: float = 0.0   # kW

    equipment_type = EquipmentType.HEATER

    def heat_output_kw(self) -> float:
        """Output at the current setting, ignoring the active flag."""
        return self.power * self.fraction

    def current_output_kw(self) -> float:
        return self.heat_output_kw() if self.is_active else 0.0

    def specification(self) -> Dict[str, float]:
        return {"power": self.power}


@dataclass(frozen=True)
class Inlet(Equipment):
    """Wall air inlet. The setting is the opening percentage."""
    surface: float = 0.0   # m²

    equipment_type = EquipmentType.INLET

    def effective_area_m2(self) -> float:
        return self.surface * self.fraction

    def air_velocity(self, config: InletConfig = INLETS) -> float:
        """Air velocity through the opening (m/s)."""
        return self.current_setting * config.velocity_factor / 100

    def specification(self) -> Dict[str, float]:
        return {"surface": self.surface}


EQUIPMENT_CLASSES = {
    EquipmentType.FAN: (Fan, "diameter"),
    EquipmentType.HEATER: (Heater, "power"),
    EquipmentType.INLET: (Inlet, "surface"),
}


def equipment_from_dict(data: Dict) -> Equipment:
    """
    Build an equipment variant from an inventory record.

    Record shape: {id, type, name, isActive, currentSetting, specification}
    where specification is a sparse dict holding the variant's field.
    Missing or null values default to 0; an unknown type raises ValueError.
    """
    try:
        equipment_type = EquipmentType(data.get("type"))
    except ValueError:
        raise ValueError(f"Unknown equipment type: {data.get('type')!r}")

    cls, spec_field = EQUIPMENT_CLASSES[equipment_type]
    spec = data.get("specification") or {}

    extra = set(spec) - {spec_field}
    if extra:
        logger.debug(f"Ignoring specification keys {sorted(extra)} for {equipment_type.value}")

    return cls(
        is_active=bool(data.get("isActive") or False),
        current_setting=float(data.get("currentSetting") or 0),
        equipment_id=data.get("id"),
        name=data.get("name") or "",
        **{spec_field: float(spec.get(spec_field) or 0)},
    )


def equipment_list_from_dicts(records: List[Dict]) -> List[Equipment]:
    """Build a full inventory from records."""
    return [equipment_from_dict(record) for record in records]
