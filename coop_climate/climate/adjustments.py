"""
Coop Climate — Adjustment Planner
Turns temperature advisories into proposed equipment changes.

The planner never touches the inventory it is given; it returns the
changes for the caller to review and persist.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional
import logging

from ..core.equipment import Equipment, EquipmentType
from .recommendations import Advisory, ActionCode

logger = logging.getLogger(__name__)

# Setting steps used when applying suggestions (% points)
HEATER_START_SETTING = 50.0
SETTING_STEP = 20.0
FAN_MIN_SETTING = 20.0
FAN_REDUCE_ABOVE = 50.0
FAN_INCREASE_BELOW = 80.0
HEATER_REDUCE_ABOVE = 30.0


@dataclass(frozen=True)
class EquipmentAdjustment:
    """A proposed change to one piece of equipment."""
    equipment: Equipment
    new_setting: float
    activate: bool
    reason: ActionCode

    @property
    def adjusted(self) -> Equipment:
        """The equipment as it would be after the change."""
        return self.equipment.with_setting(
            self.new_setting,
            is_active=True if self.activate else None,
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.equipment.equipment_id,
            "name": self.equipment.name,
            "type": self.equipment.equipment_type.value,
            "currentSetting": self.new_setting,
            "isActive": self.adjusted.is_active,
            "reason": self.reason.value,
        }


def _first(items: Iterable[Equipment]) -> Optional[Equipment]:
    return next(iter(items), None)


def _warm_up(equipment: List[Equipment]) -> Optional[EquipmentAdjustment]:
    """Start an idle heater, otherwise slow down a fast fan."""
    heater = _first(e for e in equipment
                    if e.equipment_type is EquipmentType.HEATER and not e.is_active)
    if heater is not None:
        return EquipmentAdjustment(heater, HEATER_START_SETTING, True, ActionCode.TEMPERATURE_LOW)

    fan = _first(e for e in equipment
                 if e.equipment_type is EquipmentType.FAN and e.is_active
                 and e.current_setting > FAN_REDUCE_ABOVE)
    if fan is not None:
        setting = max(FAN_MIN_SETTING, fan.current_setting - SETTING_STEP)
        return EquipmentAdjustment(fan, setting, False, ActionCode.TEMPERATURE_LOW)
    return None


def _cool_down(equipment: List[Equipment]) -> Optional[EquipmentAdjustment]:
    """Speed up (and start) a fan, otherwise turn down a heater."""
    fan = _first(e for e in equipment
                 if e.equipment_type is EquipmentType.FAN
                 and e.current_setting < FAN_INCREASE_BELOW)
    if fan is not None:
        setting = min(100.0, fan.current_setting + SETTING_STEP)
        return EquipmentAdjustment(fan, setting, True, ActionCode.TEMPERATURE_HIGH)

    heater = _first(e for e in equipment
                    if e.equipment_type is EquipmentType.HEATER and e.is_active
                    and e.current_setting > HEATER_REDUCE_ABOVE)
    if heater is not None:
        setting = max(0.0, heater.current_setting - SETTING_STEP)
        return EquipmentAdjustment(heater, setting, False, ActionCode.TEMPERATURE_HIGH)
    return None


def plan_adjustments(
    recommendations: Iterable[Advisory],
    equipment: Iterable[Equipment],
) -> List[EquipmentAdjustment]:
    """
    Propose equipment changes for the temperature advisories.

    At most one change is proposed per temperature advisory. Advisories
    other than temperature_low/temperature_high propose nothing.
    """
    equipment = list(equipment)
    adjustments = []

    for advisory in recommendations:
        if advisory.action is ActionCode.TEMPERATURE_LOW:
            adjustment = _warm_up(equipment)
        elif advisory.action is ActionCode.TEMPERATURE_HIGH:
            adjustment = _cool_down(equipment)
        else:
            continue

        if adjustment is None:
            logger.info(f"No equipment available to act on {advisory.action.value}")
            continue
        adjustments.append(adjustment)

    return adjustments


def apply_adjustments(
    equipment: Iterable[Equipment],
    adjustments: Iterable[EquipmentAdjustment],
) -> List[Equipment]:
    """Return a new inventory with the adjustments applied."""
    replaced = {id(a.equipment): a.adjusted for a in adjustments}
    return [replaced.get(id(item), item) for item in equipment]
