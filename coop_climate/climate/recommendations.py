"""
Coop Climate — Recommendation Generator
Classifies a simulated indoor climate against the flock's age band.

Rules are evaluated in a fixed order and each rule is an independent
predicate paired with the advisory it produces. Exactly one of the three
temperature rules fires; any subset of the others may fire alongside it.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence
from enum import Enum
import logging

from ..core.equipment import Equipment, EquipmentType
from ..config import CLIMATE, ClimateConfig, TargetBand, get_target_band
from .aggregator import count_active

logger = logging.getLogger(__name__)


class AdvisoryType(Enum):
    """Severity class of an advisory."""
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class ActionCode(Enum):
    """Machine-readable advisory codes."""
    TEMPERATURE_LOW = "temperature_low"
    TEMPERATURE_HIGH = "temperature_high"
    TEMPERATURE_GOOD = "temperature_good"
    HUMIDITY_LOW = "humidity_low"
    HUMIDITY_HIGH = "humidity_high"
    OPTIMIZE_ENERGY = "optimize_energy"
    OPTIMIZE_FANS = "optimize_fans"
    ACTIVATE_HEATING = "activate_heating"


TEMPERATURE_ACTIONS = (
    ActionCode.TEMPERATURE_LOW,
    ActionCode.TEMPERATURE_HIGH,
    ActionCode.TEMPERATURE_GOOD,
)


@dataclass(frozen=True)
class Advisory:
    """A single recommendation."""
    type: AdvisoryType
    title: str
    message: str
    action: ActionCode

    def to_dict(self) -> Dict:
        return {
            "type": self.type.value,
            "title": self.title,
            "message": self.message,
            "action": self.action.value,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Advisory":
        return cls(
            type=AdvisoryType(data["type"]),
            title=data.get("title", ""),
            message=data.get("message", ""),
            action=ActionCode(data["action"]),
        )


@dataclass(frozen=True)
class ClimateReading:
    """Everything a rule may look at."""
    inside_temp: float
    inside_humidity: float
    age: float
    total_heating: float
    active_fans: int
    active_heaters: int
    band: TargetBand
    config: ClimateConfig


@dataclass(frozen=True)
class AdvisoryRule:
    """One predicate/advisory pair."""
    action: ActionCode
    applies: Callable[[ClimateReading], bool]
    build: Callable[[ClimateReading], Advisory]


def _band_text(band: TargetBand) -> str:
    return f"{band.temp_min:g}-{band.temp_max:g}°C"


def _temperature_low(r: ClimateReading) -> Advisory:
    diff = r.band.temp_min - r.inside_temp
    return Advisory(
        type=AdvisoryType.WARNING,
        title="Temperature Below Target",
        message=(f"Inside temperature {r.inside_temp:.1f}°C is {diff:.1f}°C below target range "
                 f"({_band_text(r.band)}). Consider increasing heater output or reducing ventilation."),
        action=ActionCode.TEMPERATURE_LOW,
    )


def _temperature_high(r: ClimateReading) -> Advisory:
    diff = r.inside_temp - r.band.temp_max
    return Advisory(
        type=AdvisoryType.WARNING,
        title="Temperature Above Target",
        message=(f"Inside temperature {r.inside_temp:.1f}°C is {diff:.1f}°C above target range "
                 f"({_band_text(r.band)}). Consider increasing fan speed or opening inlets."),
        action=ActionCode.TEMPERATURE_HIGH,
    )


def _temperature_good(r: ClimateReading) -> Advisory:
    return Advisory(
        type=AdvisoryType.SUCCESS,
        title="Temperature Optimal",
        message=(f"Inside temperature {r.inside_temp:.1f}°C is within the optimal range "
                 f"for {r.age:g}-day-old chicks."),
        action=ActionCode.TEMPERATURE_GOOD,
    )


def _humidity_low(r: ClimateReading) -> Advisory:
    return Advisory(
        type=AdvisoryType.INFO,
        title="Humidity Low",
        message=(f"Humidity {r.inside_humidity:.1f}% is below optimal range. "
                 "Consider adding water sources or reducing ventilation."),
        action=ActionCode.HUMIDITY_LOW,
    )


def _humidity_high(r: ClimateReading) -> Advisory:
    return Advisory(
        type=AdvisoryType.INFO,
        title="Humidity High",
        message=(f"Humidity {r.inside_humidity:.1f}% is above optimal range. "
                 "Increase ventilation to reduce moisture."),
        action=ActionCode.HUMIDITY_HIGH,
    )


def _optimize_energy(r: ClimateReading) -> Advisory:
    return Advisory(
        type=AdvisoryType.INFO,
        title="Energy Optimization",
        message="Reduce heater output by 15-20% to save energy while maintaining optimal temperature.",
        action=ActionCode.OPTIMIZE_ENERGY,
    )


def _optimize_fans(r: ClimateReading) -> Advisory:
    return Advisory(
        type=AdvisoryType.INFO,
        title="Equipment Optimization",
        message="Consider running fewer fans at higher speed for better energy efficiency.",
        action=ActionCode.OPTIMIZE_FANS,
    )


def _activate_heating(r: ClimateReading) -> Advisory:
    return Advisory(
        type=AdvisoryType.WARNING,
        title="Heating Required",
        message="Temperature is critically low. Activate heaters immediately.",
        action=ActionCode.ACTIVATE_HEATING,
    )


# Evaluation order is presentation order
RULES: Sequence[AdvisoryRule] = (
    AdvisoryRule(
        ActionCode.TEMPERATURE_LOW,
        lambda r: r.inside_temp < r.band.temp_min,
        _temperature_low,
    ),
    AdvisoryRule(
        ActionCode.TEMPERATURE_HIGH,
        lambda r: r.inside_temp > r.band.temp_max,
        _temperature_high,
    ),
    AdvisoryRule(
        ActionCode.TEMPERATURE_GOOD,
        lambda r: r.band.contains(r.inside_temp),
        _temperature_good,
    ),
    AdvisoryRule(
        ActionCode.HUMIDITY_LOW,
        lambda r: r.inside_humidity < r.band.humidity - r.config.humidity_low_tolerance,
        _humidity_low,
    ),
    AdvisoryRule(
        ActionCode.HUMIDITY_HIGH,
        lambda r: r.inside_humidity > r.band.humidity + r.config.humidity_high_tolerance,
        _humidity_high,
    ),
    AdvisoryRule(
        ActionCode.OPTIMIZE_ENERGY,
        lambda r: (r.total_heating > r.config.energy_heating_threshold_kw
                   and r.inside_temp > r.band.temp_max),
        _optimize_energy,
    ),
    AdvisoryRule(
        ActionCode.OPTIMIZE_FANS,
        lambda r: r.active_fans > 1 and r.band.contains(r.inside_temp),
        _optimize_fans,
    ),
    AdvisoryRule(
        ActionCode.ACTIVATE_HEATING,
        lambda r: (r.active_heaters == 0
                   and r.inside_temp < r.band.temp_min - r.config.critical_deficit_c),
        _activate_heating,
    ),
)


def generate_recommendations(
    inside_temp: float,
    inside_humidity: float,
    age: float,
    total_heating: float,
    equipment: Iterable[Equipment],
    config: ClimateConfig = CLIMATE,
    rules: Sequence[AdvisoryRule] = RULES,
) -> List[Advisory]:
    """
    Evaluate the advisory rules for a simulated climate.

    Args:
        inside_temp: Simulated inside temperature (°C, unrounded)
        inside_humidity: Simulated relative humidity (%)
        age: Flock age in days, selects the target band
        total_heating: Active heater output (kW)
        equipment: Inventory, used for active fan/heater counts

    Returns:
        Advisories in rule order
    """
    equipment = list(equipment)
    reading = ClimateReading(
        inside_temp=inside_temp,
        inside_humidity=inside_humidity,
        age=age,
        total_heating=total_heating,
        active_fans=count_active(equipment, EquipmentType.FAN),
        active_heaters=count_active(equipment, EquipmentType.HEATER),
        band=get_target_band(age),
        config=config,
    )

    advisories = [rule.build(reading) for rule in rules if rule.applies(reading)]

    if has_action(advisories, ActionCode.ACTIVATE_HEATING):
        logger.warning(f"Critically low temperature {inside_temp:.1f}°C with no active heaters")

    logger.debug(f"Age {age}: {len(advisories)} advisories "
                 f"({', '.join(a.action.value for a in advisories)})")
    return advisories


def has_action(advisories: Iterable[Advisory], action: ActionCode) -> bool:
    """Check whether an advisory with the given code is present."""
    return any(a.action is action for a in advisories)
