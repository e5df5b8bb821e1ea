"""
Coop Climate — Husbandry Targets
Stocking density, daily feed/water targets, and growth stages.
"""

from dataclasses import dataclass
from typing import Dict
import math

from ..core.enclosure import Enclosure
from ..core.rounding import round_half_up
from ..config import CONSUMPTION, GROWTH_STAGES, ConsumptionConfig


@dataclass(frozen=True)
class ConsumptionTargets:
    """Daily flock targets."""
    feed_kg: float
    water_l: float

    def to_dict(self) -> Dict:
        return {"feed": self.feed_kg, "water": self.water_l}


def stocking_density(chick_count: int, enclosure: Enclosure) -> float:
    """Birds per m² of floor, 2 decimals."""
    return round_half_up(chick_count / enclosure.floor_area, 2)


def consumption_targets(
    chick_count: int,
    age: float,
    config: ConsumptionConfig = CONSUMPTION,
) -> ConsumptionTargets:
    """
    Daily feed (kg) and water (L) targets for the flock.

    Tables are per 1000 birds by 7-day age bucket; ages past the last
    bucket (or before the first) use the last bucket's values.
    """
    bucket = math.floor(age / 7) * 7
    last = max(config.feed_kg_per_1000)
    feed = config.feed_kg_per_1000.get(bucket, config.feed_kg_per_1000[last])
    water = config.water_l_per_1000.get(bucket, config.water_l_per_1000[last])
    return ConsumptionTargets(
        feed_kg=round_half_up(feed * chick_count / 1000, 2),
        water_l=round_half_up(water * chick_count / 1000, 2),
    )


def growth_stage(age: float) -> str:
    """Name of the production stage the flock is in."""
    stage = GROWTH_STAGES[min(GROWTH_STAGES)]
    for start in sorted(GROWTH_STAGES):
        if age >= start:
            stage = GROWTH_STAGES[start]
    return stage
