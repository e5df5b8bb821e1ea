"""
Coop Climate — Growth Projector
Short-term weight and feed-conversion projections for a broiler flock.
"""

from dataclasses import dataclass
from typing import Dict, Iterable
import logging

from ..core.flock import Flock
from ..core.rounding import round_half_up
from ..config import GROWTH, GrowthConfig, FCR_TARGETS
from ..climate.recommendations import Advisory, ActionCode, has_action
from ..climate.simulator import SimulationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrowthProjection:
    """Projected growth for a flock under the current climate."""
    projected_weight_7d: float       # g
    projected_weight_14d: float      # g
    growth_rate_vs_standard: float   # % above (+) or below (-) the standard curve
    fcr: float                       # Feed conversion ratio
    environmental_factor: float      # 1.0 optimal, 0.85 temperature stress
    fcr_target: float = 0.0
    base_growth_rate: float = 0.0    # g/day before the environmental factor

    @property
    def fcr_vs_target(self) -> float:
        """Difference to the age target; positive means less efficient."""
        return round_half_up(self.fcr - self.fcr_target, 2)

    def to_dict(self) -> Dict:
        return {
            "projectedWeight7d": self.projected_weight_7d,
            "projectedWeight14d": self.projected_weight_14d,
            "growthRateVsStandard": self.growth_rate_vs_standard,
            "fcr": self.fcr,
            "environmentalFactor": self.environmental_factor,
            "fcrTarget": self.fcr_target,
            "fcrVsTarget": self.fcr_vs_target,
        }


def standard_weight(age: float, config: GrowthConfig = GROWTH) -> float:
    """Reference broiler body weight (g) at the given age in days."""
    return (config.hatch_weight_g
            + age * config.linear_gain_g_per_day
            + age ** config.curve_exponent * config.curve_coefficient)


def base_growth_rate(age: float, config: GrowthConfig = GROWTH) -> float:
    """Expected daily gain (g/day), declining with age to a floor."""
    return max(config.min_growth_g_per_day,
               config.base_growth_g_per_day - age * config.growth_decline_per_day)


def fcr_target(age: float) -> float:
    """Target feed conversion ratio for the age, from the nearest later breakpoint."""
    for breakpoint in sorted(FCR_TARGETS):
        if age <= breakpoint:
            return FCR_TARGETS[breakpoint]
    return FCR_TARGETS[max(FCR_TARGETS)]


class GrowthProjector:
    """Projects weight gain and FCR from the flock state and the climate."""

    def __init__(self, config: GrowthConfig = GROWTH):
        self.config = config

    def environmental_factor(self, recommendations: Iterable[Advisory]) -> float:
        if has_action(recommendations, ActionCode.TEMPERATURE_GOOD):
            return 1.0
        return self.config.temperature_stress_factor

    def project(self, flock: Flock, simulation: SimulationResult) -> GrowthProjection:
        """
        Project growth for the next two weeks.

        Only the presence of the temperature_good advisory in the simulation
        result matters; other advisories do not affect growth.
        """
        cfg = self.config
        age = flock.current_age
        optimal = has_action(simulation.recommendations, ActionCode.TEMPERATURE_GOOD)
        factor = self.environmental_factor(simulation.recommendations)

        daily_gain = base_growth_rate(age, cfg)
        week, fortnight = cfg.projection_days
        weight_7d = flock.average_weight + daily_gain * factor * week
        weight_14d = flock.average_weight + daily_gain * factor * fortnight

        vs_standard = (flock.average_weight / standard_weight(age, cfg) - 1) * 100
        fcr = cfg.base_fcr + age * cfg.fcr_increase_per_day + (0 if optimal else cfg.fcr_stress_penalty)

        projection = GrowthProjection(
            projected_weight_7d=round_half_up(weight_7d),
            projected_weight_14d=round_half_up(weight_14d),
            growth_rate_vs_standard=round_half_up(vs_standard, 1),
            fcr=round_half_up(fcr, 2),
            environmental_factor=round_half_up(factor, 2),
            fcr_target=fcr_target(age),
            base_growth_rate=daily_gain,
        )

        logger.debug(f"Flock age {age}d @ {flock.average_weight:.0f}g: "
                     f"7d {projection.projected_weight_7d:.0f}g, FCR {projection.fcr}")
        return projection


def project_growth(flock: Flock, simulation: SimulationResult) -> GrowthProjection:
    """Project growth with the default configuration."""
    return GrowthProjector().project(flock, simulation)
