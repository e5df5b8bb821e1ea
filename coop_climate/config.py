"""
Coop Climate — Configuration
Equipment constants, age-keyed climate targets, and growth reference values.
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class FanConfig:
    """Exhaust fan constants."""
    airflow_factor: float = 0.85     # m³/min per cm diameter per % speed
    power_factor: float = 0.02       # kW per cm diameter per % speed
    minutes_per_hour: int = 60       # For m³/h readouts


@dataclass
class HeaterConfig:
    """Space heater constants."""
    efficiency_factor: float = 0.8   # Heating efficiency
    temperature_rise: float = 0.5    # °C per kW per 100 m³


@dataclass
class InletConfig:
    """Air inlet constants."""
    velocity_factor: float = 2.5     # m/s per % opening
    cooling_factor: float = 0.1      # °C reduction per m/s velocity


@dataclass
class ClimateConfig:
    """Parameters of the indoor climate model and advisory rules."""

    # Simulation
    default_flock_age: int = 18           # days, when the caller gives none
    fan_cooling_coefficient: float = 0.001
    wind_ventilation_factor: float = 0.1
    kelvin_offset: float = 273.15

    # Relative humidity bounds after warming
    humidity_min: float = 30.0
    humidity_max: float = 100.0

    # Advisory thresholds
    humidity_low_tolerance: float = 10.0   # % below band target
    humidity_high_tolerance: float = 15.0  # % above band target
    energy_heating_threshold_kw: float = 10.0
    critical_deficit_c: float = 2.0        # °C below band minimum with no heat

    # Output precision
    climate_decimals: int = 1


@dataclass
class GrowthConfig:
    """Broiler growth and feed-conversion reference values."""

    # Daily gain: max(floor, base - age * decline)
    base_growth_g_per_day: float = 50.0
    growth_decline_per_day: float = 0.8
    min_growth_g_per_day: float = 10.0

    # Growth penalty when temperature is outside the band
    temperature_stress_factor: float = 0.85

    # Standard weight curve: hatch + linear * age + curve * age^exponent
    hatch_weight_g: float = 40.0
    linear_gain_g_per_day: float = 20.0
    curve_coefficient: float = 2.0
    curve_exponent: float = 1.5

    # Feed conversion ratio
    base_fcr: float = 1.2
    fcr_increase_per_day: float = 0.01
    fcr_stress_penalty: float = 0.2

    projection_days: tuple = (7, 14)


@dataclass(frozen=True)
class TargetBand:
    """Acceptable climate for one age bucket."""
    temp_min: float
    temp_max: float
    humidity: float
    ventilation: float  # % minimum ventilation

    def contains(self, temp: float) -> bool:
        return self.temp_min <= temp <= self.temp_max


# Age bucket (days) -> target band
AGE_TARGETS: Dict[int, TargetBand] = {
    0: TargetBand(temp_min=32, temp_max=35, humidity=60, ventilation=20),
    7: TargetBand(temp_min=29, temp_max=32, humidity=60, ventilation=25),
    14: TargetBand(temp_min=27, temp_max=30, humidity=65, ventilation=30),
    21: TargetBand(temp_min=24, temp_max=27, humidity=65, ventilation=35),
    28: TargetBand(temp_min=21, temp_max=24, humidity=70, ventilation=40),
    35: TargetBand(temp_min=18, temp_max=21, humidity=70, ventilation=45),
}

# Stage start day -> stage name
GROWTH_STAGES: Dict[int, str] = {
    0: "Brooding",
    14: "Starter",
    28: "Grower",
    42: "Finisher",
}


@dataclass
class ConsumptionConfig:
    """Feed and water targets per 1000 birds, by age bucket."""
    feed_kg_per_1000: Dict[int, float] = field(default_factory=lambda: {
        0: 20,
        7: 35,
        14: 55,
        21: 80,
        28: 110,
        35: 150,
    })
    water_l_per_1000: Dict[int, float] = field(default_factory=lambda: {
        0: 50,
        7: 85,
        14: 140,
        21: 200,
        28: 280,
        35: 380,
    })


# Age (days) -> target feed conversion ratio
FCR_TARGETS: Dict[int, float] = {
    14: 1.2,
    21: 1.35,
    28: 1.5,
    35: 1.65,
    42: 1.8,
}


# Default configurations
FANS = FanConfig()
HEATERS = HeaterConfig()
INLETS = InletConfig()
CLIMATE = ClimateConfig()
GROWTH = GrowthConfig()
CONSUMPTION = ConsumptionConfig()


def get_target_band(age: float) -> TargetBand:
    """Look up the target band for a flock age (days)."""
    import math
    bucket = math.floor(age / 7) * 7
    return AGE_TARGETS.get(bucket, AGE_TARGETS[35])
