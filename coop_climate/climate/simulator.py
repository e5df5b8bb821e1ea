"""
Coop Climate — Climate Simulator
Steady-state estimate of inside temperature and humidity.

The model starts from the outside temperature and applies, in order,
heater gain, fan cooling, and inlet ventilation. Relative humidity is
corrected only when the house ends up warmer than outside.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from ..core.enclosure import Enclosure
from ..core.equipment import Equipment
from ..core.weather import WeatherSnapshot
from ..core.rounding import round_half_up
from ..config import (
    FANS, HEATERS, INLETS, CLIMATE,
    FanConfig, HeaterConfig, InletConfig, ClimateConfig,
)
from .aggregator import EquipmentTotals, aggregate_equipment, ventilation_effect
from .recommendations import Advisory, ActionCode, generate_recommendations, has_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Simulated indoor climate and the advisories derived from it."""
    inside_temp: float            # °C, 1 decimal
    inside_humidity: float        # %, 1 decimal
    total_heating: float          # kW
    total_cooling: float          # Fan capacity units
    ventilation_effect: float     # °C, 1 decimal
    recommendations: List[Advisory] = field(default_factory=list)
    volume: float = 0.0           # m³
    surface_area: float = 0.0     # m², 1 decimal

    def has_action(self, action: ActionCode) -> bool:
        return has_action(self.recommendations, action)

    @property
    def temperature_optimal(self) -> bool:
        return self.has_action(ActionCode.TEMPERATURE_GOOD)

    def to_dict(self) -> Dict:
        """Flat record for the request/response layer."""
        return {
            "insideTemp": self.inside_temp,
            "insideHumidity": self.inside_humidity,
            "totalHeating": self.total_heating,
            "totalCooling": self.total_cooling,
            "ventilationEffect": self.ventilation_effect,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "volume": self.volume,
            "surfaceArea": self.surface_area,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "SimulationResult":
        return cls(
            inside_temp=data["insideTemp"],
            inside_humidity=data["insideHumidity"],
            total_heating=data.get("totalHeating", 0.0),
            total_cooling=data.get("totalCooling", 0.0),
            ventilation_effect=data.get("ventilationEffect", 0.0),
            recommendations=[Advisory.from_dict(r) for r in data.get("recommendations", [])],
            volume=data.get("volume", 0.0),
            surface_area=data.get("surfaceArea", 0.0),
        )


class ClimateSimulator:
    """
    Indoor climate model for a naturally and mechanically ventilated house.

    Holds only configuration; every call to simulate() is independent and
    gives identical output for identical input.
    """

    def __init__(
        self,
        climate: ClimateConfig = CLIMATE,
        fans: FanConfig = FANS,
        heaters: HeaterConfig = HEATERS,
        inlets: InletConfig = INLETS,
    ):
        self.climate = climate
        self.fans = fans
        self.heaters = heaters
        self.inlets = inlets

    def heating_gain(self, total_heating: float, volume: float) -> float:
        """Temperature rise (°C) from heater output spread over the volume."""
        return (total_heating * self.heaters.efficiency_factor
                * self.heaters.temperature_rise / (volume / 100))

    def fan_cooling(self, total_cooling: float, inside_temp: float,
                    outside_temp: float, volume: float) -> float:
        """
        Temperature drop (°C) from the fans.

        Fans exchange inside air for outside air, so they never pull the
        house below the outside temperature.
        """
        excess = inside_temp - outside_temp
        cooling = total_cooling * self.climate.fan_cooling_coefficient * max(excess, 0) / volume
        return min(cooling, excess)

    def adjust_humidity(self, outside_humidity: float, outside_temp: float,
                        inside_temp: float) -> float:
        """Relative humidity inside after warming outside air."""
        if inside_temp <= outside_temp:
            return outside_humidity
        k = self.climate.kelvin_offset
        humidity = outside_humidity * (outside_temp + k) / (inside_temp + k)
        return min(self.climate.humidity_max, max(self.climate.humidity_min, humidity))

    def simulate(
        self,
        enclosure: Enclosure,
        equipment: Iterable[Equipment],
        outside_temp: float,
        outside_humidity: float,
        wind_speed: float,
        flock_age: Optional[float] = None,
    ) -> SimulationResult:
        """
        Estimate the indoor climate.

        Args:
            enclosure: House geometry (volume must be > 0)
            equipment: Full inventory; inactive fans and heaters are ignored
            outside_temp: °C
            outside_humidity: %
            wind_speed: Provider wind speed
            flock_age: Days; the configured default when None

        Returns:
            SimulationResult with advisories for the flock's age band
        """
        equipment = list(equipment)
        if flock_age is None:
            flock_age = self.climate.default_flock_age

        volume = enclosure.volume
        totals: EquipmentTotals = aggregate_equipment(equipment, self.fans)

        inside_temp = outside_temp
        inside_temp += self.heating_gain(totals.total_heating, volume)
        inside_temp -= self.fan_cooling(totals.total_cooling, inside_temp, outside_temp, volume)

        ventilation = ventilation_effect(equipment, wind_speed, self.inlets, self.climate)
        inside_temp -= ventilation

        inside_humidity = self.adjust_humidity(outside_humidity, outside_temp, inside_temp)

        recommendations = generate_recommendations(
            inside_temp,
            inside_humidity,
            flock_age,
            totals.total_heating,
            equipment,
            self.climate,
        )

        decimals = self.climate.climate_decimals
        result = SimulationResult(
            inside_temp=round_half_up(inside_temp, decimals),
            inside_humidity=round_half_up(inside_humidity, decimals),
            total_heating=totals.total_heating,
            total_cooling=totals.total_cooling,
            ventilation_effect=round_half_up(ventilation, decimals),
            recommendations=recommendations,
            volume=volume,
            surface_area=round_half_up(enclosure.surface_area, decimals),
        )

        logger.debug(f"Simulated {volume:.0f} m³ house: outside {outside_temp:.1f}°C -> "
                     f"inside {result.inside_temp}°C, {result.inside_humidity}% RH")
        return result

    def simulate_weather(
        self,
        enclosure: Enclosure,
        equipment: Iterable[Equipment],
        weather: WeatherSnapshot,
        flock_age: Optional[float] = None,
    ) -> SimulationResult:
        """simulate() with the outside conditions taken from a snapshot."""
        return self.simulate(
            enclosure,
            equipment,
            weather.outside_temp,
            weather.outside_humidity,
            weather.wind_speed,
            flock_age,
        )

    def sweep_outside_temperature(
        self,
        enclosure: Enclosure,
        equipment: Iterable[Equipment],
        temperatures: Iterable[float],
        outside_humidity: float,
        wind_speed: float,
        flock_age: Optional[float] = None,
    ) -> List[Tuple[float, SimulationResult]]:
        """Simulate the same house and settings over a range of outside temperatures."""
        equipment = list(equipment)
        results = [
            (temp, self.simulate(enclosure, equipment, temp, outside_humidity, wind_speed, flock_age))
            for temp in temperatures
        ]
        optimal = sum(1 for _, r in results if r.temperature_optimal)
        logger.info(f"Temperature sweep: {optimal}/{len(results)} points within target band")
        return results


def compute_climate(
    enclosure: Enclosure,
    equipment: Iterable[Equipment],
    outside_temp: float,
    outside_humidity: float,
    wind_speed: float,
    flock_age: Optional[float] = None,
) -> SimulationResult:
    """Simulate the indoor climate with the default configuration."""
    return ClimateSimulator().simulate(
        enclosure, equipment, outside_temp, outside_humidity, wind_speed, flock_age
    )
