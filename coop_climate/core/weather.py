"""
Coop Climate — Weather
Outside conditions supplied by the weather provider.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class WeatherSnapshot:
    """Outside conditions at one point in time."""
    outside_temp: float       # °C
    outside_humidity: float   # %
    wind_speed: float = 0.0   # Provider units, scaled by fixed factors

    @classmethod
    def from_dict(cls, data: Dict) -> "WeatherSnapshot":
        return cls(
            outside_temp=float(data["outsideTemp"]),
            outside_humidity=float(data["outsideHumidity"]),
            wind_speed=float(data.get("windSpeed") or 0),
        )

    def to_dict(self) -> Dict:
        return {
            "outsideTemp": self.outside_temp,
            "outsideHumidity": self.outside_humidity,
            "windSpeed": self.wind_speed,
        }
