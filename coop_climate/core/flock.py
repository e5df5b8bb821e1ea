"""
Coop Climate — Flock
Broiler batch state as recorded by the farm.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Flock:
    """A batch of birds housed together."""
    current_age: float          # days
    average_weight: float       # grams
    chick_count: int = 0
    initial_chick_count: int = 0
    name: str = ""

    @property
    def survival_rate(self) -> float:
        """Percentage of the placed chicks still alive."""
        if self.initial_chick_count <= 0:
            return 100.0
        return self.chick_count / self.initial_chick_count * 100

    @property
    def mortality_rate(self) -> float:
        return 100.0 - self.survival_rate

    @property
    def losses(self) -> int:
        return max(0, self.initial_chick_count - self.chick_count)

    @classmethod
    def from_dict(cls, data: Dict) -> "Flock":
        chick_count = int(data.get("chickCount") or 0)
        return cls(
            current_age=data["currentAge"],
            average_weight=float(data["averageWeight"]),
            chick_count=chick_count,
            initial_chick_count=int(data.get("initialChickCount") or chick_count),
            name=data.get("name", ""),
        )

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "currentAge": self.current_age,
            "averageWeight": self.average_weight,
            "chickCount": self.chick_count,
            "initialChickCount": self.initial_chick_count,
            "survivalRate": self.survival_rate,
            "mortalityRate": self.mortality_rate,
        }
