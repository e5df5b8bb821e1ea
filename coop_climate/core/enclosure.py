"""
Coop Climate — Enclosure
Static house geometry.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Enclosure:
    """
    Livestock house geometry in metres.

    Dimensions must be strictly positive; the climate model divides by the
    volume and does not check it.
    """
    length: float
    width: float
    height: float

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height

    @property
    def surface_area(self) -> float:
        """Total inner surface (walls, floor and ceiling)."""
        return 2 * (self.length * self.width
                    + self.length * self.height
                    + self.width * self.height)

    @property
    def floor_area(self) -> float:
        return self.length * self.width

    @classmethod
    def from_dict(cls, data: Dict) -> "Enclosure":
        """Build from a farm record ({length, width, height})."""
        return cls(
            length=float(data["length"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )

    def to_dict(self) -> Dict:
        return {
            "length": self.length,
            "width": self.width,
            "height": self.height,
            "volume": self.volume,
            "surfaceArea": self.surface_area,
        }
