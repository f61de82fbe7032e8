"""Coordinate value object - immutable and validated."""
import math
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Coordinate:
    """Immutable longitude/latitude pair embedded in a city."""
    longitude: float
    latitude: float

    def __post_init__(self):
        """Validate coordinate."""
        if not (math.isfinite(self.longitude) and math.isfinite(self.latitude)):
            raise ValueError(
                f"Coordinate must be finite, got ({self.longitude}, {self.latitude})"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.longitude}")
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")

    def to_dict(self) -> Dict[str, float]:
        """Convert to transport dictionary."""
        return {"longitude": self.longitude, "latitude": self.latitude}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinate":
        """Build from a transport dictionary."""
        return cls(longitude=float(data["longitude"]), latitude=float(data["latitude"]))
