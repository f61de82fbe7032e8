"""Data Transfer Objects for city input."""
from dataclasses import dataclass
from typing import Optional

from app.domain.exceptions import CityValidationError
from app.domain.value_objects.coordinate import Coordinate


@dataclass
class CreateCityDTO:
    """Input for creating a city. The caller supplies the ID."""
    id: str
    name: str
    location: Coordinate
    description: Optional[str] = None

    def validate(self) -> None:
        """Raise CityValidationError on the first broken rule."""
        if not isinstance(self.id, str) or not self.id.strip():
            raise CityValidationError("id", "must not be empty", self.id)
        if not isinstance(self.name, str) or not self.name.strip():
            raise CityValidationError("name", "must not be empty", self.name)
        if not isinstance(self.location, Coordinate):
            raise CityValidationError("location", "must be a coordinate", self.location)
