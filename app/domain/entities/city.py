"""City domain entity - pure business logic."""
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional, Union

from app.domain.exceptions import CityValidationError
from app.domain.value_objects.coordinate import Coordinate


class _Unset:
    """Marker for a patch field that was not supplied."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


@dataclass(frozen=True)
class CityPatch:
    """Partial update of a city.

    Every field defaults to ``UNSET``. Only fields holding something other
    than ``UNSET`` are applied, so an empty description is a real value.
    """
    name: Union[str, _Unset] = UNSET
    description: Union[str, None, _Unset] = UNSET
    location: Union[Coordinate, _Unset] = UNSET

    def is_empty(self) -> bool:
        return all(
            value is UNSET for value in (self.name, self.description, self.location)
        )


@dataclass(frozen=True)
class City:
    """City domain entity."""
    id: str
    name: str
    location: Coordinate
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_valid(self) -> bool:
        """Validate city business rules."""
        return bool(
            self.id and
            self.id.strip() and
            self.name and
            self.name.strip()
        )

    @classmethod
    def new(
        cls,
        city_id: str,
        name: str,
        location: Coordinate,
        now: datetime,
        description: Optional[str] = None,
    ) -> "City":
        """Build a freshly created city with both timestamps set to ``now``."""
        return cls(
            id=city_id,
            name=name,
            description=description,
            location=location,
            created_at=now,
            updated_at=now,
        )

    def merge(self, patch: CityPatch, now: datetime) -> "City":
        """Apply ``patch`` field by field and stamp ``updated_at``.

        ``id`` and ``created_at`` are never touched. ``updated_at`` is
        refreshed even when the patch is empty and never moves backwards.
        """
        if patch.name is not UNSET and not (patch.name and patch.name.strip()):
            raise CityValidationError("name", "must not be empty", patch.name)

        updated_at = now
        if self.updated_at is not None and updated_at <= self.updated_at:
            updated_at = self.updated_at + timedelta(microseconds=1)

        return replace(
            self,
            name=self.name if patch.name is UNSET else patch.name,
            description=self.description if patch.description is UNSET else patch.description,
            location=self.location if patch.location is UNSET else patch.location,
            updated_at=updated_at,
        )
