"""In-memory implementation of CityRepository for testing.
Follows Liskov Substitution Principle - can replace any CityRepository."""
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from app.domain.entities.city import City
from app.domain.repositories.city_repository import CityRepository


class InMemoryCityRepository(CityRepository):
    """In-memory implementation for testing and local development.

    Entities are frozen, so storing and returning the same instances is safe.
    """

    def __init__(self):
        self._cities: Dict[str, City] = {}

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Restore the snapshot taken on entry if the block raises."""
        snapshot = dict(self._cities)
        try:
            yield
        except Exception:
            self._cities = snapshot
            raise

    async def get(self, city_id: str) -> Optional[City]:
        """Get city by ID."""
        return self._cities.get(city_id)

    async def list_all(self) -> List[City]:
        """List all cities ordered by ID."""
        return [self._cities[key] for key in sorted(self._cities)]

    async def save(self, city: City) -> City:
        """Insert or overwrite city."""
        if not city.is_valid():
            raise ValueError("Invalid city")
        self._cities[city.id] = city
        return city

    async def delete_by_id(self, city_id: str) -> None:
        """Delete city by ID if present."""
        self._cities.pop(city_id, None)
