"""City repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import ContextManager, List, Optional

from app.domain.entities.city import City


class CityRepository(ABC):
    """Repository interface for City entity.

    Records are keyed by ``City.id``. ``save`` is an upsert, and
    ``delete_by_id`` on a missing id is a no-op.
    """

    @abstractmethod
    async def get(self, city_id: str) -> Optional[City]:
        """Get city by ID."""
        pass

    @abstractmethod
    async def list_all(self) -> List[City]:
        """List all cities."""
        pass

    @abstractmethod
    async def save(self, city: City) -> City:
        """Insert or overwrite the full record for ``city.id``."""
        pass

    @abstractmethod
    async def delete_by_id(self, city_id: str) -> None:
        """Delete city by ID if it exists."""
        pass

    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        """Unit of work: commit on exit, roll back and re-raise on error."""
        pass
