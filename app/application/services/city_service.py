"""City service - orchestrates repository calls for city records.
Holds no state between calls; every mutation runs in one unit of work."""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from app.application.dto.city_dto import CreateCityDTO
from app.domain.entities.city import City, CityPatch
from app.domain.repositories.city_repository import CityRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Naive UTC timestamp, the form stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CityService:
    """Create, read, merge-update and delete city records.

    Follows Dependency Inversion Principle - depends on the repository abstraction.
    """

    def __init__(
        self,
        repository: CityRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._repo = repository
        self._clock = clock

    async def retrieve(self, city_id: str) -> Optional[City]:
        """Get a city by ID.

        Args:
            city_id: City identifier

        Returns:
            City if found, None otherwise
        """
        logger.debug(f"Retrieving city: {city_id}")
        return await self._repo.get(city_id)

    async def retrieve_all(self) -> List[City]:
        """Get every stored city."""
        logger.debug("Retrieving cities")
        return await self._repo.list_all()

    async def create(self, dto: CreateCityDTO) -> City:
        """Validate and persist a new city.

        An existing record with the same ID is overwritten, matching the
        store's upsert contract.

        Raises:
            CityValidationError: empty id/name or malformed location
        """
        logger.debug(f"Adding city: {dto}")
        dto.validate()

        city = City.new(
            city_id=dto.id,
            name=dto.name,
            description=dto.description,
            location=dto.location,
            now=self._clock(),
        )
        with self._repo.transaction():
            if await self._repo.get(city.id) is not None:
                logger.warning(f"City {city.id} already exists, overwriting")
            return await self._repo.save(city)

    async def update(self, city_id: str, patch: CityPatch) -> Optional[City]:
        """Merge ``patch`` into the stored city.

        Args:
            city_id: City identifier
            patch: Fields to replace; UNSET fields keep their stored value

        Returns:
            Updated city, or None if no city has this ID (nothing is written)
        """
        logger.debug(f"Updating city: {city_id} with data: {patch}")

        with self._repo.transaction():
            current = await self._repo.get(city_id)
            if current is None:
                return None
            return await self._repo.save(current.merge(patch, self._clock()))

    async def delete(self, city_id: str) -> None:
        """Delete a city; a missing ID is not an error."""
        logger.debug(f"Deleting city with id: {city_id}")
        with self._repo.transaction():
            await self._repo.delete_by_id(city_id)
