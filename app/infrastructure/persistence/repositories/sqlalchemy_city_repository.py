"""SQLAlchemy implementation of CityRepository."""
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities.city import City as CityEntity
from app.domain.exceptions import StorageError
from app.domain.repositories.city_repository import CityRepository
from app.infrastructure.persistence import models
from app.infrastructure.persistence.converters import (
    coordinate_from_columns,
    coordinate_to_columns,
)

logger = logging.getLogger(__name__)


def _to_entity(row: models.City) -> CityEntity:
    """Map ORM model to domain entity."""
    return CityEntity(
        id=row.id,
        name=row.name,
        description=row.description,
        location=coordinate_from_columns(row.longitude, row.latitude),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_row(city: CityEntity) -> models.City:
    longitude, latitude = coordinate_to_columns(city.location)
    return models.City(
        id=city.id,
        name=city.name,
        description=city.description,
        longitude=longitude,
        latitude=latitude,
        created_at=city.created_at,
        updated_at=city.updated_at,
    )


class SQLAlchemyCityRepository(CityRepository):
    """City repository using SQLAlchemy.

    Statements only flush; ``transaction()`` owns commit and rollback.
    """

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def transaction(self) -> Iterator[None]:
        try:
            yield
            self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"City transaction failed, rolling back: {e}")
            self.session.rollback()
            raise StorageError("transaction", e) from e
        except Exception:
            self.session.rollback()
            raise

    async def get(self, city_id: str) -> Optional[CityEntity]:
        try:
            row = self.session.get(models.City, city_id)
        except SQLAlchemyError as e:
            raise StorageError("get", e) from e
        return _to_entity(row) if row else None

    async def list_all(self) -> List[CityEntity]:
        try:
            rows = self.session.query(models.City).order_by(models.City.id).all()
        except SQLAlchemyError as e:
            raise StorageError("list_all", e) from e
        return [_to_entity(r) for r in rows]

    async def save(self, city: CityEntity) -> CityEntity:
        try:
            row = self.session.merge(_to_row(city))
            self.session.flush()
        except SQLAlchemyError as e:
            raise StorageError("save", e) from e
        return _to_entity(row)

    async def delete_by_id(self, city_id: str) -> None:
        try:
            row = self.session.get(models.City, city_id)
            if row is not None:
                self.session.delete(row)
                self.session.flush()
        except SQLAlchemyError as e:
            raise StorageError("delete_by_id", e) from e
