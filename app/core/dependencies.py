"""Dependency injection for FastAPI routes.
Follows Dependency Inversion Principle - routes depend on abstractions."""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from app.application.services.city_service import CityService
from app.config import settings
from app.domain.repositories.city_repository import CityRepository
from app.infrastructure.persistence.db import get_db
from app.infrastructure.persistence.repositories.in_memory_city_repository import (
    InMemoryCityRepository,
)
from app.infrastructure.persistence.repositories.sqlalchemy_city_repository import (
    SQLAlchemyCityRepository,
)


@lru_cache()
def get_in_memory_city_repository() -> InMemoryCityRepository:
    """Process-wide in-memory store, shared by every request."""
    return InMemoryCityRepository()


def get_city_repository(db: Session = Depends(get_db)) -> CityRepository:
    """Get city repository instance.

    - Default: SQLAlchemy repository bound to the request's session
    - If USE_DB_REPOS=false: in-memory repository (fast tests/dev)
    """
    if settings.USE_DB_REPOS:
        return SQLAlchemyCityRepository(db)
    return get_in_memory_city_repository()


def get_city_service(
    repository: CityRepository = Depends(get_city_repository),
) -> CityService:
    """Get city service wired to the request's repository."""
    return CityService(repository=repository)
