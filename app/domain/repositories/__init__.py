"""Repository interfaces."""
from app.domain.repositories.city_repository import CityRepository

__all__ = [
    "CityRepository",
]
