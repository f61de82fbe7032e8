"""Pydantic schemas for the city API - request input and resource output."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.application.dto.city_dto import CreateCityDTO
from app.domain.entities.city import UNSET, City, CityPatch
from app.domain.value_objects.coordinate import Coordinate


class CoordinateSchema(BaseModel):
    """Coordinate schema."""
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)

    def to_domain(self) -> Coordinate:
        return Coordinate(longitude=self.longitude, latitude=self.latitude)

    @classmethod
    def from_domain(cls, coordinate: Coordinate) -> "CoordinateSchema":
        return cls(longitude=coordinate.longitude, latitude=coordinate.latitude)


class CreateCitySchema(BaseModel):
    """Body of POST /cities."""
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: Optional[str] = None
    location: CoordinateSchema

    def to_dto(self) -> CreateCityDTO:
        return CreateCityDTO(
            id=self.id,
            name=self.name,
            description=self.description,
            location=self.location.to_domain(),
        )


class UpdateCitySchema(BaseModel):
    """Body of PUT /cities/{id}.

    Missing keys and explicit nulls both mean "keep the stored value".
    """
    name: Optional[str] = None
    description: Optional[str] = None
    location: Optional[CoordinateSchema] = None

    def to_patch(self) -> CityPatch:
        return CityPatch(
            name=UNSET if self.name is None else self.name,
            description=UNSET if self.description is None else self.description,
            location=UNSET if self.location is None else self.location.to_domain(),
        )


class LinkSchema(BaseModel):
    """Hypermedia link."""
    rel: str
    href: str


class CityResourceSchema(BaseModel):
    """City resource with short field aliases."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = Field(default=None, alias="desc")
    location: CoordinateSchema = Field(alias="loc")
    links: List[LinkSchema] = []

    @classmethod
    def from_domain(cls, city: City, self_href: Optional[str] = None) -> "CityResourceSchema":
        links = [LinkSchema(rel="self", href=self_href)] if self_href else []
        return cls(
            id=city.id,
            name=city.name,
            description=city.description,
            location=CoordinateSchema.from_domain(city.location),
            links=links,
        )


class CityCollectionSchema(BaseModel):
    """Collection of city resources."""
    links: List[LinkSchema] = []
    content: List[CityResourceSchema] = []
