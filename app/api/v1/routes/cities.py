"""City API routes - thin layer delegating to the city service.
Follows Single Responsibility Principle - only handles HTTP concerns."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.api.v1.links import city_uri
from app.api.v1.representation import read_payload, render
from app.api.v1.schemas.city_schemas import (
    CityCollectionSchema,
    CityResourceSchema,
    CreateCitySchema,
    UpdateCitySchema,
)
from app.application.services.city_service import CityService
from app.core.dependencies import get_city_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cities"])


def _not_found(city_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"City '{city_id}' not found")


@router.get("", response_model=CityCollectionSchema)
async def retrieve_cities(
    request: Request,
    service: CityService = Depends(get_city_service),
):
    """List every city. Items carry no self link."""
    logger.debug("Retrieving cities")

    cities = await service.retrieve_all()
    collection = CityCollectionSchema(
        content=[CityResourceSchema.from_domain(city) for city in cities]
    )
    return render(request, collection)


@router.get("/{city_id:path}", response_model=CityResourceSchema)
async def retrieve_city(
    city_id: str,
    request: Request,
    service: CityService = Depends(get_city_service),
):
    """Get one city by ID."""
    logger.debug(f"Retrieving city: {city_id}")

    city = await service.retrieve(city_id)
    if city is None:
        raise _not_found(city_id)

    resource = CityResourceSchema.from_domain(city, city_uri(request.base_url, city.id))
    return render(request, resource)


@router.post("", response_model=CityResourceSchema, status_code=status.HTTP_201_CREATED)
async def add_city(
    request: Request,
    service: CityService = Depends(get_city_service),
):
    """
    Create a city from a JSON or XML body.

    The caller supplies the ID. Posting an existing ID overwrites that city.
    """
    logger.debug("Request to add a city")

    payload = CreateCitySchema.model_validate(await read_payload(request))
    city = await service.create(payload.to_dto())

    location = city_uri(request.base_url, city.id)
    resource = CityResourceSchema.from_domain(city, location)
    return render(
        request,
        resource,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": location},
    )


@router.put("/{city_id:path}", response_model=CityResourceSchema)
async def update_city(
    city_id: str,
    request: Request,
    service: CityService = Depends(get_city_service),
):
    """
    Merge the supplied fields into an existing city.

    Omitted or null fields keep their stored value.
    """
    logger.debug(f"Request to update city: {city_id}")

    payload = UpdateCitySchema.model_validate(await read_payload(request))
    city = await service.update(city_id, payload.to_patch())
    if city is None:
        raise _not_found(city_id)

    resource = CityResourceSchema.from_domain(city, city_uri(request.base_url, city.id))
    return render(request, resource)


@router.delete("/{city_id:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_city(
    city_id: str,
    service: CityService = Depends(get_city_service),
):
    """Delete a city. Always 204, whether or not it existed."""
    logger.debug(f"Request to delete city: {city_id}")

    await service.delete(city_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
