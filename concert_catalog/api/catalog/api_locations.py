from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from concert_catalog.utils.database import get_db
from concert_catalog.repositories.location_repository import location_repository
from concert_catalog.dto import location as location_schemas
from concert_catalog.entities.enums import LocationSource, LocationStatus
from concert_catalog.entities.country import Country
from concert_catalog.api.validation import validated_body
import logging

router = APIRouter(prefix="/locations", tags=["locations"])

logger = logging.getLogger(__name__)


@router.get("")
async def list_locations(
    search: str | None = None,
    name: str | None = None,
    city: str | None = None,
    country: str | None = None,
    status: LocationStatus | None = None,
    source: LocationSource | None = None,
    country_id: int | None = None,
    sort: str | None = None,
    db: Session = Depends(get_db),
):
    locations = location_repository.search(
        db,
        search=search,
        name=name,
        city=city,
        country=country,
        status=status.value if status else None,
        source=source.value if source else None,
        country_id=country_id,
        sort=sort,
    )
    return {"data": [location_schemas.Location.model_validate(location) for location in locations]}


@router.post("", response_model=location_schemas.Location, status_code=status.HTTP_201_CREATED)
async def create_location(
    location: location_schemas.LocationCreate = Depends(validated_body(location_schemas.LocationCreate, country_id=Country)),
    db: Session = Depends(get_db),
):
    result = await location_repository.create(db, location)
    logger.info(f"Location created with id {result.id}")
    return result


@router.get("/{location_id}", response_model=location_schemas.Location)
async def read_location(location_id: int, db: Session = Depends(get_db)):
    location = await location_repository.get(db, location_id)
    if not location:
        logger.error("Location not found")
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@router.put("/{location_id}", response_model=location_schemas.Location)
async def update_location(
    location_id: int,
    location: location_schemas.LocationUpdate = Depends(validated_body(location_schemas.LocationUpdate, country_id=Country)),
    db: Session = Depends(get_db),
):
    existing_location = await location_repository.get(db, location_id)
    if not existing_location:
        logger.error("Location not found for update")
        raise HTTPException(status_code=404, detail="Location not found")
    return await location_repository.update(db, location_id, location)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(location_id: int, db: Session = Depends(get_db)):
    deleted = await location_repository.delete(db, location_id)
    if not deleted:
        logger.error("Location not found for delete")
        raise HTTPException(status_code=404, detail="Location not found")
    logger.info(f"Location {location_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
