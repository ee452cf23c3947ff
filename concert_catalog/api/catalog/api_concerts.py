from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from concert_catalog.utils.database import get_db
from concert_catalog.repositories.concert_repository import concert_repository
from concert_catalog.dto import concert as concert_schemas
from concert_catalog.entities.enums import ConcertSource, ConcertStatus, ConcertType
from concert_catalog.entities.location import Location
from concert_catalog.api.validation import validated_body
import logging

router = APIRouter(prefix="/concerts", tags=["concerts"])

logger = logging.getLogger(__name__)


def _serialize(concert) -> concert_schemas.Concert:
    return concert_schemas.Concert.model_validate(concert)


@router.get("")
async def list_concerts(
    name: str | None = None,
    year: int | None = None,
    type: ConcertType | None = None,
    status: ConcertStatus | None = None,
    source: ConcertSource | None = None,
    location_name: str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    from_date: date | None = None,
    to_date: date | None = None,
    sort: str | None = None,
    db: Session = Depends(get_db),
):
    concerts = concert_repository.search(
        db,
        name=name,
        year=year,
        type=type.value if type else None,
        status=status.value if status else None,
        source=source.value if source else None,
        location_name=location_name,
        date_from=date_from or from_date,
        date_to=date_to or to_date,
        sort=sort,
    )
    return {"data": [_serialize(concert) for concert in concerts]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_concert(
    concert: concert_schemas.ConcertCreate = Depends(validated_body(concert_schemas.ConcertCreate, location_id=Location)),
    db: Session = Depends(get_db),
):
    result = await concert_repository.create(db, concert)
    logger.info(f"Concert created with id {result.id}")
    return {"message": "Concert created successfully", "data": _serialize(result)}


@router.get("/{concert_id}")
async def read_concert(concert_id: int, db: Session = Depends(get_db)):
    concert = await concert_repository.get(db, concert_id)
    if not concert:
        logger.error("Concert not found")
        raise HTTPException(status_code=404, detail="Concert not found")
    return _serialize(concert)


@router.put("/{concert_id}")
async def update_concert(concert_id: int, concert: concert_schemas.ConcertUpdate, db: Session = Depends(get_db)):
    updated_concert = await concert_repository.update(db, concert_id, concert)
    if not updated_concert:
        logger.error("Concert not found for update")
        raise HTTPException(status_code=404, detail="Concert not found")
    return _serialize(updated_concert)


@router.delete("/{concert_id}")
async def delete_concert(concert_id: int, db: Session = Depends(get_db)):
    deleted = await concert_repository.delete(db, concert_id)
    if not deleted:
        logger.error("Concert not found for delete")
        raise HTTPException(status_code=404, detail="Concert not found")
    logger.info(f"Concert {concert_id} deleted")
    return {"message": "Concert successfully deleted"}


@router.post("/{concert_id}/occurrences", status_code=status.HTTP_201_CREATED)
async def add_occurrence(
    concert_id: int,
    occurrence: concert_schemas.OccurrenceCreate = Depends(validated_body(concert_schemas.OccurrenceCreate, location_id=Location)),
    db: Session = Depends(get_db),
):
    concert = await concert_repository.get(db, concert_id)
    if not concert:
        raise HTTPException(status_code=404, detail="Concert not found")
    concert = await concert_repository.add_occurrence(db, concert, occurrence)
    return _serialize(concert)


@router.delete("/{concert_id}/occurrences/{occurrence_id}")
async def remove_occurrence(concert_id: int, occurrence_id: int, db: Session = Depends(get_db)):
    removed = await concert_repository.remove_occurrence(db, concert_id, occurrence_id)
    if not removed:
        raise HTTPException(status_code=404, detail="Occurrence not found")
    return {"message": "Occurrence successfully deleted"}
