import logging
from datetime import date

from sqlalchemy import and_
from sqlalchemy.orm import Session, selectinload

from concert_catalog.entities.concert import Concert
from concert_catalog.entities.location import Location
from concert_catalog.entities.occurrence import ConcertOccurrence
from concert_catalog.dto.concert import ConcertCreate, ConcertUpdate, OccurrenceCreate
from concert_catalog.repositories.base import BaseRepository, ensure_exists
from concert_catalog.utils.query import contains, parse_sort

logger = logging.getLogger(__name__)


class ConcertRepository(BaseRepository[Concert, ConcertCreate, ConcertUpdate]):
    sortable = {
        "name": Concert.name,
        "year": Concert.year,
    }

    def __init__(self):
        super().__init__(Concert)

    def _with_occurrences(self, db: Session):
        return db.query(self.model).options(
            selectinload(self.model.occurrences).selectinload(ConcertOccurrence.location)
        )

    async def get(self, db: Session, id: int) -> Concert | None:
        return self._with_occurrences(db).filter(self.model.id == id).first()

    def search(
        self,
        db: Session,
        name: str | None = None,
        year: int | None = None,
        type: str | None = None,
        status: str | None = None,
        source: str | None = None,
        location_name: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        sort: str | None = None,
    ) -> list[Concert]:
        query = self._with_occurrences(db)

        if name:
            query = query.filter(contains(self.model.name, name))
        if year is not None:
            query = query.filter(self.model.year == year)
        if type:
            query = query.filter(self.model.type == type)
        if status:
            query = query.filter(self.model.status == status)
        if source:
            query = query.filter(self.model.source == source)
        if location_name:
            query = query.filter(self.model.occurrences.any(
                ConcertOccurrence.location.has(contains(Location.name, location_name))
            ))
        if date_from is not None or date_to is not None:
            # Both bounds apply to the same occurrence row
            bounds = []
            if date_from is not None:
                bounds.append(ConcertOccurrence.date >= date_from)
            if date_to is not None:
                bounds.append(ConcertOccurrence.date <= date_to)
            query = query.filter(self.model.occurrences.any(and_(*bounds)))

        order = parse_sort(sort, self.sortable)
        if order is None:
            order = self.model.year.desc()
        return query.order_by(order, self.model.id.asc()).all()

    async def create(self, db: Session, obj_in: ConcertCreate) -> Concert:
        ensure_exists(db, {"location_id": (Location, obj_in.location_id)})

        db_obj = self.model(**obj_in.model_dump(exclude={'location_id', 'date'}))
        db_obj.occurrences.append(
            ConcertOccurrence(location_id=obj_in.location_id, date=obj_in.date)
        )
        db.add(db_obj)
        db.commit()
        logger.info(f"Concert {db_obj.id} created with occurrence at location {obj_in.location_id}")
        return await self.get(db, db_obj.id)

    async def update(self, db: Session, id: int, obj_in: ConcertUpdate) -> Concert | None:
        concert = await super().update(db, id, obj_in)
        if not concert:
            return None
        return await self.get(db, id)

    async def add_occurrence(self, db: Session, concert: Concert, obj_in: OccurrenceCreate) -> Concert:
        ensure_exists(db, {"location_id": (Location, obj_in.location_id)})

        concert.occurrences.append(
            ConcertOccurrence(location_id=obj_in.location_id, date=obj_in.date)
        )
        db.commit()
        db.expire(concert)
        return await self.get(db, concert.id)

    async def remove_occurrence(self, db: Session, concert_id: int, occurrence_id: int) -> ConcertOccurrence | None:
        occurrence = db.query(ConcertOccurrence).filter(
            ConcertOccurrence.id == occurrence_id,
            ConcertOccurrence.concert_id == concert_id,
        ).first()
        if not occurrence:
            return None
        db.delete(occurrence)
        db.commit()
        return occurrence

concert_repository = ConcertRepository()
