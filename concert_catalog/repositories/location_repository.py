from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from concert_catalog.entities.country import Country
from concert_catalog.entities.location import Location
from concert_catalog.dto.location import LocationCreate, LocationUpdate
from concert_catalog.repositories.base import BaseRepository, ensure_exists
from concert_catalog.utils.query import contains, parse_sort


class LocationRepository(BaseRepository[Location, LocationCreate, LocationUpdate]):
    sortable = {
        "name": Location.name,
        "city": Location.city,
        "created_at": Location.created_at,
    }

    def __init__(self):
        super().__init__(Location)

    async def get(self, db: Session, id: int) -> Location | None:
        return db.query(self.model).options(selectinload(self.model.country)).filter(
            self.model.id == id
        ).first()

    def search(
        self,
        db: Session,
        search: str | None = None,
        name: str | None = None,
        city: str | None = None,
        country: str | None = None,
        status: str | None = None,
        source: str | None = None,
        country_id: int | None = None,
        sort: str | None = None,
    ) -> list[Location]:
        query = db.query(self.model).options(selectinload(self.model.country))

        if search:
            query = query.filter(or_(
                contains(self.model.name, search),
                contains(self.model.city, search),
                self.model.country.has(contains(Country.name, search)),
            ))
        if name:
            query = query.filter(contains(self.model.name, name))
        if city:
            query = query.filter(contains(self.model.city, city))
        if country:
            query = query.filter(self.model.country.has(contains(Country.name, country)))
        if status:
            query = query.filter(self.model.status == status)
        if source:
            query = query.filter(self.model.source == source)
        if country_id is not None:
            query = query.filter(self.model.country_id == country_id)

        order = parse_sort(sort, self.sortable)
        if order is None:
            order = self.model.name.asc()
        return query.order_by(order, self.model.id.asc()).all()

    async def create(self, db: Session, obj_in: LocationCreate) -> Location:
        ensure_exists(db, {"country_id": (Country, obj_in.country_id)})
        db_obj = await super().create(db, obj_in)
        return await self.get(db, db_obj.id)

    async def update(self, db: Session, id: int, obj_in: LocationUpdate) -> Location | None:
        ensure_exists(db, {"country_id": (Country, obj_in.country_id)})
        location = await super().update(db, id, obj_in)
        if not location:
            return None
        return await self.get(db, id)

location_repository = LocationRepository()
