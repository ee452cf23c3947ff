from sqlalchemy.orm import Session, aliased, selectinload

from concert_catalog.entities.artist import Artist
from concert_catalog.entities.country import Country
from concert_catalog.dto.artist import ArtistCreate, ArtistUpdate
from concert_catalog.repositories.base import BaseRepository, ensure_exists
from concert_catalog.utils.query import contains, parse_sort

# Aliased so ordering on the joined country never collides with the artists columns
SortCountry = aliased(Country, name="sort_country")


class ArtistRepository(BaseRepository[Artist, ArtistCreate, ArtistUpdate]):
    sortable = {
        "name": Artist.name,
        "country.name": SortCountry.name,
    }

    def __init__(self):
        super().__init__(Artist)

    async def get(self, db: Session, id: int) -> Artist | None:
        return db.query(self.model).options(selectinload(self.model.country)).filter(
            self.model.id == id
        ).first()

    def search(
        self,
        db: Session,
        name: str | None = None,
        country_id: int | None = None,
        sort: str | None = None,
    ) -> list[Artist]:
        query = db.query(self.model).options(selectinload(self.model.country))

        if name:
            query = query.filter(contains(self.model.name, name))
        if country_id is not None:
            query = query.filter(self.model.country_id == country_id)

        order = parse_sort(sort, self.sortable)
        if order is None:
            order = self.model.name.asc()
        elif sort.startswith("country."):
            query = query.outerjoin(SortCountry, self.model.country_id == SortCountry.id)
        return query.order_by(order, self.model.id.asc()).all()

    async def create(self, db: Session, obj_in: ArtistCreate) -> Artist:
        ensure_exists(db, {"country_id": (Country, obj_in.country_id)})
        db_obj = await super().create(db, obj_in)
        return await self.get(db, db_obj.id)

    async def update(self, db: Session, id: int, obj_in: ArtistUpdate) -> Artist | None:
        ensure_exists(db, {"country_id": (Country, obj_in.country_id)})
        artist = await super().update(db, id, obj_in)
        if not artist:
            return None
        return await self.get(db, id)

artist_repository = ArtistRepository()
