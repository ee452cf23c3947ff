import logging

from sqlalchemy.orm import Session

from concert_catalog.entities.country import Country
from concert_catalog.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

DEFAULT_COUNTRIES = [
    ("United States", "US"),
    ("United Kingdom", "UK"),
    ("Canada", "CA"),
    ("Australia", "AU"),
    ("New Zealand", "NZ"),
    ("Belgium", "BE"),
    ("France", "FR"),
    ("Germany", "DE"),
    ("Italy", "IT"),
    ("Spain", "ES"),
    ("Portugal", "PT"),
    ("Sweden", "SE"),
    ("Norway", "NO"),
    ("Denmark", "DK"),
    ("Netherlands", "NL"),
    ("Switzerland", "CH"),
    ("Austria", "AT"),
]


class CountryRepository(BaseRepository[Country, None, None]):
    def __init__(self):
        super().__init__(Country)

    def list(self, db: Session) -> list[Country]:
        return db.query(self.model).order_by(self.model.name.asc(), self.model.id.asc()).all()

    def get_by_code(self, db: Session, code: str) -> Country | None:
        return db.query(self.model).filter(self.model.code == code).first()

    def seed_defaults(self, db: Session) -> int:
        """Insert the default countries whose code is not present yet."""
        existing = {code for (code,) in db.query(self.model.code).all()}
        created = 0
        for name, code in DEFAULT_COUNTRIES:
            if code in existing:
                continue
            db.add(self.model(name=name, code=code))
            created += 1
        db.commit()
        logger.info(f"Seeded {created} countries")
        return created

country_repository = CountryRepository()
