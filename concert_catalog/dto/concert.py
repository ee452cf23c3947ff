from datetime import date

from pydantic import Field, field_validator

from concert_catalog.dto import BaseSchema, reject_null
from concert_catalog.dto.location import LocationSummary
from concert_catalog.entities.enums import ConcertSource, ConcertStatus, ConcertType


class ConcertCreate(BaseSchema):
    name: str = Field(min_length=3, max_length=255)
    description: str = Field(min_length=10)
    year: int = Field(ge=1900, le=2100)
    type: ConcertType
    source: ConcertSource
    status: ConcertStatus
    location_id: int
    date: date


class ConcertUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=3, max_length=255)
    description: str | None = Field(default=None, min_length=10)
    year: int | None = Field(default=None, ge=1900, le=2100)
    type: ConcertType | None = None
    source: ConcertSource | None = None
    status: ConcertStatus | None = None

    @field_validator('name', 'description', 'year', 'type', 'source', 'status')
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class OccurrenceCreate(BaseSchema):
    location_id: int
    date: date


class Occurrence(BaseSchema):
    id: int
    location: LocationSummary
    date: date


class Concert(BaseSchema):
    id: int
    name: str
    description: str
    year: int
    type: ConcertType
    source: ConcertSource
    status: ConcertStatus
    occurrences: list[Occurrence] = []

    @field_validator('occurrences', mode='before')
    @classmethod
    def drop_unresolved_locations(cls, occurrences):
        # Occurrences whose location was deleted stay in the table but are not exposed
        return [
            occurrence for occurrence in occurrences
            if (occurrence.get('location') if isinstance(occurrence, dict) else occurrence.location) is not None
        ]
