from pydantic import Field, field_validator

from concert_catalog.dto import BaseSchema, Url, reject_null
from concert_catalog.dto.country import Country
from concert_catalog.entities.enums import LocationSource, LocationStatus


class LocationCreate(BaseSchema):
    name: str = Field(max_length=255)
    source: LocationSource = Field(default=LocationSource.MANUAL, validate_default=True)
    status: LocationStatus = Field(default=LocationStatus.PENDING_APPROVAL, validate_default=True)
    longitude: float = Field(ge=-180, le=180)
    latitude: float = Field(ge=-90, le=90)
    street: str = Field(max_length=255)
    housenr: str = Field(max_length=10)
    zipcode: str = Field(max_length=20)
    city: str = Field(max_length=255)
    website: Url | None = None
    country_id: int


class LocationUpdate(BaseSchema):
    name: str | None = Field(default=None, max_length=255)
    source: LocationSource | None = None
    status: LocationStatus | None = None
    longitude: float | None = Field(default=None, ge=-180, le=180)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    street: str | None = Field(default=None, max_length=255)
    housenr: str | None = Field(default=None, max_length=10)
    zipcode: str | None = Field(default=None, max_length=20)
    city: str | None = Field(default=None, max_length=255)
    website: Url | None = None
    country_id: int | None = None

    @field_validator(
        'name', 'source', 'status', 'longitude', 'latitude',
        'street', 'housenr', 'zipcode', 'city', 'country_id',
    )
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class LocationSummary(BaseSchema):
    id: int
    name: str


class Location(BaseSchema):
    id: int
    name: str
    source: LocationSource
    status: LocationStatus
    longitude: float
    latitude: float
    street: str
    housenr: str
    zipcode: str
    city: str
    website: str | None = None
    country: Country | None = None
