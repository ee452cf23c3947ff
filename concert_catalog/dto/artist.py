from pydantic import Field, field_validator

from concert_catalog.dto import BaseSchema, Url, reject_null
from concert_catalog.dto.country import Country


class ArtistCreate(BaseSchema):
    name: str = Field(max_length=255)
    description: str | None = None
    image_url: Url | None = None
    country_id: int | None = None


class ArtistUpdate(BaseSchema):
    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    image_url: Url | None = None
    country_id: int | None = None

    @field_validator('name')
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class Artist(BaseSchema):
    id: int
    name: str
    description: str | None = None
    image_url: str | None = None
    country: Country | None = None
