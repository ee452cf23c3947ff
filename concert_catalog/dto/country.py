from concert_catalog.dto import BaseSchema


class Country(BaseSchema):
    id: int
    name: str
    code: str
