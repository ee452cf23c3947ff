from datetime import datetime

from concert_catalog.dto import BaseSchema
from concert_catalog.entities.enums import UserRole


class User(BaseSchema):
    id: int
    role: UserRole
    username: str
    name: str
    email: str
    profile_picture: str | None = None
    bio: str | None = None
    longitude: float | None = None
    latitude: float | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
