from enum import Enum


class ConcertType(str, Enum):
    CONCERT = "concert"
    FESTIVAL = "festival"
    DJ_SET = "dj set"
    CLUB_SHOW = "club show"
    THEATER_SHOW = "theater show"


class ConcertSource(str, Enum):
    MANUAL = "manual"
    API = "api"


class ConcertStatus(str, Enum):
    PENDING_APPROVAL = "pending_approval"
    VERIFIED = "verified"
    REJECTED = "rejected"


class LocationSource(str, Enum):
    MANUAL = "manual"
    API = "api"


class LocationStatus(str, Enum):
    PENDING_APPROVAL = "pending_approval"
    VERIFIED = "verified"
    REJECTED = "rejected"


class UserRole(str, Enum):
    ADMIN = "admin"
    SUPERUSER = "superuser"
    USER = "user"

    @property
    def label(self) -> str:
        return {
            UserRole.ADMIN: "Administrator",
            UserRole.SUPERUSER: "Super User",
            UserRole.USER: "Regular User",
        }[self]
