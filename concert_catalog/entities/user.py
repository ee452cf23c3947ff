from sqlalchemy import Column, Integer, String, Text, Float, Boolean, DateTime
from concert_catalog.utils.database import Base
from concert_catalog.entities import TimestampMixin
from concert_catalog.entities.enums import UserRole


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    role = Column(String(20), nullable=False, default=UserRole.USER.value)
    username = Column(String(255), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    email_verified_at = Column(DateTime(timezone=True))
    profile_picture = Column(String(255))
    bio = Column(Text)
    longitude = Column(Float)
    latitude = Column(Float)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
