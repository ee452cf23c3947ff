from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from concert_catalog.utils.database import Base
from concert_catalog.entities import TimestampMixin


class Country(Base, TimestampMixin):
    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    code = Column(String(10), nullable=False, unique=True, index=True)

    # Relationships
    locations = relationship("Location", back_populates="country")
    artists = relationship("Artist", back_populates="country")

    def __repr__(self):
        return f"<Country(id={self.id}, code='{self.code}')>"
