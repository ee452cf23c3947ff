from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from concert_catalog.utils.database import Base
from concert_catalog.entities import TimestampMixin
from concert_catalog.entities.enums import LocationSource, LocationStatus


class Location(Base, TimestampMixin):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    source = Column(String(20), nullable=False, default=LocationSource.MANUAL.value)
    status = Column(String(20), nullable=False, default=LocationStatus.PENDING_APPROVAL.value)
    longitude = Column(Float, nullable=False)
    latitude = Column(Float, nullable=False)
    street = Column(String(255), nullable=False)
    housenr = Column(String(10), nullable=False)
    zipcode = Column(String(20), nullable=False)
    city = Column(String(255), nullable=False)
    website = Column(String(255))
    country_id = Column(Integer, ForeignKey("countries.id"), nullable=True)

    # Relationships
    country = relationship("Country", back_populates="locations")
    # Deleting a location nulls location_id on its occurrences instead of removing them
    occurrences = relationship("ConcertOccurrence", back_populates="location")

    def __repr__(self):
        return f"<Location(id={self.id}, name='{self.name}')>"
