from sqlalchemy import Column, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship
from concert_catalog.utils.database import Base
from concert_catalog.entities import TimestampMixin


class ConcertOccurrence(Base, TimestampMixin):
    __tablename__ = "concert_occurrences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    concert_id = Column(Integer, ForeignKey("concerts.id", ondelete="CASCADE"), nullable=False, index=True)
    location_id = Column(Integer, ForeignKey("locations.id", ondelete="SET NULL"), nullable=True, index=True)
    date = Column(Date, nullable=False, index=True)

    # Relationships
    concert = relationship("Concert", back_populates="occurrences")
    location = relationship("Location", back_populates="occurrences")

    def __repr__(self):
        return f"<ConcertOccurrence(concert_id={self.concert_id}, location_id={self.location_id}, date='{self.date}')>"
