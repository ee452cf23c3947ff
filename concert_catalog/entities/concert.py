from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from concert_catalog.utils.database import Base
from concert_catalog.entities import TimestampMixin


class Concert(Base, TimestampMixin):
    __tablename__ = "concerts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    year = Column(Integer, nullable=False)
    type = Column(String(20), nullable=False)
    source = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False)

    # Relationships
    occurrences = relationship(
        "ConcertOccurrence",
        back_populates="concert",
        cascade="all, delete-orphan",
        order_by="ConcertOccurrence.date",
    )

    def __repr__(self):
        return f"<Concert(id={self.id}, name='{self.name}')>"
