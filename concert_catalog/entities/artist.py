from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from concert_catalog.utils.database import Base
from concert_catalog.entities import TimestampMixin


class Artist(Base, TimestampMixin):
    __tablename__ = "artists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text)
    image_url = Column(String(255))
    country_id = Column(Integer, ForeignKey("countries.id"), nullable=True)

    # Relationships
    country = relationship("Country", back_populates="artists")

    def __repr__(self):
        return f"<Artist(id={self.id}, name='{self.name}')>"
