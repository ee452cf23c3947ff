from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import TIMESTAMP, func
from datetime import datetime



class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        default=func.now(),
        onupdate=func.now(),
        nullable=False
    )


from concert_catalog.entities.country import Country  # noqa: E402
from concert_catalog.entities.location import Location  # noqa: E402
from concert_catalog.entities.concert import Concert  # noqa: E402
from concert_catalog.entities.occurrence import ConcertOccurrence  # noqa: E402
from concert_catalog.entities.artist import Artist  # noqa: E402
from concert_catalog.entities.user import User  # noqa: E402
