import logging
from typing import AsyncIterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from concert_catalog.utils.config import settings

logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


async def get_db() -> AsyncIterator[Session]:
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        logger.exception("Database error, rolling back session")
        db.rollback()
        raise
    finally:
        db.close()


def create_tables(bind=None) -> None:
    # Entities must be imported so they register on Base.metadata
    import concert_catalog.entities  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
