import logging
from concert_catalog.repositories.country_repository import country_repository
from concert_catalog.utils.database import SessionLocal, create_tables

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def init_database():
    """Initialize the database by creating all tables and seeding countries."""
    try:
        logger.info("Starting database initialization...")

        # Create all tables defined in the entities
        create_tables()
        logger.info("Database tables created successfully!")

        db = SessionLocal()
        try:
            country_repository.seed_defaults(db)
        finally:
            db.close()

    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


if __name__ == "__main__":
    init_database()
