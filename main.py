import logging

from concert_catalog.app import app
from concert_catalog.utils.config import settings
from concert_catalog.utils.logging_config import configure_logging

configure_logging(app_name="main")

# Create your application logger
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
