import logging

import logging_loki

from concert_catalog.utils.config import settings


def configure_logging(app_name: str = "concert_catalog") -> logging.Logger:
    """Set up the root logger, shipping records to Loki when LOKI_URL is set."""
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)

    if not root_logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        root_logger.addHandler(stream_handler)

    if settings.LOKI_URL:
        loki_handler = logging_loki.LokiHandler(
            url=settings.LOKI_URL,
            tags={"application": app_name, "environment": settings.APP_ENV, "job_name": app_name},
            version="1",
        )
        root_logger.addHandler(loki_handler)

    return root_logger
