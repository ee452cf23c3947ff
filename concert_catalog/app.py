from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from concert_catalog.api.errors import register_exception_handlers
from concert_catalog.api.main_router import router as main_router
from concert_catalog.utils.config import settings
from concert_catalog.utils.observability import PrometheusMiddleware, metrics, setting_otlp

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Concert catalog API started")
    yield
    logger.info("Concert catalog API shut down")


def create_app() -> FastAPI:
    app = FastAPI(title="Concert Catalog API", lifespan=lifespan)
    register_exception_handlers(app)

    # Tracing is only wired up when a collector is configured
    if settings.OTLP_ENDPOINT:
        setting_otlp(app=app, app_name=settings.APP_NAME, endpoint=settings.OTLP_ENDPOINT)

    app.add_middleware(PrometheusMiddleware, app_name=settings.APP_NAME)
    app.add_route("/metrics", metrics)

    @app.get("/")
    def read_root():
        return {"message": "Welcome to the Concert Catalog API"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(main_router)
    return app


app = create_app()
