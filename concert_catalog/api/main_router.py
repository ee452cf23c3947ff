from fastapi import APIRouter
from concert_catalog.api.catalog import api_concerts, api_locations, api_artists, api_users, api_countries

router = APIRouter(prefix="/api")

router.include_router(api_concerts.router)
router.include_router(api_locations.router)
router.include_router(api_artists.router)
router.include_router(api_users.router)
router.include_router(api_countries.router)
