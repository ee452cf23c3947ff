from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from concert_catalog.utils.database import get_db
from concert_catalog.repositories.country_repository import country_repository
from concert_catalog.dto import country as country_schemas

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("")
async def list_countries(db: Session = Depends(get_db)):
    countries = country_repository.list(db)
    return {"data": [country_schemas.Country.model_validate(country) for country in countries]}
