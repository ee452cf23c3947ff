from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from concert_catalog.utils.database import get_db
from concert_catalog.repositories.artist_repository import artist_repository
from concert_catalog.dto import artist as artist_schemas
from concert_catalog.entities.country import Country
from concert_catalog.api.validation import validated_body
import logging

router = APIRouter(prefix="/artists", tags=["artists"])

logger = logging.getLogger(__name__)


@router.get("")
async def list_artists(
    name: str | None = None,
    country_id: int | None = None,
    sort: str | None = None,
    db: Session = Depends(get_db),
):
    artists = artist_repository.search(db, name=name, country_id=country_id, sort=sort)
    return {"data": [artist_schemas.Artist.model_validate(artist) for artist in artists]}


@router.post("", response_model=artist_schemas.Artist, status_code=status.HTTP_201_CREATED)
async def create_artist(
    artist: artist_schemas.ArtistCreate = Depends(validated_body(artist_schemas.ArtistCreate, country_id=Country)),
    db: Session = Depends(get_db),
):
    result = await artist_repository.create(db, artist)
    logger.info(f"Artist created with id {result.id}")
    return result


@router.get("/{artist_id}", response_model=artist_schemas.Artist)
async def read_artist(artist_id: int, db: Session = Depends(get_db)):
    artist = await artist_repository.get(db, artist_id)
    if not artist:
        logger.error("Artist not found")
        raise HTTPException(status_code=404, detail="Artist not found")
    return artist


@router.put("/{artist_id}", response_model=artist_schemas.Artist)
async def update_artist(
    artist_id: int,
    artist: artist_schemas.ArtistUpdate = Depends(validated_body(artist_schemas.ArtistUpdate, country_id=Country)),
    db: Session = Depends(get_db),
):
    existing_artist = await artist_repository.get(db, artist_id)
    if not existing_artist:
        logger.error("Artist not found for update")
        raise HTTPException(status_code=404, detail="Artist not found")
    return await artist_repository.update(db, artist_id, artist)


@router.delete("/{artist_id}")
async def delete_artist(artist_id: int, db: Session = Depends(get_db)):
    deleted = await artist_repository.delete(db, artist_id)
    if not deleted:
        logger.error("Artist not found for delete")
        raise HTTPException(status_code=404, detail="Artist not found")
    logger.info(f"Artist {artist_id} deleted")
    return {"message": "Artist successfully deleted"}
