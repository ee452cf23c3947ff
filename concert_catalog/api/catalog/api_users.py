from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_catalog.utils.database import get_db
from concert_catalog.repositories.user_repository import user_repository
from concert_catalog.dto import user as user_schemas
from concert_catalog.entities.enums import UserRole
import logging

router = APIRouter(prefix="/users", tags=["users"])

logger = logging.getLogger(__name__)


@router.get("")
async def list_users(
    name: str | None = None,
    email: str | None = None,
    role: UserRole | None = None,
    sort: str | None = None,
    db: Session = Depends(get_db),
):
    users = user_repository.search(
        db, name=name, email=email, role=role.value if role else None, sort=sort
    )
    return {"data": [user_schemas.User.model_validate(user) for user in users]}


@router.get("/{user_id}", response_model=user_schemas.User)
async def read_user(user_id: int, db: Session = Depends(get_db)):
    user = await user_repository.get(db, user_id)
    if not user:
        logger.error("User not found")
        raise HTTPException(status_code=404, detail="User not found")
    return user
