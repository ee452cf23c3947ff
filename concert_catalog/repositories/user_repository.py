import logging

from sqlalchemy.orm import Session

from concert_catalog.entities.enums import UserRole
from concert_catalog.entities.user import User
from concert_catalog.repositories.base import BaseRepository
from concert_catalog.utils.query import contains, parse_sort

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User, None, None]):
    sortable = {
        "name": User.name,
        "email": User.email,
        "created_at": User.created_at,
    }

    def __init__(self):
        super().__init__(User)

    def search(
        self,
        db: Session,
        name: str | None = None,
        email: str | None = None,
        role: str | None = None,
        sort: str | None = None,
    ) -> list[User]:
        query = db.query(self.model)

        if name:
            query = query.filter(contains(self.model.name, name))
        if email:
            query = query.filter(contains(self.model.email, email))
        if role:
            query = query.filter(self.model.role == role)

        order = parse_sort(sort, self.sortable)
        if order is None:
            order = self.model.name.asc()
        return query.order_by(order, self.model.id.asc()).all()

    def get_by_email(self, db: Session, email: str) -> User | None:
        return db.query(self.model).filter(self.model.email == email).first()

    def update_role(self, db: Session, user: User, role: UserRole) -> User:
        user.role = role.value
        db.commit()
        db.refresh(user)
        logger.info(f"User {user.id} role set to {role.value}")
        return user

user_repository = UserRepository()
