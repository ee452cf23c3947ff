from typing import TypeVar, Generic, Any

from fastapi.exceptions import RequestValidationError
from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")
CreateSchemaType = TypeVar("CreateSchemaType")
UpdateSchemaType = TypeVar("UpdateSchemaType")


class BaseRepository(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: type[ModelType], id_field: str = "id"):
        self.model = model
        self.id = id_field

    async def get(self, db: Session, id: Any) -> ModelType | None:
        return db.query(self.model).filter(getattr(self.model, self.id) == id).first()

    async def create(self, db: Session, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    async def update(self, db: Session, id: Any, obj_in: UpdateSchemaType) -> ModelType | None:
        """
        Update an existing record, touching only the fields present in the request.
        """
        obj = db.query(self.model).filter(getattr(self.model, self.id) == id).first()

        if not obj:
            return None

        for key, value in obj_in.model_dump(exclude_unset=True).items():
            setattr(obj, key, value)
        db.commit()
        db.refresh(obj)
        return obj

    async def delete(self, db: Session, id: Any) -> ModelType | None:
        obj = db.query(self.model).filter(getattr(self.model, self.id) == id).first()
        if not obj:
            return None
        db.delete(obj)
        db.commit()
        return obj


def missing_references(db: Session, checks: dict[str, tuple[type, Any]]) -> list[dict]:
    """Validation errors for every foreign key that points at a missing row.

    ``checks`` maps a request field to ``(model, id)``; ``None`` ids are skipped.
    """
    errors = []
    for field, (model, value) in checks.items():
        if value is None:
            continue
        if db.get(model, value) is None:
            errors.append({
                "type": "exists",
                "loc": ("body", field),
                "msg": f"The selected {field.replace('_', ' ')} is invalid.",
                "input": value,
            })
    return errors


def ensure_exists(db: Session, checks: dict[str, tuple[type, Any]]) -> None:
    errors = missing_references(db, checks)
    if errors:
        raise RequestValidationError(errors)
