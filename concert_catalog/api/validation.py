from typing import Any

from fastapi import Body, Depends
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from concert_catalog.repositories.base import missing_references
from concert_catalog.utils.database import get_db


def validated_body(schema, **references):
    """Dependency that validates a request body and its foreign keys in one pass.

    ``references`` maps a body field to the entity it must point at. Field
    errors and unknown references are reported together in one 422.
    """
    async def dependency(payload: Any = Body(...), db: Session = Depends(get_db)):
        errors = []
        obj = None
        try:
            obj = schema.model_validate(payload)
        except ValidationError as exc:
            errors.extend(
                {**error, "loc": ("body", *error["loc"])} for error in exc.errors()
            )

        if isinstance(payload, dict):
            failed = {error["loc"][1] for error in errors if len(error["loc"]) > 1}
            checks = {}
            for field, model in references.items():
                # Only ids that parsed cleanly are looked up
                if field in failed or payload.get(field) is None:
                    continue
                checks[field] = (model, int(payload[field]))
            errors.extend(missing_references(db, checks))

        if errors:
            raise RequestValidationError(errors)
        return obj

    return dependency
