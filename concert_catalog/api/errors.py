import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _field_name(loc) -> str:
    # Drop the "body"/"query"/"path" prefix pydantic puts in front of the field
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return ".".join(parts)


def _message(field: str, error: dict) -> str:
    label = field.replace("_", " ")
    if error.get("type") == "missing":
        return f"The {label} field is required."
    if error.get("type") == "value_error" and error.get("ctx", {}).get("error") is not None:
        return f"The {label} field {error['ctx']['error']}."
    if error.get("type") == "exists":
        return error["msg"]
    return f"The {label} field is invalid: {error['msg']}."


def format_validation_errors(errors) -> dict[str, list[str]]:
    """Group pydantic errors as ``{field: [message, ...]}``."""
    grouped: dict[str, list[str]] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        grouped.setdefault(field, []).append(_message(field, error))
    return grouped


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = format_validation_errors(exc.errors())
    logger.info(f"Validation failed for {request.method} {request.url.path}: {list(errors)}")
    return JSONResponse(
        status_code=422,
        content={"errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
