from typing import Annotated
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


def _check_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be a valid URL")
    return value


Url = Annotated[str, Field(max_length=255), AfterValidator(_check_url)]


def reject_null(value):
    """Reject an explicit null on update for columns that cannot be empty."""
    if value is None:
        raise ValueError("may not be null")
    return value
