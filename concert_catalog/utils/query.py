"""Filter and sort helpers shared by the list endpoints."""
from typing import Any, Mapping

SORT_DIRECTIONS = ("asc", "desc")


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains(column, value: str):
    """Case-insensitive ``LIKE '%value%'`` predicate."""
    return column.ilike(f"%{escape_like(value)}%", escape="\\")


def parse_sort(sort: str | None, allowed: Mapping[str, Any]):
    """Turn ``field:direction`` into an order clause.

    Returns None when the field is not whitelisted or the direction is unknown,
    so the caller falls back to its default ordering. The direction defaults
    to ``asc`` when omitted.
    """
    if not sort:
        return None
    field, _, direction = sort.partition(":")
    direction = (direction or "asc").lower()
    if field not in allowed or direction not in SORT_DIRECTIONS:
        return None
    column = allowed[field]
    return column.desc() if direction == "desc" else column.asc()
