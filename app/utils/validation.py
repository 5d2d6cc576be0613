"""
Presence checks shared by the route handlers.
"""

from typing import Any, Optional

from app.core.errors import ValidationError


def is_blank(value: Any) -> bool:
    """Missing, null and empty string all count as not provided."""
    return value is None or (isinstance(value, str) and value == "")


def require_fields(message: str, *values: Any) -> None:
    """Raise ValidationError(message) when any value is blank."""
    if any(is_blank(value) for value in values):
        raise ValidationError(message)


# Largest value a BIGINT / SQLite INTEGER key can hold.
MAX_ROW_ID = 2 ** 63 - 1


def parse_row_id(value: Any) -> Optional[int]:
    """
    Integer primary key, or None for anything that cannot name a row.

    Accepts ints and digit strings. Booleans, negative numbers, zero and
    values beyond the 64-bit key range all return None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            return None
        value = int(value)
    if not isinstance(value, int) or not 0 < value <= MAX_ROW_ID:
        return None
    return value
