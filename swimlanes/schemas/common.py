from typing import Annotated

from pydantic import AfterValidator, Field

# SQLite INTEGER is a signed 64-bit value; anything wider cannot be bound
SQLITE_MIN_INT = -(2**63)
SQLITE_MAX_INT = 2**63 - 1

DbInt = Annotated[int, Field(ge=SQLITE_MIN_INT, le=SQLITE_MAX_INT)]


def not_blank(value: str) -> str:
    """Strip a required name/title and reject it when nothing is left."""
    if value is None:
        raise ValueError("cannot be null")
    value = value.strip()
    if not value:
        raise ValueError("cannot be empty")
    return value


NonBlankStr = Annotated[str, AfterValidator(not_blank)]
