from typing import Annotated

from fastapi import Path

from swimlanes.schemas.common import SQLITE_MAX_INT, SQLITE_MIN_INT

# Row ids in the URL; out-of-range values are a 400, not a driver overflow
RowId = Annotated[int, Path(ge=SQLITE_MIN_INT, le=SQLITE_MAX_INT)]
