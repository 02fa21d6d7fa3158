from datetime import datetime
from typing import List
from pydantic import BaseModel

from swimlanes.schemas.common import NonBlankStr
from swimlanes.schemas.column import ColumnWithCards

class BoardCreate(BaseModel):
    name: NonBlankStr

class BoardUpdate(BoardCreate):
    pass

class BoardRead(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class BoardDetail(BoardRead):
    columns: List[ColumnWithCards]
    archived_count: int
