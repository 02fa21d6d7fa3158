from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

from swimlanes.schemas.card import CardRead
from swimlanes.schemas.common import DbInt, NonBlankStr

class ColumnCreate(BaseModel):
    board_id: DbInt = Field(alias="boardId")
    name: NonBlankStr

    class Config:
        populate_by_name = True

class ColumnRename(BaseModel):
    name: NonBlankStr

class ColumnRead(BaseModel):
    id: int
    board_id: int
    name: str
    position: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class ColumnWithCards(ColumnRead):
    cards: List[CardRead]
