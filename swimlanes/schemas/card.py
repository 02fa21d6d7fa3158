from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

from swimlanes.schemas.common import DbInt, NonBlankStr, not_blank

CardColor = Literal["red", "blue", "green", "yellow", "purple", "gray"]


class CardCreate(BaseModel):
    column_id: DbInt = Field(alias="columnId")
    title: NonBlankStr
    description: Optional[str] = None
    color: Optional[CardColor] = None

    @field_validator("description", "color", mode="before")
    @classmethod
    def empty_to_none(cls, value):
        return None if value == "" else value

    class Config:
        populate_by_name = True


class CardUpdate(BaseModel):
    """Partial update; keys left out of the body are not touched."""

    title: Optional[str] = None
    description: Optional[str] = None
    color: Optional[CardColor] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return not_blank(value)

    @field_validator("description", "color", mode="before")
    @classmethod
    def empty_to_none(cls, value):
        return None if value == "" else value


class PositionUpdate(BaseModel):
    position: DbInt


class ColumnChange(BaseModel):
    column_id: DbInt = Field(alias="columnId")
    position: DbInt

    class Config:
        populate_by_name = True


class MoveRequest(BaseModel):
    index: int = Field(ge=0)


class CardMove(MoveRequest):
    column_id: DbInt = Field(alias="columnId")

    class Config:
        populate_by_name = True


class CardRead(BaseModel):
    id: int
    board_id: int
    column_id: int
    title: str
    description: Optional[str] = None
    color: Optional[str] = None
    position: int
    archived_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ArchivedCardRead(CardRead):
    column_name: str
