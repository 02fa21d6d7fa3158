from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from swimlanes.api.params import RowId
from swimlanes.db.session import get_db
from swimlanes.repositories import cards as card_repo
from swimlanes.schemas.card import (
    ArchivedCardRead,
    CardCreate,
    CardMove,
    CardRead,
    CardUpdate,
    ColumnChange,
    PositionUpdate,
)
from swimlanes.schemas.common import SQLITE_MAX_INT, SQLITE_MIN_INT

router = APIRouter(prefix="/api/cards", tags=["cards"])


@router.get("", response_model=List[CardRead])
async def list_cards(
    column_id: int = Query(..., alias="columnId", ge=SQLITE_MIN_INT, le=SQLITE_MAX_INT),
    db: AsyncSession = Depends(get_db),
):
    return await card_repo.list_cards(db, column_id)


@router.post("", response_model=CardRead, status_code=status.HTTP_201_CREATED)
async def create_card(card: CardCreate, db: AsyncSession = Depends(get_db)):
    return await card_repo.create_card(
        db, card.column_id, card.title, card.description, card.color
    )


# declared before /{card_id} so "archived" is not parsed as an id
@router.get("/archived", response_model=List[ArchivedCardRead])
async def list_archived_cards(
    board_id: int = Query(..., alias="boardId", ge=SQLITE_MIN_INT, le=SQLITE_MAX_INT),
    db: AsyncSession = Depends(get_db),
):
    rows = await card_repo.list_archived_cards(db, board_id)
    return [
        {**CardRead.model_validate(card).model_dump(), "column_name": column_name}
        for card, column_name in rows
    ]


@router.get("/{card_id}", response_model=CardRead)
async def get_card(card_id: RowId, db: AsyncSession = Depends(get_db)):
    return await card_repo.get_card(db, card_id)


@router.patch("/{card_id}", response_model=CardRead)
async def update_card(
    card_id: RowId,
    data: CardUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await card_repo.update_card(db, card_id, data.model_dump(exclude_unset=True))


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(card_id: RowId, db: AsyncSession = Depends(get_db)):
    """Remove a card from the board view by archiving it."""
    await card_repo.archive_card(db, card_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{card_id}/position", response_model=CardRead)
async def update_card_position(
    card_id: RowId,
    data: PositionUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await card_repo.set_card_position(db, card_id, data.position)


@router.patch("/{card_id}/column", response_model=CardRead)
async def update_card_column(
    card_id: RowId,
    data: ColumnChange,
    db: AsyncSession = Depends(get_db),
):
    return await card_repo.change_card_column(db, card_id, data.column_id, data.position)


@router.post("/{card_id}/move", response_model=CardRead)
async def move_card(
    card_id: RowId,
    data: CardMove,
    db: AsyncSession = Depends(get_db),
):
    """Drop a card at an index in a column; the server picks the position."""
    return await card_repo.move_card(db, card_id, data.column_id, data.index)


@router.post("/{card_id}/archive", response_model=CardRead)
async def archive_card(card_id: RowId, db: AsyncSession = Depends(get_db)):
    return await card_repo.archive_card(db, card_id)


@router.post("/{card_id}/restore", response_model=CardRead)
async def restore_card(card_id: RowId, db: AsyncSession = Depends(get_db)):
    return await card_repo.restore_card(db, card_id)


@router.delete("/{card_id}/permanent", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card_permanently(card_id: RowId, db: AsyncSession = Depends(get_db)):
    await card_repo.delete_card_permanently(db, card_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
