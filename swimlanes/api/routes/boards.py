from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from swimlanes.api.params import RowId
from swimlanes.db.session import get_db
from swimlanes.repositories import boards as board_repo
from swimlanes.repositories import cards as card_repo
from swimlanes.repositories import columns as column_repo
from swimlanes.schemas.board import BoardCreate, BoardDetail, BoardRead, BoardUpdate
from swimlanes.schemas.card import CardColor, CardRead
from swimlanes.schemas.column import ColumnRead, ColumnRename

router = APIRouter(prefix="/api/boards", tags=["boards"])


@router.get("", response_model=List[BoardRead])
async def list_boards(db: AsyncSession = Depends(get_db)):
    """List all boards, newest first."""
    return await board_repo.list_boards(db)


@router.post("", response_model=BoardRead, status_code=status.HTTP_201_CREATED)
async def create_board(board: BoardCreate, db: AsyncSession = Depends(get_db)):
    return await board_repo.create_board(db, board.name)


@router.get("/{board_id}", response_model=BoardRead)
async def get_board(board_id: RowId, db: AsyncSession = Depends(get_db)):
    return await board_repo.get_board(db, board_id)


@router.get("/{board_id}/full", response_model=BoardDetail)
async def get_board_detail(board_id: RowId, db: AsyncSession = Depends(get_db)):
    """Fetch a board with its columns and their active cards, in display order."""
    return await board_repo.get_board_detail(db, board_id)


@router.api_route("/{board_id}", methods=["PATCH", "PUT"], response_model=BoardRead)
async def rename_board(
    board_id: RowId,
    data: BoardUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await board_repo.rename_board(db, board_id, data.name)


@router.delete("/{board_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_board(board_id: RowId, db: AsyncSession = Depends(get_db)):
    """Delete a board along with its columns and cards."""
    await board_repo.delete_board(db, board_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{board_id}/columns", response_model=List[ColumnRead])
async def list_board_columns(board_id: RowId, db: AsyncSession = Depends(get_db)):
    return await column_repo.list_columns(db, board_id)


@router.post(
    "/{board_id}/columns",
    response_model=ColumnRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_board_column(
    board_id: RowId,
    data: ColumnRename,
    db: AsyncSession = Depends(get_db),
):
    """Append a column to the end of the board."""
    return await column_repo.create_column(db, board_id, data.name)


@router.get("/{board_id}/search", response_model=List[CardRead])
async def search_board_cards(
    board_id: RowId,
    q: str = Query("", description="Matches title, description or color"),
    color: Optional[CardColor] = Query(None, description="Only cards with this color"),
    db: AsyncSession = Depends(get_db),
):
    """Search the active cards of a board."""
    return await card_repo.search_cards(db, board_id, q, color)
