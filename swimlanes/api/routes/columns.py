from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from swimlanes.api.params import RowId
from swimlanes.db.session import get_db
from swimlanes.repositories import columns as column_repo
from swimlanes.schemas.card import MoveRequest, PositionUpdate
from swimlanes.schemas.column import ColumnCreate, ColumnRead, ColumnRename
from swimlanes.schemas.common import SQLITE_MAX_INT, SQLITE_MIN_INT

router = APIRouter(prefix="/api/columns", tags=["columns"])


@router.get("", response_model=List[ColumnRead])
async def list_columns(
    board_id: int = Query(..., alias="boardId", ge=SQLITE_MIN_INT, le=SQLITE_MAX_INT),
    db: AsyncSession = Depends(get_db),
):
    return await column_repo.list_columns(db, board_id)


@router.post("", response_model=ColumnRead, status_code=status.HTTP_201_CREATED)
async def create_column(data: ColumnCreate, db: AsyncSession = Depends(get_db)):
    return await column_repo.create_column(db, data.board_id, data.name)


@router.get("/{column_id}", response_model=ColumnRead)
async def get_column(column_id: RowId, db: AsyncSession = Depends(get_db)):
    return await column_repo.get_column(db, column_id)


@router.api_route("/{column_id}", methods=["PATCH", "PUT"], response_model=ColumnRead)
async def rename_column(
    column_id: RowId,
    data: ColumnRename,
    db: AsyncSession = Depends(get_db),
):
    return await column_repo.rename_column(db, column_id, data.name)


@router.delete("/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_column(column_id: RowId, db: AsyncSession = Depends(get_db)):
    """Delete a column and every card in it, archived ones included."""
    await column_repo.delete_column(db, column_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{column_id}/position", response_model=ColumnRead)
async def update_column_position(
    column_id: RowId,
    data: PositionUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await column_repo.set_column_position(db, column_id, data.position)


@router.post("/{column_id}/move", response_model=ColumnRead)
async def move_column(
    column_id: RowId,
    data: MoveRequest,
    db: AsyncSession = Depends(get_db),
):
    """Drop a column at an index among its siblings."""
    return await column_repo.move_column(db, column_id, data.index)
