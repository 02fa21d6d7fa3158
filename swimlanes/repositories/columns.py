import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from swimlanes.core.errors import NotFoundError
from swimlanes.core.positioning import (
    PositionedItem,
    initial_position,
    plan_move,
    plan_rebalance,
)
from swimlanes.db.models import Board, BoardColumn

logger = logging.getLogger(__name__)


async def _require_board(db: AsyncSession, board_id: int) -> Board:
    board = await db.get(Board, board_id)
    if not board:
        raise NotFoundError(f"Board {board_id} not found")
    return board


async def list_columns(db: AsyncSession, board_id: int) -> List[BoardColumn]:
    await _require_board(db, board_id)
    result = await db.execute(
        select(BoardColumn)
        .where(BoardColumn.board_id == board_id)
        .order_by(BoardColumn.position, BoardColumn.id)
    )
    return list(result.scalars().all())


async def get_column(db: AsyncSession, column_id: int) -> BoardColumn:
    column = await db.get(BoardColumn, column_id)
    if not column:
        raise NotFoundError("Column not found")
    return column


async def create_column(db: AsyncSession, board_id: int, name: str) -> BoardColumn:
    """Append a new column at the end of the board."""
    siblings = await list_columns(db, board_id)
    column = BoardColumn(
        board_id=board_id,
        name=name.strip(),
        position=initial_position(c.position for c in siblings),
    )
    db.add(column)
    await _rebalance(db, board_id)

    await db.commit()
    await db.refresh(column)
    logger.info(f"Created column {column.id} on board {board_id} at {column.position}")
    return column


async def rename_column(db: AsyncSession, column_id: int, name: str) -> BoardColumn:
    column = await get_column(db, column_id)
    column.name = name.strip()
    await db.commit()
    await db.refresh(column)
    return column


async def delete_column(db: AsyncSession, column_id: int) -> None:
    column = await get_column(db, column_id)
    await db.delete(column)
    await db.commit()
    logger.info(f"Deleted column {column_id} and its cards")


def _apply(columns: List[BoardColumn], plan: dict) -> None:
    by_id = {column.id: column for column in columns}
    for column_id, position in plan.items():
        by_id[column_id].position = position


async def _rebalance(db: AsyncSession, board_id: int) -> bool:
    columns = await list_columns(db, board_id)
    plan = plan_rebalance([PositionedItem(c.id, c.position) for c in columns])
    if not plan:
        return False
    logger.info(f"Rebalancing {len(plan)} columns on board {board_id}")
    _apply(columns, plan)
    return True


async def set_column_position(db: AsyncSession, column_id: int, position: int) -> BoardColumn:
    """Write a client-computed position, renumbering the board if it got too dense."""
    column = await get_column(db, column_id)
    column.position = position
    await _rebalance(db, column.board_id)

    await db.commit()
    await db.refresh(column)
    return column


async def move_column(db: AsyncSession, column_id: int, index: int) -> BoardColumn:
    """Place a column at ``index`` among the other columns of its board."""
    column = await get_column(db, column_id)
    siblings = await list_columns(db, column.board_id)

    plan = plan_move([PositionedItem(c.id, c.position) for c in siblings], column.id, index)
    if len(plan) > 1:
        logger.info(f"Renumbering {len(plan)} columns on board {column.board_id}")
    _apply(siblings, plan)

    await db.commit()
    await db.refresh(column)
    return column
