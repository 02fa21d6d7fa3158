"""Board persistence: CRUD plus the nested board view used by the UI."""
import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from swimlanes.core.errors import NotFoundError
from swimlanes.db.models import Board, BoardColumn, Card

logger = logging.getLogger(__name__)


async def list_boards(db: AsyncSession) -> List[Board]:
    result = await db.execute(select(Board).order_by(Board.created_at.desc(), Board.id.desc()))
    return list(result.scalars().all())


async def get_board(db: AsyncSession, board_id: int) -> Board:
    board = await db.get(Board, board_id)
    if not board:
        raise NotFoundError("Board not found")
    return board


async def create_board(db: AsyncSession, name: str) -> Board:
    board = Board(name=name.strip())
    db.add(board)
    await db.commit()
    await db.refresh(board)
    logger.info(f"Created board {board.id} '{board.name}'")
    return board


async def rename_board(db: AsyncSession, board_id: int, name: str) -> Board:
    board = await get_board(db, board_id)
    board.name = name.strip()
    await db.commit()
    await db.refresh(board)
    return board


async def delete_board(db: AsyncSession, board_id: int) -> None:
    """Delete a board; columns and cards go with it through ON DELETE CASCADE."""
    board = await get_board(db, board_id)
    await db.delete(board)
    await db.commit()
    logger.info(f"Deleted board {board_id}")


async def get_board_detail(db: AsyncSession, board_id: int) -> dict:
    """Board with its columns in order, each holding its active cards in order."""
    board = await get_board(db, board_id)

    columns = (
        await db.execute(
            select(BoardColumn)
            .where(BoardColumn.board_id == board_id)
            .order_by(BoardColumn.position, BoardColumn.id)
        )
    ).scalars().all()

    cards = (
        await db.execute(
            select(Card)
            .where(Card.board_id == board_id, Card.archived_at.is_(None))
            .order_by(Card.position, Card.id)
        )
    ).scalars().all()

    archived_count = await db.scalar(
        select(func.count(Card.id)).where(
            Card.board_id == board_id, Card.archived_at.isnot(None)
        )
    )

    by_column = {column.id: [] for column in columns}
    for card in cards:
        by_column.setdefault(card.column_id, []).append(card)

    return {
        "id": board.id,
        "name": board.name,
        "created_at": board.created_at,
        "updated_at": board.updated_at,
        "columns": [
            {
                "id": column.id,
                "board_id": column.board_id,
                "name": column.name,
                "position": column.position,
                "created_at": column.created_at,
                "updated_at": column.updated_at,
                "cards": by_column[column.id],
            }
            for column in columns
        ],
        "archived_count": archived_count or 0,
    }
