"""
Card persistence.

Cards are never deleted from the board view: DELETE archives them by
stamping ``archived_at``. Only archived cards can be removed for good.
Active cards keep unique, ascending positions within their column.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from swimlanes.core.errors import InvalidOperationError, NotFoundError
from swimlanes.core.positioning import (
    PositionedItem,
    initial_position,
    plan_move,
    plan_rebalance,
)
from swimlanes.db.base import utcnow
from swimlanes.db.models import Board, BoardColumn, Card

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "description", "color")


async def _require_column(db: AsyncSession, column_id: int) -> BoardColumn:
    column = await db.get(BoardColumn, column_id)
    if not column:
        raise NotFoundError(f"Column {column_id} not found")
    return column


async def _active_cards(db: AsyncSession, column_id: int) -> List[Card]:
    result = await db.execute(
        select(Card)
        .where(Card.column_id == column_id, Card.archived_at.is_(None))
        .order_by(Card.position, Card.id)
    )
    return list(result.scalars().all())


def _apply(cards: List[Card], plan: dict) -> None:
    by_id = {card.id: card for card in cards}
    for card_id, position in plan.items():
        by_id[card_id].position = position


async def _rebalance(db: AsyncSession, column_id: int) -> bool:
    cards = await _active_cards(db, column_id)
    plan = plan_rebalance([PositionedItem(c.id, c.position) for c in cards])
    if not plan:
        return False
    logger.info(f"Rebalancing {len(plan)} cards in column {column_id}")
    _apply(cards, plan)
    return True


async def list_cards(db: AsyncSession, column_id: int) -> List[Card]:
    """Active cards of a column, in display order."""
    await _require_column(db, column_id)
    return await _active_cards(db, column_id)


async def get_card(db: AsyncSession, card_id: int) -> Card:
    card = await db.get(Card, card_id)
    if not card:
        raise NotFoundError(f"Card {card_id} not found")
    return card


async def _get_active_card(db: AsyncSession, card_id: int) -> Card:
    card = await get_card(db, card_id)
    if card.archived_at is not None:
        raise InvalidOperationError("Card is archived")
    return card


async def create_card(
    db: AsyncSession,
    column_id: int,
    title: str,
    description: Optional[str] = None,
    color: Optional[str] = None,
) -> Card:
    """Append a card to the end of a column."""
    column = await _require_column(db, column_id)
    siblings = await _active_cards(db, column_id)

    card = Card(
        board_id=column.board_id,
        column_id=column.id,
        title=title.strip(),
        description=description or None,
        color=color or None,
        position=initial_position(c.position for c in siblings),
    )
    db.add(card)
    await _rebalance(db, column_id)

    await db.commit()
    await db.refresh(card)
    logger.info(f"Created card {card.id} in column {column_id} at {card.position}")
    return card


async def update_card(db: AsyncSession, card_id: int, changes: dict) -> Card:
    """
    Apply a partial update. Only keys present in ``changes`` are written;
    an explicit None clears description or color.
    """
    card = await get_card(db, card_id)

    updates = {key: value for key, value in changes.items() if key in EDITABLE_FIELDS}
    if "title" in updates:
        if not updates["title"] or not updates["title"].strip():
            raise InvalidOperationError("Card title cannot be empty")
        updates["title"] = updates["title"].strip()

    if not updates:
        return card

    for key, value in updates.items():
        setattr(card, key, value)
    await db.commit()
    await db.refresh(card)
    return card


async def set_card_position(db: AsyncSession, card_id: int, position: int) -> Card:
    """Write a client-computed position, renumbering the column if it got too dense."""
    card = await _get_active_card(db, card_id)
    card.position = position
    await _rebalance(db, card.column_id)

    await db.commit()
    await db.refresh(card)
    return card


async def change_card_column(
    db: AsyncSession, card_id: int, column_id: int, position: int
) -> Card:
    """Move a card to another column of the same board at a client-computed position."""
    card = await _get_active_card(db, card_id)
    column = await _require_column(db, column_id)
    if column.board_id != card.board_id:
        raise InvalidOperationError("Column belongs to a different board")

    card.column_id = column.id
    card.position = position
    await _rebalance(db, column.id)

    await db.commit()
    await db.refresh(card)
    logger.info(f"Moved card {card_id} to column {column_id}")
    return card


async def move_card(db: AsyncSession, card_id: int, column_id: int, index: int) -> Card:
    """Place a card at ``index`` in a column, computing the position server-side."""
    card = await _get_active_card(db, card_id)
    column = await _require_column(db, column_id)
    if column.board_id != card.board_id:
        raise InvalidOperationError("Column belongs to a different board")

    siblings = await _active_cards(db, column.id)
    plan = plan_move([PositionedItem(c.id, c.position) for c in siblings], card.id, index)
    if len(plan) > 1:
        logger.info(f"Renumbering {len(plan)} cards in column {column.id}")

    card.column_id = column.id
    _apply(siblings + [card], plan)

    await db.commit()
    await db.refresh(card)
    return card


async def archive_card(db: AsyncSession, card_id: int) -> Card:
    card = await db.get(Card, card_id)
    if not card or card.archived_at is not None:
        raise NotFoundError("Card not found or already archived")

    card.archived_at = utcnow()
    await db.commit()
    await db.refresh(card)
    logger.info(f"Archived card {card_id}")
    return card


async def restore_card(db: AsyncSession, card_id: int) -> Card:
    """Bring an archived card back, appended to the end of its column."""
    card = await db.get(Card, card_id)
    if not card:
        raise NotFoundError("Card not found")
    if card.archived_at is None:
        raise InvalidOperationError("Card is not archived")

    siblings = await _active_cards(db, card.column_id)
    card.position = initial_position(c.position for c in siblings)
    card.archived_at = None
    await _rebalance(db, card.column_id)

    await db.commit()
    await db.refresh(card)
    logger.info(f"Restored card {card_id} to column {card.column_id}")
    return card


async def delete_card_permanently(db: AsyncSession, card_id: int) -> None:
    card = await db.get(Card, card_id)
    if not card:
        raise NotFoundError("Card not found")
    if card.archived_at is None:
        raise InvalidOperationError("Card is not archived")

    await db.delete(card)
    await db.commit()
    logger.info(f"Permanently deleted card {card_id}")


async def list_archived_cards(db: AsyncSession, board_id: int) -> List[Tuple[Card, str]]:
    """Archived cards of a board, most recently archived first, with their column name."""
    if not await db.get(Board, board_id):
        raise NotFoundError("Board not found")

    result = await db.execute(
        select(Card, func.coalesce(BoardColumn.name, "(deleted)"))
        .outerjoin(BoardColumn, Card.column_id == BoardColumn.id)
        .where(Card.board_id == board_id, Card.archived_at.isnot(None))
        .order_by(Card.archived_at.desc(), Card.id.desc())
    )
    return [(card, column_name) for card, column_name in result.all()]


async def search_cards(
    db: AsyncSession, board_id: int, query: str = "", color: Optional[str] = None
) -> List[Card]:
    """
    Active cards on a board whose title, description or color contains
    ``query`` (case-insensitive), optionally limited to one color. Results
    follow board order: column position, then card position.
    """
    if not await db.get(Board, board_id):
        raise NotFoundError("Board not found")

    stmt = (
        select(Card)
        .join(BoardColumn, Card.column_id == BoardColumn.id)
        .where(BoardColumn.board_id == board_id, Card.archived_at.is_(None))
    )

    query = (query or "").strip()
    if query:
        stmt = stmt.where(
            or_(
                Card.title.icontains(query, autoescape=True),
                Card.description.icontains(query, autoescape=True),
                Card.color.icontains(query, autoescape=True),
            )
        )
    if color:
        stmt = stmt.where(Card.color == color)

    stmt = stmt.order_by(BoardColumn.position, BoardColumn.id, Card.position, Card.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())
