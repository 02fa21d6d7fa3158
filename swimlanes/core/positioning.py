"""
Integer ordering for columns within a board and cards within a column.

Items are spaced POSITION_GAP apart so that a moved item can usually be
dropped between its new neighbours without touching anything else. When
no integer is left between two neighbours the whole scope is renumbered.
"""
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence

POSITION_GAP = 1000
MIN_GAP = 10
# largest value an SQLite INTEGER column can hold
MAX_POSITION = 2**63 - 1


class PositionedItem(NamedTuple):
    id: int
    position: int


def ordered(items: Iterable[PositionedItem]) -> List[PositionedItem]:
    # ties on position fall back to id so the order is stable
    return sorted(items, key=lambda item: (item.position, item.id))


def initial_position(positions: Iterable[int]) -> int:
    """
    Position for an item appended to the end of a scope.

    Capped at MAX_POSITION; a capped append collides with its neighbour and
    the caller's rebalance check renumbers the scope.
    """
    positions = list(positions)
    if not positions:
        return POSITION_GAP
    return min(max(positions) + POSITION_GAP, MAX_POSITION)


def reorder_position(siblings: Sequence[int], target_index: int) -> Optional[int]:
    """
    Position for an item dropped at ``target_index`` among ``siblings``.

    ``siblings`` are the ascending positions of the other items in the
    scope (the moved item excluded). Returns None when no integer fits
    strictly between the new neighbours.
    """
    if not siblings:
        return POSITION_GAP

    if target_index <= 0:
        first = siblings[0]
        candidate = max(0, first - POSITION_GAP)
        return candidate if candidate < first else None

    if target_index >= len(siblings):
        candidate = siblings[-1] + POSITION_GAP
        return candidate if candidate <= MAX_POSITION else None

    before = siblings[target_index - 1]
    after = siblings[target_index]
    candidate = (before + after) // 2
    return candidate if before < candidate < after else None


def spaced_positions(count: int) -> List[int]:
    return [POSITION_GAP * (i + 1) for i in range(count)]


def needs_rebalance(positions: Sequence[int]) -> bool:
    """True when two consecutive positions are closer than MIN_GAP."""
    for previous, current in zip(positions, positions[1:]):
        if current - previous < MIN_GAP:
            return True
    return False


def plan_move(
    items: Sequence[PositionedItem], moved_id: int, target_index: int
) -> Dict[int, int]:
    """
    Compute the position changes needed to place ``moved_id`` at ``target_index``.

    ``items`` is the destination scope and may or may not contain the moved
    item. The result maps item id to its new position; usually only the
    moved item is in it, unless the scope had to be renumbered.
    """
    if target_index < 0:
        raise ValueError(f"target_index must be >= 0, got {target_index}")

    others = ordered(item for item in items if item.id != moved_id)
    target_index = min(target_index, len(others))

    position = reorder_position([item.position for item in others], target_index)
    if position is not None:
        return {moved_id: position}

    ids = [item.id for item in others]
    ids.insert(target_index, moved_id)
    return dict(zip(ids, spaced_positions(len(ids))))


def plan_rebalance(items: Sequence[PositionedItem]) -> Dict[int, int]:
    """Renumber a scope in its current order when it has become too dense."""
    items = ordered(items)
    if len(items) <= 1 or not needs_rebalance([item.position for item in items]):
        return {}
    return dict(zip((item.id for item in items), spaced_positions(len(items))))
