from swimlanes.db.models.board import Board
from swimlanes.db.models.column import BoardColumn
from swimlanes.db.models.card import Card

__all__ = ["Board", "BoardColumn", "Card"]
