from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship
from swimlanes.db.base import Base, utcnow

CARD_COLORS = ("red", "blue", "green", "yellow", "purple", "gray")

class Card(Base):
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, index=True)
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False)
    column_id = Column(Integer, ForeignKey("columns.id", ondelete="CASCADE"), nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String, nullable=True)  # one of CARD_COLORS
    position = Column(Integer, nullable=False)
    archived_at = Column(DateTime, nullable=True)  # soft delete
    created_at = Column(DateTime, nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow, server_default=func.now()
    )

    column = relationship("BoardColumn", back_populates="cards")

    __table_args__ = (
        Index("idx_cards_column_id", "column_id"),
        Index("idx_cards_position", "position"),
        Index("idx_cards_archived_at", "archived_at"),
        Index("idx_cards_board_id", "board_id"),
    )
