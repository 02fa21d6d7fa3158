"""add board_id to cards

Revision ID: c3f7a8d14e62
Revises: 5e8d2b7c91f4
Create Date: 2025-11-08 21:03:27.448961

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c3f7a8d14e62'
down_revision: Union[str, Sequence[str], None] = '5e8d2b7c91f4'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_cards_table(name, with_board_id):
    columns = [sa.Column("id", sa.Integer(), primary_key=True)]
    if with_board_id:
        columns.append(
            sa.Column(
                "board_id",
                sa.Integer(),
                sa.ForeignKey("boards.id", ondelete="CASCADE"),
                nullable=False,
            )
        )
    columns += [
        sa.Column(
            "column_id",
            sa.Integer(),
            sa.ForeignKey("columns.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("color", sa.String(), nullable=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("archived_at", sa.DateTime(), nullable=True),
    ]
    op.create_table(name, *columns)


def _create_cards_indexes(with_board_id):
    op.create_index("ix_cards_id", "cards", ["id"])
    op.create_index("idx_cards_column_id", "cards", ["column_id"])
    op.create_index("idx_cards_position", "cards", ["position"])
    op.create_index("idx_cards_archived_at", "cards", ["archived_at"])
    if with_board_id:
        op.create_index("idx_cards_board_id", "cards", ["board_id"])


def upgrade():
    # SQLite cannot add a NOT NULL foreign key in place: rebuild the table,
    # filling board_id from each card's column.
    _create_cards_table("cards_new", with_board_id=True)
    op.execute(
        """
        INSERT INTO cards_new (id, board_id, column_id, title, description, color,
                               position, created_at, updated_at, archived_at)
        SELECT c.id, col.board_id, c.column_id, c.title, c.description, c.color,
               c.position, c.created_at, c.updated_at, c.archived_at
        FROM cards c
        JOIN columns col ON col.id = c.column_id
        """
    )
    op.drop_table("cards")
    op.rename_table("cards_new", "cards")
    _create_cards_indexes(with_board_id=True)


def downgrade():
    _create_cards_table("cards_old", with_board_id=False)
    op.execute(
        """
        INSERT INTO cards_old (id, column_id, title, description, color,
                               position, created_at, updated_at, archived_at)
        SELECT id, column_id, title, description, color,
               position, created_at, updated_at, archived_at
        FROM cards
        """
    )
    op.drop_table("cards")
    op.rename_table("cards_old", "cards")
    _create_cards_indexes(with_board_id=False)
