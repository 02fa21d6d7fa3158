"""add archived_at to cards

Revision ID: 5e8d2b7c91f4
Revises: a1c4e9f20b37
Create Date: 2025-11-06 09:15:48.602117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e8d2b7c91f4'
down_revision: Union[str, Sequence[str], None] = 'a1c4e9f20b37'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    # NULL means active; archived cards keep their row until deleted for good
    op.add_column("cards", sa.Column("archived_at", sa.DateTime(), nullable=True))
    op.create_index("idx_cards_archived_at", "cards", ["archived_at"])


def downgrade():
    op.drop_index("idx_cards_archived_at", table_name="cards")
    with op.batch_alter_table("cards") as batch_op:
        batch_op.drop_column("archived_at")
