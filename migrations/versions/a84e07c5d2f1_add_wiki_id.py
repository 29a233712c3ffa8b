"""add_wiki_id

Revision ID: a84e07c5d2f1
Revises: 3f1c2a9d8b7e
Create Date: 2026-10-19 10:03:18.552904

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a84e07c5d2f1"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d8b7e"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    with op.batch_alter_table("movies") as batch_op:
        batch_op.add_column(sa.Column("wiki_id", sa.String(), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table("movies") as batch_op:
        batch_op.drop_column("wiki_id")
