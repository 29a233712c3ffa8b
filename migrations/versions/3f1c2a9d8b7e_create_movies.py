"""create_movies

Revision ID: 3f1c2a9d8b7e
Revises:
Create Date: 2026-10-19 09:12:41.207355

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d8b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "movies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(60), nullable=False),
        sa.Column("release_date", sa.Date(), nullable=False),
        sa.Column("genre", sa.String(30), nullable=False),
        sa.Column("price", sa.Numeric(18, 2), nullable=False),
        sa.Column("rating", sa.String(5), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_movies_genre", "movies", ["genre"])
    op.create_index("idx_movies_title", "movies", ["title"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_movies_title", table_name="movies")
    op.drop_index("idx_movies_genre", table_name="movies")
    op.drop_table("movies")
