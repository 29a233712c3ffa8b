"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import Column, Date, Index, Integer, MetaData, Numeric, String, Table

from mvcmovie.domain.movie.model.value import (
    GENRE_MAX_LENGTH,
    RATING_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# MOVIES TABLE
# ============================================================================
movies_table = Table(
    "movies",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(TITLE_MAX_LENGTH), nullable=False),
    Column("release_date", Date, nullable=False),
    Column("genre", String(GENRE_MAX_LENGTH), nullable=False),
    Column("price", Numeric(18, 2), nullable=False),
    Column("rating", String(RATING_MAX_LENGTH), nullable=False),
    Column("wiki_id", String, nullable=True),  # Wikipedia page id
)

Index("idx_movies_genre", movies_table.c.genre)
Index("idx_movies_title", movies_table.c.title)
