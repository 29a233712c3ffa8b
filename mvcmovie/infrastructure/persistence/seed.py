"""Sample movies for a fresh catalog."""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from mvcmovie.domain.movie.model.value import MovieDraft
from mvcmovie.infrastructure.persistence.mappers.movie import draft_to_dict
from mvcmovie.infrastructure.persistence.tables import movies_table

logger = logging.getLogger(__name__)

SAMPLE_MOVIES: list[MovieDraft] = [
    MovieDraft(
        title="When Harry Met Sally",
        release_date=date(1989, 2, 12),
        genre="Romantic Comedy",
        price=Decimal("7.99"),
        rating="R",
    ),
    MovieDraft(
        title="Ghostbusters",
        release_date=date(1984, 3, 13),
        genre="Comedy",
        price=Decimal("8.99"),
        rating="R",
    ),
    MovieDraft(
        title="Ghostbusters 2",
        release_date=date(1986, 2, 23),
        genre="Comedy",
        price=Decimal("9.99"),
        rating="R",
    ),
    MovieDraft(
        title="Rio Bravo",
        release_date=date(1959, 4, 15),
        genre="Western",
        price=Decimal("3.99"),
        rating="R",
    ),
]


async def seed_movies(engine: AsyncEngine) -> int:
    """Insert SAMPLE_MOVIES if the movies table is empty. Idempotent.

    Returns:
        Number of rows inserted.
    """
    async with engine.begin() as conn:
        existing = (await conn.execute(select(func.count()).select_from(movies_table))).scalar_one()
        if existing:
            logger.info("Movies table already has %d rows, skipping seed", existing)
            return 0
        await conn.execute(insert(movies_table), [draft_to_dict(m) for m in SAMPLE_MOVIES])
    logger.info("Seeded %d sample movies", len(SAMPLE_MOVIES))
    return len(SAMPLE_MOVIES)
