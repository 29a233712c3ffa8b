"""SQLAlchemy implementation of MovieRepository."""

from typing import List, Tuple

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from mvcmovie.domain.movie.model.aggregate import Movie
from mvcmovie.domain.movie.model.value import MovieDraft, MovieFilter, MovieId
from mvcmovie.domain.movie.port.repository import MovieRepository
from mvcmovie.domain.shared.error import ConcurrencyConflictError
from mvcmovie.infrastructure.persistence.mappers.movie import (
    draft_to_dict,
    movie_to_dict,
    row_to_movie,
)
from mvcmovie.infrastructure.persistence.tables import movies_table


class SQLAlchemyMovieRepository(MovieRepository):
    """Movie persistence on SQLite or PostgreSQL through one session per unit of work."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list(self, criteria: MovieFilter) -> List[Movie]:
        stmt = select(movies_table)
        if criteria.title is not None:
            # LIKE with the store's default collation; % and _ match literally
            stmt = stmt.where(movies_table.c.title.contains(criteria.title, autoescape=True))
        if criteria.genre is not None:
            stmt = stmt.where(movies_table.c.genre == criteria.genre)

        if criteria.sort_by_title:
            stmt = stmt.order_by(movies_table.c.title.asc())
        else:
            stmt = stmt.order_by(movies_table.c.id.asc())

        result = await self.session.execute(stmt)
        return [row_to_movie(dict(r)) for r in result.mappings().all()]

    async def distinct_genres(self) -> List[str]:
        stmt = select(movies_table.c.genre).distinct().order_by(movies_table.c.genre.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_with_genres(self, criteria: MovieFilter) -> Tuple[List[Movie], List[str]]:
        # Both reads run in one serializable transaction and see one snapshot
        await self.session.connection(execution_options={"isolation_level": "SERIALIZABLE"})
        genres = await self.distinct_genres()
        movies = await self.list(criteria)
        return movies, genres

    async def get(self, movie_id: MovieId) -> Movie | None:
        stmt = select(movies_table).where(movies_table.c.id == movie_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_movie(dict(row)) if row else None

    async def exists(self, movie_id: MovieId) -> bool:
        stmt = select(movies_table.c.id).where(movies_table.c.id == movie_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def insert(self, draft: MovieDraft) -> MovieId:
        result = await self.session.execute(insert(movies_table).values(**draft_to_dict(draft)))
        await self.session.flush()
        return MovieId(result.inserted_primary_key[0])

    async def update(self, movie: Movie) -> None:
        stmt = (
            update(movies_table)
            .where(movies_table.c.id == movie.id)
            .values(**movie_to_dict(movie))
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise ConcurrencyConflictError(f"Movie {movie.id} was not updated: no matching row")
        await self.session.flush()

    async def delete(self, movie_id: MovieId) -> bool:
        result = await self.session.execute(
            delete(movies_table).where(movies_table.c.id == movie_id)
        )
        await self.session.flush()
        return result.rowcount > 0
