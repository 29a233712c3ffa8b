"""CatalogService - filtered movie listing and genre options."""

import logging
from dataclasses import dataclass

from mvcmovie.domain.movie.model.aggregate import Movie
from mvcmovie.domain.movie.model.value import MovieFilter
from mvcmovie.domain.movie.port.repository import MovieRepository
from mvcmovie.domain.shared.service import Service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogPage:
    movies: list[Movie]
    genres: list[str]


class CatalogService(Service):
    movie_repo: MovieRepository

    async def list(
        self,
        title: str | None = None,
        genre: str | None = None,
        sort_by_title: bool = False,
    ) -> CatalogPage:
        """List movies matching the filters together with every known genre.

        Genres are taken from the whole table and ignore the filters. Both come
        from the same snapshot, so every listed movie's genre is among them.
        """
        criteria = MovieFilter(title=title, genre=genre, sort_by_title=sort_by_title)
        movies, genres = await self.movie_repo.list_with_genres(criteria)
        logger.debug(
            "Listed %d movies (title=%r, genre=%r, sorted=%s)",
            len(movies),
            criteria.title,
            criteria.genre,
            criteria.sort_by_title,
        )
        return CatalogPage(movies=movies, genres=genres)
