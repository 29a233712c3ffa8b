"""GetMovieDetail query handler - a movie with its Wikipedia summary."""

from datetime import date
from decimal import Decimal

import logfire

from mvcmovie.domain.movie.model.value import MovieId
from mvcmovie.domain.movie.service.movie import MovieService
from mvcmovie.domain.movie.service.summary import SummaryService
from mvcmovie.domain.shared.query import Query, QueryHandler, Result


class GetMovieDetail(Query):
    id: int | None = None


class MovieDetail(Result):
    id: MovieId
    title: str
    release_date: date
    genre: str
    price: Decimal
    rating: str
    wiki_id: str | None
    summary: str


class GetMovieDetailHandler(QueryHandler[GetMovieDetail, MovieDetail]):
    movie_service: MovieService
    summary_service: SummaryService

    async def run(self, cmd: GetMovieDetail) -> MovieDetail:
        # Raises before any lookup when the movie does not exist
        movie = await self.movie_service.get_for_display(cmd.id)

        with logfire.span("FetchSummary", movie_id=movie.id, wiki_id=movie.wiki_id):
            summary = await self.summary_service.summarize(movie.title, movie.wiki_id)

        return MovieDetail(
            id=movie.id,
            title=movie.title,
            release_date=movie.release_date,
            genre=movie.genre,
            price=movie.price,
            rating=movie.rating,
            wiki_id=movie.wiki_id,
            summary=summary,
        )
