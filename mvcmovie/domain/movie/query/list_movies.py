from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from mvcmovie.domain.movie.model.value import MovieId
from mvcmovie.domain.movie.service.catalog import CatalogService
from mvcmovie.domain.shared.query import Query, QueryHandler, Result


class ListMovies(Query):
    title: str | None = None
    genre: str | None = None
    sort_by_title: bool = False


class MovieSummary(BaseModel):
    id: MovieId
    title: str
    release_date: date
    genre: str
    price: Decimal
    rating: str


class MovieIndex(Result):
    movies: list[MovieSummary]
    genres: list[str]
    title: str | None
    genre: str | None
    sort_by_title: bool


class ListMoviesHandler(QueryHandler[ListMovies, MovieIndex]):
    catalog_service: CatalogService

    async def run(self, cmd: ListMovies) -> MovieIndex:
        page = await self.catalog_service.list(
            title=cmd.title,
            genre=cmd.genre,
            sort_by_title=cmd.sort_by_title,
        )
        return MovieIndex(
            movies=[
                MovieSummary(
                    id=m.id,
                    title=m.title,
                    release_date=m.release_date,
                    genre=m.genre,
                    price=m.price,
                    rating=m.rating,
                )
                for m in page.movies
            ],
            genres=page.genres,
            title=cmd.title,
            genre=cmd.genre,
            sort_by_title=cmd.sort_by_title,
        )
