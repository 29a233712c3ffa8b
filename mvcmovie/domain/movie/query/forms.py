"""Query handlers backing the create, edit and delete forms."""

from datetime import date
from decimal import Decimal

from mvcmovie.domain.movie.model.aggregate import Movie
from mvcmovie.domain.movie.model.value import MovieId
from mvcmovie.domain.movie.service.movie import MovieService, require_id
from mvcmovie.domain.shared.query import Query, QueryHandler, Result


class GetCreateForm(Query):
    pass


class CreateForm(Result):
    title: str
    release_date: date
    genre: str
    price: Decimal
    rating: str
    wiki_id: str | None


class GetEditForm(Query):
    id: int | None = None


class GetDeleteConfirm(Query):
    id: int | None = None


class MovieView(Result):
    id: MovieId
    title: str
    release_date: date
    genre: str
    price: Decimal
    rating: str
    wiki_id: str | None

    @classmethod
    def of(cls, movie: Movie) -> "MovieView":
        return cls.model_validate(movie.model_dump(exclude={"summary"}))


class GetCreateFormHandler(QueryHandler[GetCreateForm, CreateForm]):
    movie_service: MovieService

    async def run(self, cmd: GetCreateForm) -> CreateForm:
        return CreateForm.model_validate(self.movie_service.template().model_dump())


class GetEditFormHandler(QueryHandler[GetEditForm, MovieView]):
    movie_service: MovieService

    async def run(self, cmd: GetEditForm) -> MovieView:
        movie = await self.movie_service.get(require_id(cmd.id))
        return MovieView.of(movie)


class GetDeleteConfirmHandler(QueryHandler[GetDeleteConfirm, MovieView]):
    movie_service: MovieService

    async def run(self, cmd: GetDeleteConfirm) -> MovieView:
        movie = await self.movie_service.get(require_id(cmd.id))
        return MovieView.of(movie)
