from dishka import provide

from mvcmovie.config import Config
from mvcmovie.domain.movie.command.create import CreateMovieHandler
from mvcmovie.domain.movie.command.delete import DeleteMovieHandler
from mvcmovie.domain.movie.command.update import EditMovieHandler
from mvcmovie.domain.movie.port.repository import MovieRepository
from mvcmovie.domain.movie.port.summary import SummaryCache, SummaryFetcher
from mvcmovie.domain.movie.query.forms import (
    GetCreateFormHandler,
    GetDeleteConfirmHandler,
    GetEditFormHandler,
)
from mvcmovie.domain.movie.query.get_movie import GetMovieDetailHandler
from mvcmovie.domain.movie.query.list_movies import ListMoviesHandler
from mvcmovie.domain.movie.service.catalog import CatalogService
from mvcmovie.domain.movie.service.movie import MovieService
from mvcmovie.domain.movie.service.summary import SummaryService
from mvcmovie.util.di.base import Provider
from mvcmovie.util.di.scope import Scope


class MovieProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_movie_service(self, movie_repo: MovieRepository) -> MovieService:
        return MovieService(movie_repo=movie_repo)

    @provide(scope=Scope.UOW)
    def get_catalog_service(self, movie_repo: MovieRepository) -> CatalogService:
        return CatalogService(movie_repo=movie_repo)

    @provide(scope=Scope.APP)
    def get_summary_service(
        self,
        fetcher: SummaryFetcher,
        cache: SummaryCache,
        config: Config,
    ) -> SummaryService:
        return SummaryService(fetcher=fetcher, cache=cache, timeout=config.summary.timeout)

    # Command Handlers
    create_handler = provide(CreateMovieHandler, scope=Scope.UOW)
    edit_handler = provide(EditMovieHandler, scope=Scope.UOW)
    delete_handler = provide(DeleteMovieHandler, scope=Scope.UOW)

    # Query Handlers
    list_handler = provide(ListMoviesHandler, scope=Scope.UOW)
    detail_handler = provide(GetMovieDetailHandler, scope=Scope.UOW)
    create_form_handler = provide(GetCreateFormHandler, scope=Scope.UOW)
    edit_form_handler = provide(GetEditFormHandler, scope=Scope.UOW)
    delete_confirm_handler = provide(GetDeleteConfirmHandler, scope=Scope.UOW)
