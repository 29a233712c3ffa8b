import logfire

from mvcmovie.domain.movie.model.value import MovieForm, MovieId
from mvcmovie.domain.movie.service.movie import MovieService
from mvcmovie.domain.shared.command import Command, CommandHandler, Result


class CreateMovie(Command):
    form: MovieForm


class MovieCreated(Result):
    id: MovieId


class CreateMovieHandler(CommandHandler[CreateMovie, MovieCreated]):
    movie_service: MovieService

    async def run(self, cmd: CreateMovie) -> MovieCreated:
        with logfire.span("CreateMovie"):
            movie = await self.movie_service.create(cmd.form)
            logfire.info("Movie created", movie_id=movie.id)
            return MovieCreated(id=movie.id)
