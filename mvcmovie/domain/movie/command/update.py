import logfire

from mvcmovie.domain.movie.model.value import MovieForm, MovieId
from mvcmovie.domain.movie.service.movie import MovieService
from mvcmovie.domain.shared.command import Command, CommandHandler, Result


class EditMovie(Command):
    id: MovieId
    form: MovieForm


class MovieUpdated(Result):
    id: MovieId


class EditMovieHandler(CommandHandler[EditMovie, MovieUpdated]):
    movie_service: MovieService

    async def run(self, cmd: EditMovie) -> MovieUpdated:
        with logfire.span("EditMovie", movie_id=cmd.id):
            movie = await self.movie_service.update(cmd.id, cmd.form)
            return MovieUpdated(id=movie.id)
