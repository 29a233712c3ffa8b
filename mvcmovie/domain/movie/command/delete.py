import logfire

from mvcmovie.domain.movie.model.value import MovieId
from mvcmovie.domain.movie.service.movie import MovieService
from mvcmovie.domain.shared.command import Command, CommandHandler, Result


class DeleteMovie(Command):
    id: MovieId


class MovieDeleted(Result):
    id: MovieId
    existed: bool


class DeleteMovieHandler(CommandHandler[DeleteMovie, MovieDeleted]):
    movie_service: MovieService

    async def run(self, cmd: DeleteMovie) -> MovieDeleted:
        with logfire.span("DeleteMovie", movie_id=cmd.id):
            existed = await self.movie_service.delete(cmd.id)
            return MovieDeleted(id=cmd.id, existed=existed)
