"""MovieService - create, read, update and delete catalog movies."""

import logging
from datetime import UTC, datetime
from decimal import Decimal
from typing import Iterable

from pydantic import ValidationError as PydanticValidationError

from mvcmovie.domain.movie.model.aggregate import Movie
from mvcmovie.domain.movie.model.value import (
    CREATE_FIELDS,
    EDIT_FIELDS,
    MovieDraft,
    MovieForm,
    MovieId,
    MovieTemplate,
    blank_to_none,
)
from mvcmovie.domain.movie.port.repository import MovieRepository
from mvcmovie.domain.shared.error import (
    ConcurrencyConflictError,
    InconsistentStateError,
    InvalidMovieError,
    MissingIdentifierError,
    NotFoundError,
)
from mvcmovie.domain.shared.service import Service

logger = logging.getLogger(__name__)

# Pre-filled values offered by the create form
DEFAULT_TITLE = "Conan the Barbarian"
DEFAULT_PRICE = Decimal("1.99")
DEFAULT_WIKI_ID = "6713"


def require_id(movie_id: int | None) -> MovieId:
    """Reject a request that carries no movie id as not found."""
    if movie_id is None:
        raise NotFoundError("Movie id is required")
    return MovieId(movie_id)


def bind(form: MovieForm, fields: Iterable[str]) -> MovieDraft:
    """Validate the bindable subset of a submission into a MovieDraft.

    Raises:
        InvalidMovieError: One or more fields are missing or violate a constraint.
    """
    submitted = form.model_dump(include=set(fields))
    # Non-draft fields such as id and wiki_id are echoed back but ignored by MovieDraft
    data = {k: v for k, v in submitted.items() if blank_to_none(v) is not None}
    try:
        return MovieDraft.model_validate(data)
    except PydanticValidationError as e:
        errors: dict[str, str] = {}
        for err in e.errors():
            field = ".".join(str(part) for part in err["loc"]) or "__root__"
            errors.setdefault(field, err["msg"])
        raise InvalidMovieError(errors=errors, submitted=submitted) from e


class MovieService(Service):
    movie_repo: MovieRepository

    async def get(self, movie_id: MovieId) -> Movie:
        movie = await self.movie_repo.get(movie_id)
        if movie is None:
            raise NotFoundError(f"Movie not found: {movie_id}")
        return movie

    async def get_for_display(self, movie_id: int | None) -> Movie:
        """Load a movie for the details view.

        Unlike the edit and delete views, a missing id is a malformed request
        here rather than an unknown movie.
        """
        if movie_id is None:
            raise MissingIdentifierError("Movie id is required")
        return await self.get(MovieId(movie_id))

    def template(self) -> MovieTemplate:
        """Values pre-filled into the create form."""
        return MovieTemplate(
            title=DEFAULT_TITLE,
            release_date=datetime.now(UTC).date(),
            price=DEFAULT_PRICE,
            wiki_id=DEFAULT_WIKI_ID,
        )

    async def create(self, form: MovieForm) -> Movie:
        # id and wiki_id are never client-settable on create
        draft = bind(form, CREATE_FIELDS)
        movie_id = await self.movie_repo.insert(draft)
        logger.info("Movie created: %s (%r)", movie_id, draft.title)
        return Movie.from_draft(movie_id, draft)

    async def update(self, movie_id: MovieId, form: MovieForm) -> Movie:
        if form.id != movie_id:
            raise NotFoundError(f"Movie not found: {movie_id} (payload id {form.id})")

        draft = bind(form, EDIT_FIELDS | {"id"})
        movie = Movie.from_draft(movie_id, draft, wiki_id=blank_to_none(form.wiki_id))

        try:
            await self.movie_repo.update(movie)
        except ConcurrencyConflictError as e:
            if not await self.movie_repo.exists(movie_id):
                raise NotFoundError(f"Movie not found: {movie_id}") from e
            raise InconsistentStateError(
                f"Update of movie {movie_id} conflicted although the row still exists"
            ) from e

        logger.info("Movie updated: %s", movie_id)
        return movie

    async def delete(self, movie_id: MovieId) -> bool:
        """Delete a movie. Deleting an already-absent movie is a no-op."""
        movie = await self.movie_repo.get(movie_id)
        if movie is None:
            logger.info("Movie %s already absent, nothing to delete", movie_id)
            return False
        removed = await self.movie_repo.delete(movie_id)
        logger.info("Movie deleted: %s", movie_id)
        return removed

