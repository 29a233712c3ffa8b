"""Unit tests for MovieService."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from mvcmovie.domain.movie.model.aggregate import Movie
from mvcmovie.domain.movie.model.value import CREATE_FIELDS, MovieForm, MovieId
from mvcmovie.domain.movie.service.movie import (
    DEFAULT_PRICE,
    DEFAULT_TITLE,
    DEFAULT_WIKI_ID,
    MovieService,
    bind,
    require_id,
)
from mvcmovie.domain.shared.error import (
    ConcurrencyConflictError,
    InconsistentStateError,
    InvalidMovieError,
    MissingIdentifierError,
    NotFoundError,
)


def make_movie(movie_id: int = 1, **overrides) -> Movie:
    fields = {
        "id": MovieId(movie_id),
        "title": "Alien",
        "release_date": date(1979, 5, 25),
        "genre": "Sci-Fi",
        "price": Decimal("9.99"),
        "rating": "R",
        "wiki_id": "2263",
    }
    fields.update(overrides)
    return Movie(**fields)


def valid_form(**overrides) -> MovieForm:
    fields = {
        "title": "Alien",
        "release_date": "1979-05-25",
        "genre": "Sci-Fi",
        "price": "9.99",
        "rating": "R",
    }
    fields.update(overrides)
    return MovieForm(**fields)


@pytest.fixture
def mock_movie_repo():
    repo = AsyncMock()
    repo.insert.return_value = MovieId(7)
    return repo


@pytest.fixture
def service(mock_movie_repo) -> MovieService:
    return MovieService(movie_repo=mock_movie_repo)


class TestBind:
    def test_valid_form_becomes_draft(self):
        draft = bind(valid_form(), CREATE_FIELDS)

        assert draft.title == "Alien"
        assert draft.release_date == date(1979, 5, 25)
        assert draft.price == Decimal("9.99")

    def test_numeric_price_is_accepted(self):
        form = MovieForm.model_validate({**valid_form().model_dump(), "price": 3})
        draft = bind(form, CREATE_FIELDS)
        assert draft.price == Decimal("3")

    def test_blank_fields_are_reported_as_missing(self):
        form = valid_form(title="   ", genre="")

        with pytest.raises(InvalidMovieError) as exc_info:
            bind(form, CREATE_FIELDS)

        assert set(exc_info.value.errors) == {"title", "genre"}
        # Input is echoed back exactly as submitted
        assert exc_info.value.submitted["title"] == "   "

    def test_constraint_violations_are_reported_per_field(self):
        form = valid_form(title="x" * 61, price="1.999", rating="TOOLONG")

        with pytest.raises(InvalidMovieError) as exc_info:
            bind(form, CREATE_FIELDS)

        assert set(exc_info.value.errors) == {"title", "price", "rating"}

    def test_negative_price_is_rejected(self):
        with pytest.raises(InvalidMovieError) as exc_info:
            bind(valid_form(price="-1"), CREATE_FIELDS)
        assert "price" in exc_info.value.errors

    def test_unparseable_date_is_rejected(self):
        with pytest.raises(InvalidMovieError) as exc_info:
            bind(valid_form(release_date="someday"), CREATE_FIELDS)
        assert list(exc_info.value.errors) == ["release_date"]


class TestRequireId:
    def test_missing_id_is_not_found(self):
        with pytest.raises(NotFoundError):
            require_id(None)

    def test_present_id_passes_through(self):
        assert require_id(3) == MovieId(3)


class TestMovieServiceRead:
    @pytest.mark.asyncio
    async def test_get_returns_movie(self, service, mock_movie_repo):
        mock_movie_repo.get.return_value = make_movie()

        movie = await service.get(MovieId(1))

        assert movie.title == "Alien"
        mock_movie_repo.get.assert_awaited_once_with(MovieId(1))

    @pytest.mark.asyncio
    async def test_get_unknown_movie_raises_not_found(self, service, mock_movie_repo):
        mock_movie_repo.get.return_value = None

        with pytest.raises(NotFoundError):
            await service.get(MovieId(999))

    @pytest.mark.asyncio
    async def test_get_for_display_without_id_is_missing_identifier(self, service, mock_movie_repo):
        with pytest.raises(MissingIdentifierError):
            await service.get_for_display(None)
        mock_movie_repo.get.assert_not_awaited()

    def test_template_has_create_defaults(self, service):
        template = service.template()

        assert template.title == DEFAULT_TITLE
        assert template.price == DEFAULT_PRICE
        assert template.wiki_id == DEFAULT_WIKI_ID
        assert template.genre == ""
        assert template.rating == ""


class TestMovieServiceCreate:
    @pytest.mark.asyncio
    async def test_create_inserts_draft_and_returns_movie(self, service, mock_movie_repo):
        movie = await service.create(valid_form())

        assert movie.id == MovieId(7)
        assert movie.title == "Alien"
        draft = mock_movie_repo.insert.await_args.args[0]
        assert draft.genre == "Sci-Fi"

    @pytest.mark.asyncio
    async def test_create_ignores_client_supplied_id_and_wiki_id(self, service, mock_movie_repo):
        movie = await service.create(valid_form(id=42, wiki_id="999"))

        assert movie.id == MovieId(7)
        assert movie.wiki_id is None

    @pytest.mark.asyncio
    async def test_create_with_invalid_form_does_not_touch_store(self, service, mock_movie_repo):
        with pytest.raises(InvalidMovieError):
            await service.create(valid_form(title=""))
        mock_movie_repo.insert.assert_not_awaited()


class TestMovieServiceUpdate:
    @pytest.mark.asyncio
    async def test_update_persists_all_fields(self, service, mock_movie_repo):
        form = valid_form(id=1, price="11.50", wiki_id="2263")

        movie = await service.update(MovieId(1), form)

        assert movie.price == Decimal("11.50")
        assert movie.wiki_id == "2263"
        mock_movie_repo.update.assert_awaited_once()
        assert mock_movie_repo.update.await_args.args[0].id == MovieId(1)

    @pytest.mark.asyncio
    async def test_blank_wiki_id_is_cleared(self, service, mock_movie_repo):
        movie = await service.update(MovieId(1), valid_form(id=1, wiki_id=""))
        assert movie.wiki_id is None

    @pytest.mark.asyncio
    async def test_mismatched_ids_are_not_found_without_touching_store(
        self, service, mock_movie_repo
    ):
        with pytest.raises(NotFoundError):
            await service.update(MovieId(1), valid_form(id=2))

        mock_movie_repo.update.assert_not_awaited()
        mock_movie_repo.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_payload_id_is_not_found(self, service, mock_movie_repo):
        with pytest.raises(NotFoundError):
            await service.update(MovieId(1), valid_form())
        mock_movie_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_form_is_rejected_before_write(self, service, mock_movie_repo):
        with pytest.raises(InvalidMovieError) as exc_info:
            await service.update(MovieId(1), valid_form(id=1, price="abc"))

        assert "price" in exc_info.value.errors
        assert exc_info.value.submitted["id"] == 1
        mock_movie_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_conflict_on_vanished_row_is_not_found(self, service, mock_movie_repo):
        mock_movie_repo.update.side_effect = ConcurrencyConflictError("no rows")
        mock_movie_repo.exists.return_value = False

        with pytest.raises(NotFoundError):
            await service.update(MovieId(1), valid_form(id=1))

    @pytest.mark.asyncio
    async def test_conflict_on_existing_row_is_inconsistent_state(self, service, mock_movie_repo):
        mock_movie_repo.update.side_effect = ConcurrencyConflictError("no rows")
        mock_movie_repo.exists.return_value = True

        with pytest.raises(InconsistentStateError):
            await service.update(MovieId(1), valid_form(id=1))


class TestMovieServiceDelete:
    @pytest.mark.asyncio
    async def test_delete_existing_movie(self, service, mock_movie_repo):
        mock_movie_repo.get.return_value = make_movie()
        mock_movie_repo.delete.return_value = True

        assert await service.delete(MovieId(1)) is True
        mock_movie_repo.delete.assert_awaited_once_with(MovieId(1))

    @pytest.mark.asyncio
    async def test_delete_absent_movie_is_a_no_op(self, service, mock_movie_repo):
        mock_movie_repo.get.return_value = None

        assert await service.delete(MovieId(1)) is False
        mock_movie_repo.delete.assert_not_awaited()
