"""Tests for mapping MvcMovie errors to HTTP responses."""

from datetime import date

from mvcmovie.application.api.v1.errors import map_error
from mvcmovie.domain.shared.error import (
    ConcurrencyConflictError,
    ExternalServiceError,
    InconsistentStateError,
    InvalidMovieError,
    MissingIdentifierError,
    NotFoundError,
    ValidationError,
)


class TestMapError:
    def test_not_found_is_404(self):
        exc = map_error(NotFoundError("Movie not found: 9"))
        assert exc.status_code == 404
        assert exc.detail == {"code": "NotFoundError", "message": "Movie not found: 9"}

    def test_missing_identifier_is_400(self):
        assert map_error(MissingIdentifierError("Movie id is required")).status_code == 400

    def test_validation_error_is_422(self):
        exc = map_error(ValidationError("too long"))
        assert exc.status_code == 422
        assert exc.detail["code"] == "VALIDATION_ERROR"
        assert "field" not in exc.detail

    def test_invalid_movie_carries_errors_and_input(self):
        error = InvalidMovieError(
            errors={"price": "Input should be a valid decimal"},
            submitted={"title": "Alien", "price": "abc", "release_date": date(1979, 5, 25)},
        )

        exc = map_error(error)

        assert exc.status_code == 422
        assert exc.detail["errors"] == {"price": "Input should be a valid decimal"}
        assert exc.detail["input"] == {
            "title": "Alien",
            "price": "abc",
            "release_date": "1979-05-25",
        }

    def test_conflict_subclass_uses_parent_status(self):
        assert map_error(ConcurrencyConflictError("no rows")).status_code == 409

    def test_external_service_error_is_503(self):
        assert map_error(ExternalServiceError("Wikipedia down")).status_code == 503

    def test_inconsistent_state_is_500(self):
        assert map_error(InconsistentStateError("row exists")).status_code == 500
