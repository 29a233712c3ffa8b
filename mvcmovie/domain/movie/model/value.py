"""Movie value objects: identifiers, bindable fields and list filters."""

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, NewType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mvcmovie.domain.shared.model.value import ValueObject

MovieId = NewType("MovieId", int)

TITLE_MAX_LENGTH = 60
GENRE_MAX_LENGTH = 30
RATING_MAX_LENGTH = 5

# Fields a client may set on create. Edit additionally binds wiki_id.
CREATE_FIELDS = frozenset({"title", "release_date", "genre", "price", "rating"})
EDIT_FIELDS = CREATE_FIELDS | {"wiki_id"}

Title = Annotated[str, Field(min_length=1, max_length=TITLE_MAX_LENGTH)]
Genre = Annotated[str, Field(min_length=1, max_length=GENRE_MAX_LENGTH)]
Rating = Annotated[str, Field(min_length=1, max_length=RATING_MAX_LENGTH)]
Price = Annotated[Decimal, Field(ge=0, max_digits=18, decimal_places=2)]


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class MovieDraft(ValueObject):
    """The bindable fields of a movie, validated against the store constraints."""

    title: Title
    release_date: date
    genre: Genre
    price: Price
    rating: Rating

    @field_validator("title", "genre", "rating", "release_date", "price", mode="before")
    @classmethod
    def _required(cls, value: Any) -> Any:
        # Blank strings count as "not supplied" rather than as a zero-length value
        return blank_to_none(value)


class MovieForm(BaseModel):
    """A movie submission exactly as the client sent it.

    Everything is optional and loosely typed so that invalid input survives
    long enough to be reported field by field and echoed back.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: int | None = None
    title: str | None = None
    release_date: str | None = None
    genre: str | None = None
    price: str | None = None
    rating: str | None = None
    wiki_id: str | None = None


class MovieFilter(ValueObject):
    """Filters for the movie list. Blank strings mean "no filter"."""

    title: str | None = None
    genre: str | None = None
    sort_by_title: bool = False

    @field_validator("title", "genre", mode="before")
    @classmethod
    def _blank_is_no_filter(cls, value: Any) -> Any:
        return blank_to_none(value)


class MovieTemplate(ValueObject):
    """Pre-filled, unvalidated values for a new movie form."""

    title: str
    release_date: date
    genre: str = ""
    price: Decimal
    rating: str = ""
    wiki_id: str | None = None
