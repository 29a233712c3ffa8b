"""Movie aggregate - the sole catalog entity."""

from datetime import date

from mvcmovie.domain.movie.model.value import Genre, MovieDraft, MovieId, Price, Rating, Title
from mvcmovie.domain.shared.model.aggregate import Aggregate


class Movie(Aggregate):
    id: MovieId
    title: Title
    release_date: date
    genre: Genre
    price: Price
    rating: Rating
    wiki_id: str | None = None
    # Filled at display time only, never written back to the store
    summary: str | None = None

    @classmethod
    def from_draft(cls, movie_id: MovieId, draft: MovieDraft, wiki_id: str | None = None) -> "Movie":
        return cls(id=movie_id, wiki_id=wiki_id, **draft.model_dump())

    def to_draft(self) -> MovieDraft:
        return MovieDraft(
            title=self.title,
            release_date=self.release_date,
            genre=self.genre,
            price=self.price,
            rating=self.rating,
        )
