from typing import Any, Dict

from mvcmovie.domain.movie.model.aggregate import Movie
from mvcmovie.domain.movie.model.value import MovieDraft, MovieId


def row_to_movie(row: Dict[str, Any]) -> Movie:
    """Convert a database row to a Movie. summary is never stored."""
    return Movie(
        id=MovieId(row["id"]),
        title=row["title"],
        release_date=row["release_date"],
        genre=row["genre"],
        price=row["price"],
        rating=row["rating"],
        wiki_id=row.get("wiki_id"),
    )


def draft_to_dict(draft: MovieDraft) -> Dict[str, Any]:
    return {
        "title": draft.title,
        "release_date": draft.release_date,
        "genre": draft.genre,
        "price": draft.price,
        "rating": draft.rating,
    }


def movie_to_dict(movie: Movie) -> Dict[str, Any]:
    """Convert a Movie to its column values, excluding the immutable id."""
    return {**draft_to_dict(movie.to_draft()), "wiki_id": movie.wiki_id}
