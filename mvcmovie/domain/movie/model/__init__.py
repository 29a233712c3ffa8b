from mvcmovie.domain.movie.model.aggregate import Movie
from mvcmovie.domain.movie.model.value import MovieDraft, MovieFilter, MovieForm, MovieId

__all__ = ["Movie", "MovieDraft", "MovieFilter", "MovieForm", "MovieId"]
