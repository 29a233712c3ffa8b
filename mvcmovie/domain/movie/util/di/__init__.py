from mvcmovie.domain.movie.util.di.provider import MovieProvider

__all__ = ["MovieProvider"]
