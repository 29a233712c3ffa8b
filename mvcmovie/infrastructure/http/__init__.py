from mvcmovie.infrastructure.http.di import HttpProvider

__all__ = ["HttpProvider"]
