"""MovieRepository port - persistence interface for movies."""

from abc import abstractmethod
from typing import List, Protocol, Tuple

from mvcmovie.domain.movie.model.aggregate import Movie
from mvcmovie.domain.movie.model.value import MovieDraft, MovieFilter, MovieId
from mvcmovie.domain.shared.port import Port


class MovieRepository(Port, Protocol):
    @abstractmethod
    async def list(self, criteria: MovieFilter) -> List[Movie]: ...

    @abstractmethod
    async def distinct_genres(self) -> List[str]: ...

    @abstractmethod
    async def list_with_genres(self, criteria: MovieFilter) -> Tuple[List[Movie], List[str]]:
        """Filtered movies and all distinct genres, read from one snapshot."""
        ...

    @abstractmethod
    async def get(self, movie_id: MovieId) -> Movie | None: ...

    @abstractmethod
    async def exists(self, movie_id: MovieId) -> bool: ...

    @abstractmethod
    async def insert(self, draft: MovieDraft) -> MovieId: ...

    @abstractmethod
    async def update(self, movie: Movie) -> None:
        """Overwrite a stored movie.

        Raises:
            ConcurrencyConflictError: No row was affected.
        """
        ...

    @abstractmethod
    async def delete(self, movie_id: MovieId) -> bool: ...
