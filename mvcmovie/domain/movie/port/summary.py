"""Ports for looking up and caching third-party movie summaries."""

from abc import abstractmethod
from typing import Protocol

from mvcmovie.domain.shared.port import Port


class SummaryFetcher(Port, Protocol):
    """Fetches the introductory extract of a Wikipedia page."""

    @abstractmethod
    async def fetch_extract(self, title: str, wiki_id: str) -> str:
        """Return the extract for page `wiki_id` found by querying `title`.

        Raises:
            ExternalServiceError: The lookup failed or the answer had no extract.
        """
        ...


class SummaryCache(Port, Protocol):
    """Keyed by wiki id."""

    @abstractmethod
    def get(self, wiki_id: str) -> str | None: ...

    @abstractmethod
    def put(self, wiki_id: str, summary: str) -> None: ...
