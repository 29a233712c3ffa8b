"""HTTP adapter for the SummaryFetcher port, backed by the Wikipedia query API."""

import logging
from typing import Any

import httpx

from mvcmovie.domain.movie.port.summary import SummaryFetcher
from mvcmovie.domain.shared.error import ExternalServiceError

logger = logging.getLogger(__name__)


class WikipediaSummaryFetcher(SummaryFetcher):
    """Fetches the plain-text introduction of a Wikipedia page using httpx.

    The page is looked up by title; the answer is keyed by page id, which is
    what a movie stores as its wiki id.
    """

    def __init__(self, client: httpx.AsyncClient, endpoint: str) -> None:
        self._client = client
        self._endpoint = endpoint

    async def fetch_extract(self, title: str, wiki_id: str) -> str:
        params = {
            "action": "query",
            "prop": "extracts",
            "exintro": "true",
            "explaintext": "true",
            "titles": title,
            "format": "json",
        }
        try:
            response = await self._client.get(self._endpoint, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Wikipedia request for {title!r} failed: {e}") from e
        except ValueError as e:
            raise ExternalServiceError(f"Wikipedia returned invalid JSON for {title!r}") from e

        return _extract(payload, wiki_id)


def _extract(payload: Any, wiki_id: str) -> str:
    try:
        extract = payload["query"]["pages"][wiki_id]["extract"]
    except (KeyError, TypeError) as e:
        raise ExternalServiceError(f"No extract for Wikipedia page {wiki_id}") from e
    if not isinstance(extract, str):
        raise ExternalServiceError(f"Extract for Wikipedia page {wiki_id} is not text")
    logger.debug("Fetched %d characters for Wikipedia page %s", len(extract), wiki_id)
    return extract
