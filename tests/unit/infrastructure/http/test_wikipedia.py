"""Unit tests for WikipediaSummaryFetcher."""

import httpx
import pytest

from mvcmovie.domain.shared.error import ExternalServiceError
from mvcmovie.infrastructure.http.wikipedia import WikipediaSummaryFetcher

ENDPOINT = "https://en.wikipedia.org/w/api.php"


def make_fetcher(handler) -> WikipediaSummaryFetcher:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return WikipediaSummaryFetcher(client=client, endpoint=ENDPOINT)


def pages(wiki_id: str, extract) -> dict:
    return {"query": {"pages": {wiki_id: {"pageid": int(wiki_id), "extract": extract}}}}


class TestWikipediaSummaryFetcher:
    @pytest.mark.asyncio
    async def test_returns_extract_for_page_id(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=pages("6713", "Conan the Barbarian is a 1982 film."))

        fetcher = make_fetcher(handler)

        extract = await fetcher.fetch_extract("Conan the Barbarian", "6713")

        assert extract == "Conan the Barbarian is a 1982 film."
        params = seen[0].url.params
        assert params["action"] == "query"
        assert params["prop"] == "extracts"
        assert params["exintro"] == "true"
        assert params["titles"] == "Conan the Barbarian"
        assert params["format"] == "json"

    @pytest.mark.asyncio
    async def test_title_is_url_encoded(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=pages("1", "x"))

        await make_fetcher(handler).fetch_extract("Amélie & Co", "1")

        assert seen[0].url.params["titles"] == "Amélie & Co"
        assert "&Co" not in str(seen[0].url)

    @pytest.mark.asyncio
    async def test_missing_page_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=pages("42", "Another page"))

        with pytest.raises(ExternalServiceError):
            await make_fetcher(handler).fetch_extract("Alien", "2263")

    @pytest.mark.asyncio
    async def test_missing_extract_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"query": {"pages": {"2263": {"missing": ""}}}})

        with pytest.raises(ExternalServiceError):
            await make_fetcher(handler).fetch_extract("Alien", "2263")

    @pytest.mark.asyncio
    async def test_non_text_extract_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=pages("2263", None))

        with pytest.raises(ExternalServiceError):
            await make_fetcher(handler).fetch_extract("Alien", "2263")

    @pytest.mark.asyncio
    async def test_http_error_status_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        with pytest.raises(ExternalServiceError):
            await make_fetcher(handler).fetch_extract("Alien", "2263")

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>not json</html>")

        with pytest.raises(ExternalServiceError):
            await make_fetcher(handler).fetch_extract("Alien", "2263")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ExternalServiceError):
            await make_fetcher(handler).fetch_extract("Alien", "2263")
