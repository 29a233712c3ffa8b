"""Unit tests for SummaryService."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from mvcmovie.domain.movie.port.summary import SummaryFetcher
from mvcmovie.domain.movie.service.summary import NO_SUMMARY, SummaryService
from mvcmovie.domain.shared.error import ExternalServiceError
from mvcmovie.infrastructure.cache.summary import InMemorySummaryCache


@pytest.fixture
def mock_fetcher():
    fetcher = AsyncMock(spec=SummaryFetcher)
    fetcher.fetch_extract.return_value = "Alien is a 1979 science fiction horror film."
    return fetcher


@pytest.fixture
def cache() -> InMemorySummaryCache:
    return InMemorySummaryCache(ttl=60, max_entries=10)


@pytest.fixture
def service(mock_fetcher, cache) -> SummaryService:
    return SummaryService(fetcher=mock_fetcher, cache=cache, timeout=1.0)


class TestSummaryService:
    @pytest.mark.asyncio
    async def test_returns_fetched_extract(self, service, mock_fetcher):
        summary = await service.summarize("Alien", "2263")

        assert summary == "Alien is a 1979 science fiction horror film."
        mock_fetcher.fetch_extract.assert_awaited_once_with("Alien", "2263")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,wiki_id",
        [(None, "2263"), ("", "2263"), ("Alien", None), ("Alien", "  ")],
    )
    async def test_blank_input_returns_fallback_without_lookup(
        self, service, mock_fetcher, title, wiki_id
    ):
        assert await service.summarize(title, wiki_id) == NO_SUMMARY
        mock_fetcher.fetch_extract.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_second_lookup_is_served_from_cache(self, service, mock_fetcher):
        first = await service.summarize("Alien", "2263")
        second = await service.summarize("Alien", "2263")

        assert first == second
        mock_fetcher.fetch_extract.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_service_error_returns_fallback(self, service, mock_fetcher, cache):
        mock_fetcher.fetch_extract.side_effect = ExternalServiceError("HTTP 500")

        assert await service.summarize("Alien", "2263") == NO_SUMMARY
        assert cache.get("2263") is None

    @pytest.mark.asyncio
    async def test_timeout_returns_fallback(self, mock_fetcher, cache):
        async def slow(title: str, wiki_id: str) -> str:
            await asyncio.sleep(5)
            return "too late"

        mock_fetcher.fetch_extract.side_effect = slow
        service = SummaryService(fetcher=mock_fetcher, cache=cache, timeout=0.01)

        assert await service.summarize("Alien", "2263") == NO_SUMMARY
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_fallback(self, service, mock_fetcher, cache):
        mock_fetcher.fetch_extract.side_effect = RuntimeError("boom")

        assert await service.summarize("Alien", "2263") == NO_SUMMARY
        assert cache.get("2263") is None

    @pytest.mark.asyncio
    async def test_fallback_is_not_cached(self, service, mock_fetcher):
        mock_fetcher.fetch_extract.side_effect = [
            ExternalServiceError("unavailable"),
            "Recovered extract",
        ]

        assert await service.summarize("Alien", "2263") == NO_SUMMARY
        assert await service.summarize("Alien", "2263") == "Recovered extract"
