"""DI provider for HTTP infrastructure."""

from typing import AsyncIterable, NewType

import httpx
from dishka import provide

from mvcmovie.config import Config
from mvcmovie.domain.movie.port.summary import SummaryCache, SummaryFetcher
from mvcmovie.infrastructure.cache.summary import InMemorySummaryCache
from mvcmovie.infrastructure.http.wikipedia import WikipediaSummaryFetcher
from mvcmovie.util.di.base import Provider
from mvcmovie.util.di.scope import Scope

SummaryHttpClient = NewType("SummaryHttpClient", httpx.AsyncClient)


class HttpProvider(Provider):
    """DI provider for the Wikipedia summary adapters."""

    @provide(scope=Scope.APP)
    async def get_summary_http_client(self, config: Config) -> AsyncIterable[SummaryHttpClient]:
        """Dedicated HTTP client for Wikipedia lookups."""
        client = httpx.AsyncClient(
            timeout=httpx.Timeout(config.summary.timeout),
            headers={"User-Agent": config.summary.user_agent},
        )
        yield SummaryHttpClient(client)
        await client.aclose()

    @provide(scope=Scope.APP, provides=SummaryFetcher)
    def get_summary_fetcher(
        self, client: SummaryHttpClient, config: Config
    ) -> WikipediaSummaryFetcher:
        return WikipediaSummaryFetcher(client=client, endpoint=config.summary.endpoint)

    @provide(scope=Scope.APP, provides=SummaryCache)
    def get_summary_cache(self, config: Config) -> InMemorySummaryCache:
        return InMemorySummaryCache(
            ttl=config.summary.cache_ttl,
            max_entries=config.summary.cache_max_entries,
        )
