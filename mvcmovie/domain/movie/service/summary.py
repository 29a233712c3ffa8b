"""SummaryService - Wikipedia summaries with timeout, cache and fallback."""

import asyncio
import logging

from mvcmovie.domain.movie.port.summary import SummaryCache, SummaryFetcher
from mvcmovie.domain.shared.error import ExternalServiceError
from mvcmovie.domain.shared.service import Service

logger = logging.getLogger(__name__)

NO_SUMMARY = "No summary was found in Wikipedia"


class SummaryService(Service):
    """Looks up a summary for display. Never raises; degrades to NO_SUMMARY."""

    fetcher: SummaryFetcher
    cache: SummaryCache
    timeout: float

    async def summarize(self, title: str | None, wiki_id: str | None) -> str:
        if not title or not title.strip() or not wiki_id or not wiki_id.strip():
            return NO_SUMMARY

        cached = self.cache.get(wiki_id)
        if cached is not None:
            return cached

        try:
            summary = await asyncio.wait_for(
                self.fetcher.fetch_extract(title, wiki_id),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Summary lookup for %r (wiki id %s) timed out after %ss",
                title,
                wiki_id,
                self.timeout,
            )
            return NO_SUMMARY
        except ExternalServiceError as e:
            logger.warning("Summary lookup for %r (wiki id %s) failed: %s", title, wiki_id, e)
            return NO_SUMMARY
        except Exception:
            logger.exception("Unexpected error looking up summary for %r (wiki id %s)", title, wiki_id)
            return NO_SUMMARY

        # Fallbacks are never cached
        self.cache.put(wiki_id, summary)
        return summary
