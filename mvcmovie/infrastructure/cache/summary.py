"""In-process TTL cache for Wikipedia summaries."""

import time
from collections import OrderedDict
from collections.abc import Callable

from mvcmovie.domain.movie.port.summary import SummaryCache


class InMemorySummaryCache(SummaryCache):
    """Summaries keyed by wiki id, expiring `ttl` seconds after they were stored.

    Holds at most `max_entries`; the least recently stored entry is evicted first.
    A ttl of 0 disables caching.
    """

    def __init__(
        self,
        ttl: float,
        max_entries: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, str]] = OrderedDict()

    def get(self, wiki_id: str) -> str | None:
        entry = self._entries.get(wiki_id)
        if entry is None:
            return None
        expires_at, summary = entry
        if self._clock() >= expires_at:
            del self._entries[wiki_id]
            return None
        return summary

    def put(self, wiki_id: str, summary: str) -> None:
        if self._ttl <= 0:
            return
        self._entries.pop(wiki_id, None)
        self._entries[wiki_id] = (self._clock() + self._ttl, summary)
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)

    def __len__(self) -> int:
        return len(self._entries)
