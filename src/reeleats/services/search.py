"""Place search behind a provider seam."""

import logging
import time
from dataclasses import dataclass, field
from typing import Protocol

from reeleats.domain.places import PlaceResult
from reeleats.services.lookups import LookupTracker, PendingLookup
from reeleats.services.result_cache import ResultCache

_logger = logging.getLogger(__name__)


class PlaceSearchProvider(Protocol):
    """Interface for place search backends."""

    async def search(self, query: str) -> list[PlaceResult]:
        """Return places matching a free-text query."""


@dataclass
class SearchService:
    """Runs place searches with caching and cancelable handles."""

    provider: PlaceSearchProvider
    cache: ResultCache
    cache_ttl_seconds: int = 300
    debug: bool = False
    tracker: LookupTracker = field(default_factory=LookupTracker)

    async def search(self, query: str) -> list[PlaceResult]:
        """Search places; a blank query yields no results."""
        normalized = " ".join(query.split()).lower()
        if not normalized:
            return []
        cache_key = f"places:search:{normalized}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return list(cached)

        started = time.perf_counter()
        results = await self.provider.search(normalized)
        self.cache.set(cache_key, list(results), ttl_seconds=self.cache_ttl_seconds)
        if self.debug:
            _logger.info(
                "Place search: query=%s results=%s elapsed_ms=%.1f",
                normalized,
                len(results),
                (time.perf_counter() - started) * 1000,
            )
        return results

    def start_search(self, query: str) -> PendingLookup[list[PlaceResult]]:
        """Start a search on the running loop and return its handle."""
        return self.tracker.track(PendingLookup.start(self.search(query)))

    async def close(self) -> None:
        """Cancel searches that are still in flight."""
        await self.tracker.cancel_all()
