"""Tests for place search."""

import asyncio
from dataclasses import dataclass, field

from reeleats.adapters.fixture_places import (
    FALLBACK_PLACES,
    FixturePlaceSearchProvider,
)
from reeleats.domain.places import PlaceResult
from reeleats.services.result_cache import InMemoryResultCache
from reeleats.services.search import SearchService
from tests.conftest import FixedClock


@dataclass
class CountingProvider:
    """Provider that records the queries it receives."""

    queries: list[str] = field(default_factory=list)

    async def search(self, query: str) -> list[PlaceResult]:
        self.queries.append(query)
        return await FixturePlaceSearchProvider(latency_seconds=0).search(query)


def test_keyword_search_returns_fixture_places() -> None:
    service = SearchService(
        provider=FixturePlaceSearchProvider(latency_seconds=0),
        cache=InMemoryResultCache(),
    )

    results = asyncio.run(service.search("Best SUSHI in town"))

    assert [place.name for place in results] == [
        "Nobu Melbourne",
        "Kenzan Japanese Restaurant",
    ]


def test_unmatched_query_falls_back() -> None:
    service = SearchService(
        provider=FixturePlaceSearchProvider(latency_seconds=0),
        cache=InMemoryResultCache(),
    )

    results = asyncio.run(service.search("dumplings"))

    assert results == list(FALLBACK_PLACES)


def test_blank_query_skips_provider() -> None:
    provider = CountingProvider()
    service = SearchService(provider=provider, cache=InMemoryResultCache())

    assert asyncio.run(service.search("   ")) == []
    assert provider.queries == []


def test_results_are_cached_by_normalized_query() -> None:
    provider = CountingProvider()
    clock = FixedClock()
    service = SearchService(
        provider=provider,
        cache=InMemoryResultCache(clock=clock),
        cache_ttl_seconds=60,
    )

    first = asyncio.run(service.search("Coffee  Cafe"))
    second = asyncio.run(service.search("coffee cafe"))
    clock.advance(61)
    asyncio.run(service.search("coffee cafe"))

    assert first == second
    assert provider.queries == ["coffee cafe", "coffee cafe"]


def test_zero_ttl_disables_cache() -> None:
    provider = CountingProvider()
    cache = InMemoryResultCache()
    service = SearchService(provider=provider, cache=cache, cache_ttl_seconds=0)

    asyncio.run(service.search("bar"))
    asyncio.run(service.search("bar"))

    assert len(provider.queries) == 2
    assert len(cache) == 0


def test_started_search_completes() -> None:
    service = SearchService(
        provider=FixturePlaceSearchProvider(latency_seconds=0),
        cache=InMemoryResultCache(),
    )

    async def run() -> list[PlaceResult] | None:
        lookup = service.start_search("brunch")
        return await lookup.result()

    results = asyncio.run(run())

    assert results is not None
    assert [place.name for place in results] == ["Higher Ground", "Grain Store"]


def test_cancelled_search_yields_nothing() -> None:
    provider = FixturePlaceSearchProvider(latency_seconds=30)
    cache = InMemoryResultCache()
    service = SearchService(provider=provider, cache=cache)

    async def run():
        lookup = service.start_search("italian")
        await asyncio.sleep(0)
        assert lookup.cancel() is True
        return lookup, await lookup.result()

    lookup, result = asyncio.run(run())

    assert result is None
    assert lookup.cancelled is True
    assert len(cache) == 0


def test_close_cancels_outstanding_searches() -> None:
    service = SearchService(
        provider=FixturePlaceSearchProvider(latency_seconds=30),
        cache=InMemoryResultCache(),
    )

    async def run():
        lookups = [service.start_search("bar"), service.start_search("pasta")]
        await asyncio.sleep(0)
        await service.close()
        return lookups

    lookups = asyncio.run(run())

    assert all(lookup.cancelled for lookup in lookups)
    assert service.tracker.pending == []
