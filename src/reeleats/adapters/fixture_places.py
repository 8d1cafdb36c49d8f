"""Fixture place search and share detection for demos and tests."""

import asyncio
from dataclasses import dataclass, field

from reeleats.domain.places import PlaceResult
from reeleats.domain.restaurants import Category, SocialSource
from reeleats.services.search import PlaceSearchProvider
from reeleats.services.share import SharedPostDetector

_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&w=400"

KEYWORD_FIXTURES: tuple[tuple[tuple[str, ...], tuple[PlaceResult, ...]], ...] = (
    (
        ("italian", "pasta"),
        (
            PlaceResult(
                name="Tipo 00",
                address="361 Little Bourke St, Melbourne",
                latitude=-37.8136,
                longitude=144.9631,
                category=Category.RESTAURANTS,
                rating=4.6,
                description="Contemporary Italian restaurant known for handmade pasta",
                image_url=_UNSPLASH.format("1555396273-367ea4eb4db5"),
                distance_km=1.2,
            ),
            PlaceResult(
                name="Osteria Ilaria",
                address="46 Collins St, Melbourne",
                latitude=-37.8174,
                longitude=144.9685,
                category=Category.RESTAURANTS,
                rating=4.4,
                description="Authentic Italian dining experience",
                distance_km=0.8,
            ),
        ),
    ),
    (
        ("coffee", "cafe"),
        (
            PlaceResult(
                name="Seven Seeds Coffee",
                address="114 Berkeley St, Carlton",
                latitude=-37.7991,
                longitude=144.9658,
                category=Category.CAFE,
                rating=4.5,
                description="Specialty coffee roasters with excellent brews",
                image_url=_UNSPLASH.format("1501339847302-ac426a4a7cbb"),
                distance_km=2.1,
            ),
            PlaceResult(
                name="Market Lane Coffee",
                address="Curtin House, 252 Swanston St",
                latitude=-37.8136,
                longitude=144.9672,
                category=Category.CAFE,
                rating=4.3,
                description="Popular coffee spot in the heart of the city",
                distance_km=0.5,
            ),
        ),
    ),
    (
        ("bar", "drinks"),
        (
            PlaceResult(
                name="Eau De Vie",
                address="1 Malthouse Ln, Melbourne",
                latitude=-37.8174,
                longitude=144.9685,
                category=Category.BARS,
                rating=4.7,
                description="Whiskey bar with extensive selection",
                image_url=_UNSPLASH.format("1514362545857-3bc16c4c7d1b"),
                distance_km=0.9,
            ),
            PlaceResult(
                name="Bomba Tapas Bar",
                address="27 Hardware Ln, Melbourne",
                latitude=-37.8155,
                longitude=144.9665,
                category=Category.BARS,
                rating=4.2,
                description="Spanish tapas and cocktails",
                distance_km=0.7,
            ),
        ),
    ),
    (
        ("sushi", "japanese"),
        (
            PlaceResult(
                name="Nobu Melbourne",
                address="Crown Casino, 8 Whiteman St",
                latitude=-37.8217,
                longitude=144.9584,
                category=Category.RESTAURANTS,
                rating=4.8,
                description="High-end Japanese cuisine",
                image_url=_UNSPLASH.format("1579584425555-c3ce17fd4351"),
                distance_km=1.5,
            ),
            PlaceResult(
                name="Kenzan Japanese Restaurant",
                address="45 Collins St, Melbourne",
                latitude=-37.8174,
                longitude=144.9685,
                category=Category.RESTAURANTS,
                rating=4.3,
                description="Traditional Japanese restaurant",
                distance_km=0.8,
            ),
        ),
    ),
    (
        ("brunch", "breakfast"),
        (
            PlaceResult(
                name="Higher Ground",
                address="650 Little Bourke St, Melbourne",
                latitude=-37.8147,
                longitude=144.9536,
                category=Category.CAFE,
                rating=4.4,
                description="Popular brunch spot with amazing coffee",
                image_url=_UNSPLASH.format("1533089860892-a7c6f0a88666"),
                distance_km=1.8,
            ),
            PlaceResult(
                name="Grain Store",
                address="517 Flinders Ln, Melbourne",
                latitude=-37.8174,
                longitude=144.9685,
                category=Category.CAFE,
                rating=4.2,
                description="Contemporary cafe with healthy options",
                distance_km=1.0,
            ),
        ),
    ),
)

FALLBACK_PLACES = (
    PlaceResult(
        name="Local Favorite Bistro",
        address="123 Collins St, Melbourne",
        latitude=-37.8174,
        longitude=144.9685,
        category=Category.RESTAURANTS,
        rating=4.1,
        description="A hidden gem in the city",
        distance_km=0.6,
    ),
    PlaceResult(
        name="The Corner Cafe",
        address="456 Flinders St, Melbourne",
        latitude=-37.8183,
        longitude=144.9671,
        category=Category.CAFE,
        rating=4.0,
        description="Cozy neighborhood cafe",
        distance_km=1.1,
    ),
)

VUE_DE_MONDE = PlaceResult(
    name="Vue de Monde",
    address="Rialto Tower, 525 Collins St, Melbourne",
    latitude=-37.8187,
    longitude=144.9577,
    category=Category.FINE_DINING,
    rating=4.7,
    description="Fine dining on the 55th floor",
)


@dataclass
class FixturePlaceSearchProvider(PlaceSearchProvider):
    """Keyword-table search that waits to mimic network latency."""

    latency_seconds: float = 1.0
    fixtures: tuple[
        tuple[tuple[str, ...], tuple[PlaceResult, ...]], ...
    ] = KEYWORD_FIXTURES
    fallback: tuple[PlaceResult, ...] = FALLBACK_PLACES

    async def search(self, query: str) -> list[PlaceResult]:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)
        lowered = query.lower()
        results: list[PlaceResult] = []
        for keywords, places in self.fixtures:
            if any(keyword in lowered for keyword in keywords):
                results.extend(places)
        return results or list(self.fallback)


@dataclass
class FixtureSharedPostDetector(SharedPostDetector):
    """Recognizes one fixture restaurant in every post except the listed misses."""

    latency_seconds: float = 2.0
    places: tuple[PlaceResult, ...] = (VUE_DE_MONDE,)
    misses: set[str] = field(default_factory=set)

    async def detect(self, url: str, source: SocialSource) -> list[PlaceResult]:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)
        if url in self.misses:
            return []
        return list(self.places)
