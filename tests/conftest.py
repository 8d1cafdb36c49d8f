"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from reeleats.adapters.memory_catalog_repository import (
    InMemoryCollectionRepository,
    InMemoryRestaurantRepository,
)
from reeleats.adapters.memory_overlay_repository import InMemoryOverlayRepository
from reeleats.config import Settings
from reeleats.containers import AppContainer, build_container
from reeleats.domain.restaurants import Category, PriceTier, Restaurant, SocialSource
from reeleats.services.catalog import CatalogService
from reeleats.services.events import ChangeEvent
from reeleats.services.overlays import OverlayService


@dataclass
class FixedClock:
    """Clock that returns a settable instant."""

    now: datetime = field(
        default_factory=lambda: datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@dataclass
class RecordingListener:
    """Listener that keeps every event it receives."""

    events: list[ChangeEvent] = field(default_factory=list)

    def __call__(self, event: ChangeEvent) -> None:
        self.events.append(event)


def make_restaurant(
    name: str,
    category: Category = Category.RESTAURANTS,
    price: PriceTier = PriceTier.MODERATE,
    *,
    tags: tuple[str, ...] = (),
    latitude: float = -37.8136,
    longitude: float = 144.9631,
    source: SocialSource = SocialSource.INSTAGRAM,
) -> Restaurant:
    return Restaurant(
        name=name,
        category=category,
        rating=4.5,
        price=price,
        address=f"{name} St, Melbourne",
        latitude=latitude,
        longitude=longitude,
        tags=tags or (category.value,),
        source=source,
    )


@dataclass
class Scenario:
    """Four restaurants saved in a fresh catalog."""

    catalog: CatalogService
    cafe_a: Restaurant
    bar_b: Restaurant
    cafe_c: Restaurant
    restaurant_d: Restaurant


@pytest.fixture
def settings() -> Settings:
    return Settings(
        seed_demo_catalog=False,
        search_latency_seconds=0,
        share_detection_latency_seconds=0,
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def catalog() -> CatalogService:
    return CatalogService(
        restaurants=InMemoryRestaurantRepository(),
        collections=InMemoryCollectionRepository(),
    )


@pytest.fixture
def overlays(clock: FixedClock) -> OverlayService:
    return OverlayService(InMemoryOverlayRepository(), clock=clock)


@pytest.fixture
def scenario(catalog: CatalogService) -> Scenario:
    cafe_a = make_restaurant("Cafe A", Category.CAFE, PriceTier.MODERATE)
    bar_b = make_restaurant("Bar B", Category.BARS, PriceTier.EXPENSIVE)
    cafe_c = make_restaurant("Cafe C", Category.CAFE, PriceTier.BUDGET)
    restaurant_d = make_restaurant(
        "Restaurant D", Category.RESTAURANTS, PriceTier.MODERATE
    )
    for restaurant in (cafe_a, bar_b, cafe_c, restaurant_d):
        catalog.add(restaurant)
    return Scenario(catalog, cafe_a, bar_b, cafe_c, restaurant_d)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
