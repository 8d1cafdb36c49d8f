"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from reeleats.adapters.demo_catalog import seed_demo_catalog
from reeleats.adapters.fixture_places import (
    FixturePlaceSearchProvider,
    FixtureSharedPostDetector,
)
from reeleats.adapters.memory_catalog_repository import (
    InMemoryCollectionRepository,
    InMemoryRestaurantRepository,
)
from reeleats.adapters.memory_overlay_repository import InMemoryOverlayRepository
from reeleats.config import Settings
from reeleats.services.catalog import CatalogService
from reeleats.services.collections import CollectionResolver
from reeleats.services.facet_definitions import default_facets, sync_collection_options
from reeleats.services.filters import FacetFilterEngine
from reeleats.services.overlays import OverlayService
from reeleats.services.result_cache import InMemoryResultCache
from reeleats.services.search import PlaceSearchProvider, SearchService
from reeleats.services.share import SharedPostDetector, ShareService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    overlay_service: OverlayService
    filter_engine: FacetFilterEngine
    collection_resolver: CollectionResolver
    search_service: SearchService
    share_service: ShareService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    *,
    search_provider: PlaceSearchProvider | None = None,
    share_detector: SharedPostDetector | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_service = CatalogService(
        restaurants=InMemoryRestaurantRepository(),
        collections=InMemoryCollectionRepository(),
        owner_name=resolved_settings.owner_name,
    )
    overlay_service = OverlayService(InMemoryOverlayRepository())
    catalog_service.subscribe(overlay_service.handle_catalog_change)

    if resolved_settings.seed_demo_catalog:
        seed_demo_catalog(catalog_service)

    filter_engine = FacetFilterEngine()
    for facet in default_facets(
        catalog_service,
        overlay_service,
        resolved_settings.origin_latitude,
        resolved_settings.origin_longitude,
    ):
        filter_engine.register(facet)
    catalog_service.subscribe(sync_collection_options(filter_engine, catalog_service))

    search_service = SearchService(
        provider=search_provider
        or FixturePlaceSearchProvider(
            latency_seconds=resolved_settings.search_latency_seconds
        ),
        cache=InMemoryResultCache(),
        cache_ttl_seconds=resolved_settings.search_cache_ttl_seconds,
        debug=resolved_settings.debug,
    )
    share_service = ShareService(
        detector=share_detector
        or FixtureSharedPostDetector(
            latency_seconds=resolved_settings.share_detection_latency_seconds
        ),
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await search_service.close()
        await share_service.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        overlay_service=overlay_service,
        filter_engine=filter_engine,
        collection_resolver=CollectionResolver(catalog_service),
        search_service=search_service,
        share_service=share_service,
        close_resources=close_resources,
    )
