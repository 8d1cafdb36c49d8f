"""Default facet set for the saved-spots view."""

from collections.abc import Callable

from reeleats.domain.facets import Facet, SelectionMode
from reeleats.domain.geo import distance_km
from reeleats.domain.overlays import VisitStatus
from reeleats.domain.restaurants import Category, PriceTier, Restaurant
from reeleats.services.catalog import COLLECTIONS_TOPIC, CatalogService
from reeleats.services.events import ChangeEvent
from reeleats.services.filters import FacetFilterEngine
from reeleats.services.overlays import OverlayService

CATEGORY_FACET = "category"
CUISINE_FACET = "cuisine"
DISTANCE_FACET = "distance"
PRICE_FACET = "price"
VISIT_STATUS_FACET = "visit_status"
OPEN_NOW_FACET = "open_now"
COLLECTIONS_FACET = "collections"

CUISINES = (
    "Italian",
    "Asian",
    "Mexican",
    "Korean",
    "Chinese",
    "Pizza",
    "Burgers",
    "Cafe",
    "Fine Dining",
    "Brunch",
    "Bars",
    "Healthy",
    "Desserts",
    "Seafood",
    "BBQ",
)

WALKING = "Walking (5min)"
SHORT_DRIVE = "Short drive (15min)"
ANYWHERE = "Anywhere"
DISTANCE_LIMITS_KM = {WALKING: 0.4, SHORT_DRIVE: 10.0}

ANY_BUDGET = "Any budget"
PRICE_OPTIONS = (
    PriceTier.BUDGET.value,
    PriceTier.MODERATE.value,
    PriceTier.EXPENSIVE.value,
    ANY_BUDGET,
)

WANT_TO_TRY = "Want to try"
VISITED = "Visited"
BOTH = "Both"

OPEN_NOW = "Open now"


def category_facet() -> Facet:
    def matches(restaurant: Restaurant, selected: frozenset[str]) -> bool:
        return restaurant.category.value in selected

    return Facet(
        id=CATEGORY_FACET,
        label="Category",
        options=tuple(c.value for c in Category if c is not Category.ALL),
        mode=SelectionMode.MULTI,
        matcher=matches,
        reset_options=frozenset({Category.ALL.value}),
    )


def cuisine_facet() -> Facet:
    def matches(restaurant: Restaurant, selected: frozenset[str]) -> bool:
        wanted = {option.casefold() for option in selected}
        return any(tag.casefold() in wanted for tag in restaurant.tags)

    return Facet(
        id=CUISINE_FACET,
        label="Cuisine",
        options=CUISINES,
        mode=SelectionMode.MULTI,
        matcher=matches,
    )


def distance_facet(origin_latitude: float, origin_longitude: float) -> Facet:
    """Distance buckets measured from a fixed origin."""

    def matches(restaurant: Restaurant, selected: frozenset[str]) -> bool:
        limits = [DISTANCE_LIMITS_KM.get(option) for option in selected]
        if any(limit is None for limit in limits):
            return True
        distance = distance_km(
            origin_latitude,
            origin_longitude,
            restaurant.latitude,
            restaurant.longitude,
        )
        return any(distance <= limit for limit in limits if limit is not None)

    return Facet(
        id=DISTANCE_FACET,
        label="Distance",
        options=(WALKING, SHORT_DRIVE, ANYWHERE),
        mode=SelectionMode.SINGLE,
        matcher=matches,
    )


def price_facet() -> Facet:
    def matches(restaurant: Restaurant, selected: frozenset[str]) -> bool:
        return ANY_BUDGET in selected or restaurant.price.value in selected

    return Facet(
        id=PRICE_FACET,
        label="Price",
        options=PRICE_OPTIONS,
        mode=SelectionMode.MULTI,
        matcher=matches,
    )


def visit_status_facet(overlays: OverlayService) -> Facet:
    """Visit status read from the viewer's overlays."""
    accepted = {
        WANT_TO_TRY: {VisitStatus.UNVISITED, VisitStatus.WANT_TO_VISIT},
        VISITED: {VisitStatus.VISITED},
        BOTH: set(VisitStatus),
    }

    def matches(restaurant: Restaurant, selected: frozenset[str]) -> bool:
        status = overlays.overlay_or_default(restaurant.id).status
        return any(status in accepted[option] for option in selected)

    return Facet(
        id=VISIT_STATUS_FACET,
        label="Visit Status",
        options=(WANT_TO_TRY, VISITED, BOTH),
        mode=SelectionMode.SINGLE,
        matcher=matches,
    )


def open_now_facet() -> Facet:
    # No opening hours in the catalog yet, so the toggle never filters.
    return Facet(
        id=OPEN_NOW_FACET,
        label="Open Now",
        options=(OPEN_NOW,),
        mode=SelectionMode.SINGLE,
    )


def collections_facet(catalog: CatalogService) -> Facet:
    """Membership in a named collection; the domain follows the catalog."""

    def matches(restaurant: Restaurant, selected: frozenset[str]) -> bool:
        return any(
            collection.name in selected
            for collection in catalog.collections_containing(restaurant.id)
        )

    return Facet(
        id=COLLECTIONS_FACET,
        label="My Lists",
        options=collection_names(catalog),
        mode=SelectionMode.SINGLE,
        matcher=matches,
    )


def collection_names(catalog: CatalogService) -> tuple[str, ...]:
    """Distinct collection names in creation order."""
    return tuple(
        dict.fromkeys(collection.name for collection in catalog.list_collections())
    )


def default_facets(
    catalog: CatalogService,
    overlays: OverlayService,
    origin_latitude: float,
    origin_longitude: float,
) -> list[Facet]:
    """Build the facet set shown on the saved-spots screen."""
    return [
        category_facet(),
        cuisine_facet(),
        distance_facet(origin_latitude, origin_longitude),
        price_facet(),
        visit_status_facet(overlays),
        open_now_facet(),
        collections_facet(catalog),
    ]


def sync_collection_options(
    engine: FacetFilterEngine, catalog: CatalogService
) -> Callable[[ChangeEvent], None]:
    """Return a catalog listener that keeps the collections facet current."""

    def listener(event: ChangeEvent) -> None:
        if event.topic == COLLECTIONS_TOPIC:
            engine.set_options(COLLECTIONS_FACET, collection_names(catalog))

    return listener
