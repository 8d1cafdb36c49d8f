"""Sort orders for the saved-spots list."""

from collections.abc import Iterable
from enum import StrEnum

from reeleats.domain.restaurants import Restaurant
from reeleats.services.overlays import OverlayService


class SortOption(StrEnum):
    """User-selectable sort orders."""

    RECENTS = "Recents"
    RECENTLY_ADDED = "Recently added"
    ALPHABETICAL = "Alphabetical"
    RATING = "Rating (high to low)"
    NEWEST = "Newest"


def sort_restaurants(
    restaurants: Iterable[Restaurant],
    option: SortOption,
    overlays: OverlayService,
) -> list[Restaurant]:
    """Order restaurants for display.

    Recency orders assume the input is in insertion order; no per-item
    timestamps are tracked.
    """
    items = list(restaurants)
    if option is SortOption.ALPHABETICAL:
        return sorted(items, key=lambda item: item.name.casefold())
    if option is SortOption.RATING:
        return sorted(
            items,
            key=lambda item: overlays.overlay_or_default(item.id).rating,
            reverse=True,
        )
    return list(reversed(items))
