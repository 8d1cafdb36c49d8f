"""Domain models for place lookups and shared posts."""

from dataclasses import dataclass

from reeleats.domain.restaurants import (
    Category,
    PriceTier,
    Restaurant,
    SocialSource,
)


@dataclass(frozen=True)
class PlaceResult:
    """Single place returned by a place search or share detection."""

    name: str
    address: str
    latitude: float
    longitude: float
    category: Category
    rating: float
    description: str = ""
    image_url: str | None = None
    distance_km: float | None = None


@dataclass(frozen=True)
class ShareDetection:
    """Outcome of inspecting a shared social post."""

    url: str
    source: SocialSource
    places: tuple[PlaceResult, ...]

    @property
    def detected(self) -> bool:
        """Return True when at least one place was recognized."""
        return bool(self.places)


def restaurant_from_place(
    place: PlaceResult,
    source: SocialSource,
    price: PriceTier = PriceTier.MODERATE,
) -> Restaurant:
    """Build a new catalog entry from a looked-up place."""
    category = place.category
    if category is Category.ALL:
        category = Category.RESTAURANTS
    return Restaurant(
        name=place.name,
        category=category,
        rating=place.rating,
        price=price,
        address=place.address,
        latitude=place.latitude,
        longitude=place.longitude,
        tags=(category.value,),
        source=source,
        description=place.description,
        image_url=place.image_url,
    )
