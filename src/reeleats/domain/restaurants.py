"""Domain models for catalog restaurants."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID, uuid4


class Category(StrEnum):
    """Closed set of venue categories."""

    ALL = "All"
    RESTAURANTS = "Restaurants"
    CAFE = "Cafe"
    BARS = "Bars"
    BAKERY = "Bakery"
    DESSERTS = "Desserts"
    FAST_FOOD = "Fast Food"
    FINE_DINING = "Fine Dining"


class PriceTier(StrEnum):
    """Closed set of price tiers."""

    BUDGET = "$"
    MODERATE = "$$"
    EXPENSIVE = "$$$"
    LUXURY = "$$$$"


class SocialSource(StrEnum):
    """Where a saved restaurant was discovered."""

    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    WEB = "web"


@dataclass(frozen=True)
class Restaurant:
    """Represents an immutable catalog entry."""

    name: str
    category: Category
    rating: float
    price: PriceTier
    address: str
    latitude: float
    longitude: float
    tags: tuple[str, ...]
    source: SocialSource
    description: str = ""
    image_url: str | None = None
    id: UUID = field(default_factory=uuid4)
