"""Request and response models for the HTTP binding."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from reeleats.domain.collections import CollectionOwnership
from reeleats.domain.facets import SelectionMode
from reeleats.domain.overlays import VisitStatus
from reeleats.domain.restaurants import Category, PriceTier, SocialSource


class RestaurantIn(BaseModel):
    """Payload for saving a restaurant."""

    name: str = Field(min_length=1)
    category: Category
    rating: float = Field(ge=0.0, le=5.0)
    price: PriceTier
    address: str = ""
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    tags: list[str] = Field(default_factory=list)
    source: SocialSource = SocialSource.WEB
    description: str = ""
    image_url: str | None = None


class RestaurantOut(BaseModel):
    """Restaurant as shown to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    category: Category
    rating: float
    price: PriceTier
    address: str
    latitude: float
    longitude: float
    tags: list[str]
    source: SocialSource
    description: str
    image_url: str | None


class OverlayOut(BaseModel):
    """Viewer annotation of a restaurant."""

    model_config = ConfigDict(from_attributes=True)

    restaurant_id: UUID
    status: VisitStatus
    rating: float
    visited_at: datetime | None


class OverlayUpdate(BaseModel):
    """Partial overlay update; status is applied before rating."""

    status: VisitStatus | None = None
    rating: float | None = None


class CollectionIn(BaseModel):
    """Payload for creating a collection."""

    name: str
    creators: list[str] | None = None
    is_collaborative: bool = False


class CollectionRename(BaseModel):
    """Payload for renaming a collection."""

    name: str


class CollectionOut(BaseModel):
    """Collection summary."""

    id: UUID
    name: str
    restaurant_ids: list[UUID]
    creators: list[str]
    creator_text: str
    is_collaborative: bool
    ownership: CollectionOwnership


class MembershipIn(BaseModel):
    """Restaurant to add to a collection."""

    restaurant_id: UUID


class FacetOut(BaseModel):
    """Facet with its option domain and current selection."""

    id: str
    label: str
    mode: SelectionMode
    options: list[str]
    selected: list[str]
    state: str


class FacetListOut(BaseModel):
    """Every facet plus whether any of them constrains the list."""

    active: bool
    facets: list[FacetOut]


class ToggleIn(BaseModel):
    """Option to toggle on a facet."""

    option: str


class PlaceOut(BaseModel):
    """Place returned by search or share detection."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    address: str
    latitude: float
    longitude: float
    category: Category
    rating: float
    description: str
    image_url: str | None
    distance_km: float | None


class ShareIn(BaseModel):
    """Shared link to inspect."""

    url: str
    save: bool = False


class ShareDetectionOut(BaseModel):
    """Result of inspecting a shared link."""

    url: str
    source: SocialSource
    detected: bool
    places: list[PlaceOut]
    saved: list[RestaurantOut] = Field(default_factory=list)
