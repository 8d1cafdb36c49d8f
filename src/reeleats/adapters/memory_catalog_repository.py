"""In-memory storage for restaurants and collections."""

from dataclasses import dataclass, field, replace
from uuid import UUID

from reeleats.domain.collections import Collection
from reeleats.domain.restaurants import Restaurant
from reeleats.services.catalog import CollectionRepository, RestaurantRepository


@dataclass
class InMemoryRestaurantRepository(RestaurantRepository):
    """Restaurant storage backed by an insertion-ordered dict."""

    restaurants: dict[UUID, Restaurant] = field(default_factory=dict)

    def get(self, restaurant_id: UUID) -> Restaurant | None:
        return self.restaurants.get(restaurant_id)

    def insert(self, restaurant: Restaurant) -> None:
        self.restaurants[restaurant.id] = restaurant

    def delete(self, restaurant_id: UUID) -> bool:
        return self.restaurants.pop(restaurant_id, None) is not None

    def list_restaurants(self) -> list[Restaurant]:
        return list(self.restaurants.values())


@dataclass
class InMemoryCollectionRepository(CollectionRepository):
    """Collection storage that hands out copies of the stored records."""

    collections: dict[UUID, Collection] = field(default_factory=dict)

    def get(self, collection_id: UUID) -> Collection | None:
        collection = self.collections.get(collection_id)
        if collection is None:
            return None
        return _copy(collection)

    def insert(self, collection: Collection) -> None:
        self.collections[collection.id] = _copy(collection)

    def update(self, collection: Collection) -> None:
        self.collections[collection.id] = _copy(collection)

    def list_collections(self) -> list[Collection]:
        return [_copy(collection) for collection in self.collections.values()]


def _copy(collection: Collection) -> Collection:
    return replace(collection, restaurant_ids=list(collection.restaurant_ids))
