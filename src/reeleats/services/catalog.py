"""Restaurant catalog and collection store."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from reeleats.domain.collections import Collection
from reeleats.domain.errors import InvalidArgumentError, NotFoundError
from reeleats.domain.restaurants import Restaurant
from reeleats.services.events import ChangeEvent, ChangeNotifier, Listener

RESTAURANTS_TOPIC = "restaurants"
COLLECTIONS_TOPIC = "collections"

_logger = logging.getLogger(__name__)


class RestaurantRepository(Protocol):
    """Storage interface for catalog restaurants."""

    def get(self, restaurant_id: UUID) -> Restaurant | None:
        """Return a restaurant by id, if present."""

    def insert(self, restaurant: Restaurant) -> None:
        """Append a restaurant to the catalog."""

    def delete(self, restaurant_id: UUID) -> bool:
        """Delete a restaurant and return True when one was removed."""

    def list_restaurants(self) -> list[Restaurant]:
        """Return every restaurant in insertion order."""


class CollectionRepository(Protocol):
    """Storage interface for collections."""

    def get(self, collection_id: UUID) -> Collection | None:
        """Return a collection by id, if present."""

    def insert(self, collection: Collection) -> None:
        """Append a new collection."""

    def update(self, collection: Collection) -> None:
        """Replace the stored state of an existing collection."""

    def list_collections(self) -> list[Collection]:
        """Return every collection in creation order."""


@dataclass
class CatalogService:
    """Owns the canonical restaurant list and the named collections."""

    restaurants: RestaurantRepository
    collections: CollectionRepository
    owner_name: str = "Julz"
    notifier: ChangeNotifier = field(default_factory=ChangeNotifier)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Observe restaurant and collection changes."""
        return self.notifier.subscribe(listener)

    def add(self, restaurant: Restaurant) -> bool:
        """Insert a restaurant unless its identity is already present."""
        if self.restaurants.get(restaurant.id) is not None:
            return False
        self.restaurants.insert(restaurant)
        self.notifier.publish(ChangeEvent(RESTAURANTS_TOPIC, "added", restaurant.id))
        return True

    def remove(self, restaurant_id: UUID) -> bool:
        """Remove a restaurant; unknown identities are ignored."""
        if not self.restaurants.delete(restaurant_id):
            return False
        self.notifier.publish(ChangeEvent(RESTAURANTS_TOPIC, "removed", restaurant_id))
        return True

    def all(self) -> tuple[Restaurant, ...]:
        """Return all restaurants in insertion order."""
        return tuple(self.restaurants.list_restaurants())

    def get(self, restaurant_id: UUID) -> Restaurant | None:
        """Return a restaurant or None when it is not in the catalog."""
        return self.restaurants.get(restaurant_id)

    def require(self, restaurant_id: UUID) -> Restaurant:
        """Return a restaurant or raise NotFoundError."""
        restaurant = self.restaurants.get(restaurant_id)
        if restaurant is None:
            raise NotFoundError(f"Unknown restaurant: {restaurant_id}")
        return restaurant

    def create_collection(
        self,
        name: str,
        *,
        creators: Iterable[str] | None = None,
        is_collaborative: bool = False,
        restaurant_ids: Iterable[UUID] = (),
    ) -> Collection:
        """Create a collection, empty unless restaurant ids are given."""
        cleaned = name.strip()
        if not cleaned:
            raise InvalidArgumentError("Collection name must not be empty")
        collection = Collection(
            name=cleaned,
            restaurant_ids=list(dict.fromkeys(restaurant_ids)),
            creators=tuple(creators) if creators is not None else (self.owner_name,),
            is_collaborative=is_collaborative,
        )
        self.collections.insert(collection)
        self.notifier.publish(ChangeEvent(COLLECTIONS_TOPIC, "created", collection.id))
        return collection

    def rename_collection(self, collection_id: UUID, name: str) -> Collection:
        """Change the display name of a collection."""
        cleaned = name.strip()
        if not cleaned:
            raise InvalidArgumentError("Collection name must not be empty")
        collection = self.require_collection(collection_id)
        collection.name = cleaned
        self.collections.update(collection)
        self.notifier.publish(ChangeEvent(COLLECTIONS_TOPIC, "renamed", collection.id))
        return collection

    def add_to_collection(self, restaurant_id: UUID, collection_id: UUID) -> bool:
        """Append a restaurant to a collection; repeated adds are no-ops."""
        restaurant = self.require(restaurant_id)
        collection = self.require_collection(collection_id)
        if restaurant_id in collection.restaurant_ids:
            return False
        collection.restaurant_ids.append(restaurant_id)
        self.collections.update(collection)
        _logger.info("Added %s to %s", restaurant.name, collection.name)
        self.notifier.publish(ChangeEvent(COLLECTIONS_TOPIC, "updated", collection.id))
        return True

    def remove_from_collection(self, restaurant_id: UUID, collection_id: UUID) -> bool:
        """Drop a restaurant identity from a collection's membership."""
        collection = self.require_collection(collection_id)
        if restaurant_id not in collection.restaurant_ids:
            return False
        collection.restaurant_ids.remove(restaurant_id)
        self.collections.update(collection)
        self.notifier.publish(ChangeEvent(COLLECTIONS_TOPIC, "updated", collection.id))
        return True

    def get_collection(self, collection_id: UUID) -> Collection | None:
        """Return a collection or None."""
        return self.collections.get(collection_id)

    def require_collection(self, collection_id: UUID) -> Collection:
        """Return a collection or raise NotFoundError."""
        collection = self.collections.get(collection_id)
        if collection is None:
            raise NotFoundError(f"Unknown collection: {collection_id}")
        return collection

    def list_collections(self) -> list[Collection]:
        """Return collections in creation order."""
        return self.collections.list_collections()

    def collections_containing(self, restaurant_id: UUID) -> list[Collection]:
        """Return the collections whose membership lists the restaurant."""
        return [
            collection
            for collection in self.collections.list_collections()
            if restaurant_id in collection.restaurant_ids
        ]
