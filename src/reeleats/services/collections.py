"""Resolution of collection membership against the live catalog."""

from dataclasses import dataclass
from uuid import UUID

from reeleats.domain.collections import Collection, CollectionOwnership
from reeleats.domain.restaurants import Restaurant
from reeleats.services.catalog import CatalogService
from reeleats.services.filters import FacetFilterEngine


@dataclass
class CollectionResolver:
    """Maps stored collection identities to restaurants still in the catalog."""

    catalog: CatalogService

    def members_of(self, collection_id: UUID) -> list[Restaurant]:
        """Return members in collection order, skipping removed restaurants."""
        collection = self.catalog.require_collection(collection_id)
        members = []
        for restaurant_id in collection.restaurant_ids:
            restaurant = self.catalog.get(restaurant_id)
            if restaurant is not None:
                members.append(restaurant)
        return members

    def intersect_with_facets(
        self, collection_id: UUID, engine: FacetFilterEngine
    ) -> list[Restaurant]:
        """Apply the active facets to a collection's resolved members."""
        return engine.evaluate(self.members_of(collection_id))

    def collections_by_ownership(
        self, ownership: CollectionOwnership | None, owner: str | None = None
    ) -> list[Collection]:
        """Return collections, optionally narrowed to one ownership class."""
        collections = self.catalog.list_collections()
        if ownership is None:
            return collections
        viewer = owner or self.catalog.owner_name
        return [
            collection
            for collection in collections
            if collection.ownership(viewer) is ownership
        ]
