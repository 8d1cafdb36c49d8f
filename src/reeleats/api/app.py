"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from reeleats.api.models import (
    CollectionIn,
    CollectionOut,
    CollectionRename,
    FacetListOut,
    FacetOut,
    MembershipIn,
    OverlayOut,
    OverlayUpdate,
    PlaceOut,
    RestaurantIn,
    RestaurantOut,
    ShareDetectionOut,
    ShareIn,
    ToggleIn,
)
from reeleats.app_logging import configure_logging
from reeleats.containers import AppContainer
from reeleats.domain.collections import Collection
from reeleats.domain.errors import InvalidArgumentError, NotFoundError
from reeleats.domain.facets import Facet
from reeleats.domain.restaurants import Restaurant
from reeleats.services.sorting import SortOption, sort_restaurants


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Catalog ready: restaurants=%s collections=%s",
            len(app.state.container.catalog_service.all()),
            len(app.state.container.catalog_service.list_collections()),
        )
        yield
        try:
            await app.state.container.close_resources()
        except Exception:
            logger.exception("Failed to release container resources")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument(
        request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/restaurants")
    async def list_restaurants(
        request: Request,
        collection_id: UUID | None = None,
        sort: SortOption | None = None,
    ) -> list[RestaurantOut]:
        """Return the facet-filtered view, optionally scoped to a collection."""
        state_container: AppContainer = request.app.state.container
        engine = state_container.filter_engine
        if collection_id is None:
            restaurants = engine.evaluate(state_container.catalog_service.all())
        else:
            restaurants = state_container.collection_resolver.intersect_with_facets(
                collection_id, engine
            )
        if sort is not None:
            restaurants = sort_restaurants(
                restaurants, sort, state_container.overlay_service
            )
        return [_restaurant_out(restaurant) for restaurant in restaurants]

    @app.post("/restaurants", status_code=status.HTTP_201_CREATED)
    async def create_restaurant(payload: RestaurantIn, request: Request) -> RestaurantOut:
        """Save a restaurant to the catalog."""
        state_container: AppContainer = request.app.state.container
        restaurant = Restaurant(
            name=payload.name,
            category=payload.category,
            rating=payload.rating,
            price=payload.price,
            address=payload.address,
            latitude=payload.latitude,
            longitude=payload.longitude,
            tags=tuple(payload.tags),
            source=payload.source,
            description=payload.description,
            image_url=payload.image_url,
        )
        state_container.catalog_service.add(restaurant)
        return _restaurant_out(restaurant)

    @app.get("/restaurants/{restaurant_id}")
    async def get_restaurant(restaurant_id: UUID, request: Request) -> RestaurantOut:
        """Return a single restaurant."""
        state_container: AppContainer = request.app.state.container
        return _restaurant_out(state_container.catalog_service.require(restaurant_id))

    @app.delete("/restaurants/{restaurant_id}")
    async def delete_restaurant(
        restaurant_id: UUID, request: Request
    ) -> dict[str, bool]:
        """Remove a restaurant; unknown ids are reported, not rejected."""
        state_container: AppContainer = request.app.state.container
        return {"removed": state_container.catalog_service.remove(restaurant_id)}

    @app.get("/restaurants/{restaurant_id}/overlay")
    async def get_overlay(restaurant_id: UUID, request: Request) -> OverlayOut:
        """Return the viewer's annotation, defaulting to unvisited."""
        state_container: AppContainer = request.app.state.container
        overlay = state_container.overlay_service.overlay_or_default(restaurant_id)
        return OverlayOut.model_validate(overlay)

    @app.put("/restaurants/{restaurant_id}/overlay")
    async def update_overlay(
        restaurant_id: UUID, payload: OverlayUpdate, request: Request
    ) -> OverlayOut:
        """Update visit status and/or rating."""
        overlays = request.app.state.container.overlay_service
        overlay = overlays.overlay_or_default(restaurant_id)
        if payload.status is not None:
            overlay = overlays.set_visit_status(restaurant_id, payload.status)
        if payload.rating is not None:
            overlay = overlays.set_rating(restaurant_id, payload.rating)
        return OverlayOut.model_validate(overlay)

    @app.post("/restaurants/{restaurant_id}/visit-toggle")
    async def toggle_visit(restaurant_id: UUID, request: Request) -> OverlayOut:
        """Flip between want-to-visit and visited."""
        overlays = request.app.state.container.overlay_service
        return OverlayOut.model_validate(overlays.toggle_visited(restaurant_id))

    @app.get("/collections")
    async def list_collections(request: Request) -> list[CollectionOut]:
        """Return all collections."""
        state_container: AppContainer = request.app.state.container
        owner = state_container.settings.owner_name
        return [
            _collection_out(collection, owner)
            for collection in state_container.catalog_service.list_collections()
        ]

    @app.post("/collections", status_code=status.HTTP_201_CREATED)
    async def create_collection(
        payload: CollectionIn, request: Request
    ) -> CollectionOut:
        """Create an empty collection."""
        state_container: AppContainer = request.app.state.container
        collection = state_container.catalog_service.create_collection(
            payload.name,
            creators=payload.creators,
            is_collaborative=payload.is_collaborative,
        )
        return _collection_out(collection, state_container.settings.owner_name)

    @app.patch("/collections/{collection_id}")
    async def rename_collection(
        collection_id: UUID, payload: CollectionRename, request: Request
    ) -> CollectionOut:
        """Rename a collection."""
        state_container: AppContainer = request.app.state.container
        collection = state_container.catalog_service.rename_collection(
            collection_id, payload.name
        )
        return _collection_out(collection, state_container.settings.owner_name)

    @app.get("/collections/{collection_id}/restaurants")
    async def collection_members(
        collection_id: UUID, request: Request
    ) -> list[RestaurantOut]:
        """Return the live members of a collection in collection order."""
        resolver = request.app.state.container.collection_resolver
        return [
            _restaurant_out(restaurant)
            for restaurant in resolver.members_of(collection_id)
        ]

    @app.post("/collections/{collection_id}/restaurants")
    async def add_member(
        collection_id: UUID, payload: MembershipIn, request: Request
    ) -> dict[str, bool]:
        """Add a restaurant to a collection."""
        catalog = request.app.state.container.catalog_service
        return {"added": catalog.add_to_collection(payload.restaurant_id, collection_id)}

    @app.delete("/collections/{collection_id}/restaurants/{restaurant_id}")
    async def remove_member(
        collection_id: UUID, restaurant_id: UUID, request: Request
    ) -> dict[str, bool]:
        """Remove a restaurant from a collection."""
        catalog = request.app.state.container.catalog_service
        return {
            "removed": catalog.remove_from_collection(restaurant_id, collection_id)
        }

    @app.get("/facets")
    async def list_facets(request: Request) -> FacetListOut:
        """Return every facet and whether any filter is active."""
        engine = request.app.state.container.filter_engine
        return FacetListOut(
            active=engine.has_active_filters(),
            facets=[_facet_out(facet) for facet in engine.facets()],
        )

    @app.post("/facets/{facet_id}/toggle")
    async def toggle_facet(
        facet_id: str, payload: ToggleIn, request: Request
    ) -> FacetOut:
        """Toggle one option of a facet."""
        engine = request.app.state.container.filter_engine
        return _facet_out(engine.toggle_option(facet_id, payload.option))

    @app.delete("/facets")
    async def clear_facets(request: Request) -> dict[str, bool]:
        """Clear every facet selection."""
        engine = request.app.state.container.filter_engine
        engine.clear_all()
        return {"active": engine.has_active_filters()}

    @app.get("/search")
    async def search_places(q: str, request: Request) -> list[PlaceOut]:
        """Search places to add."""
        search_service = request.app.state.container.search_service
        results = await search_service.search(q)
        return [PlaceOut.model_validate(place) for place in results]

    @app.post("/share/detect")
    async def detect_share(payload: ShareIn, request: Request) -> ShareDetectionOut:
        """Detect restaurants in a shared social post, optionally saving them."""
        state_container: AppContainer = request.app.state.container
        detection = await state_container.share_service.detect(payload.url)
        saved: list[Restaurant] = []
        if payload.save:
            saved = state_container.share_service.save(
                detection, state_container.catalog_service
            )
        return ShareDetectionOut(
            url=detection.url,
            source=detection.source,
            detected=detection.detected,
            places=[PlaceOut.model_validate(place) for place in detection.places],
            saved=[_restaurant_out(restaurant) for restaurant in saved],
        )

    return app


def _restaurant_out(restaurant: Restaurant) -> RestaurantOut:
    return RestaurantOut.model_validate(restaurant)


def _collection_out(collection: Collection, owner: str) -> CollectionOut:
    return CollectionOut(
        id=collection.id,
        name=collection.name,
        restaurant_ids=list(collection.restaurant_ids),
        creators=list(collection.creators),
        creator_text=collection.creator_text,
        is_collaborative=collection.is_collaborative,
        ownership=collection.ownership(owner),
    )


def _facet_out(facet: Facet) -> FacetOut:
    return FacetOut(
        id=facet.id,
        label=facet.label,
        mode=facet.mode,
        options=list(facet.options),
        selected=facet.selected_options,
        state=facet.state.value,
    )
