"""Viewer-specific visit status and rating annotations."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from reeleats.domain.errors import InvalidArgumentError
from reeleats.domain.overlays import UserOverlay, VisitStatus, default_overlay
from reeleats.services.catalog import RESTAURANTS_TOPIC
from reeleats.services.events import ChangeEvent, ChangeNotifier, Listener

OVERLAYS_TOPIC = "overlays"
MIN_RATING = 0.0
MAX_RATING = 5.0


class OverlayRepository(Protocol):
    """Storage interface for user overlays."""

    def get(self, restaurant_id: UUID) -> UserOverlay | None:
        """Return the overlay for a restaurant, if present."""

    def save(self, overlay: UserOverlay) -> None:
        """Create or replace the overlay for its restaurant."""

    def delete(self, restaurant_id: UUID) -> bool:
        """Delete an overlay and return True when one existed."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class OverlayService:
    """Keeps interaction state apart from the canonical catalog.

    Overlays are created lazily on first interaction and are not validated
    against the catalog, so an overlay may exist for an unknown restaurant.
    """

    repository: OverlayRepository
    clock: Callable[[], datetime] = _utc_now
    notifier: ChangeNotifier = field(default_factory=ChangeNotifier)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Observe overlay changes."""
        return self.notifier.subscribe(listener)

    def get_overlay(self, restaurant_id: UUID) -> UserOverlay | None:
        """Return the overlay or None when the restaurant was never touched."""
        return self.repository.get(restaurant_id)

    def overlay_or_default(self, restaurant_id: UUID) -> UserOverlay:
        """Return the overlay, falling back to the unvisited default."""
        return self.repository.get(restaurant_id) or default_overlay(restaurant_id)

    def set_visit_status(self, restaurant_id: UUID, status: VisitStatus) -> UserOverlay:
        """Update the visit status, discarding rating and date unless visited."""
        current = self.overlay_or_default(restaurant_id)
        if status is VisitStatus.VISITED:
            updated = replace(
                current,
                status=status,
                visited_at=current.visited_at or self.clock(),
            )
        else:
            updated = replace(current, status=status, rating=0.0, visited_at=None)
        return self._save(updated)

    def set_rating(self, restaurant_id: UUID, rating: float) -> UserOverlay:
        """Rate a restaurant, which implicitly marks it visited."""
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidArgumentError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}: {rating}"
            )
        current = self.overlay_or_default(restaurant_id)
        updated = replace(
            current,
            status=VisitStatus.VISITED,
            rating=float(rating),
            visited_at=current.visited_at or self.clock(),
        )
        return self._save(updated)

    def toggle_visited(self, restaurant_id: UUID) -> UserOverlay:
        """Flip between want-to-visit and visited."""
        current = self.overlay_or_default(restaurant_id)
        if current.status is VisitStatus.VISITED:
            return self.set_visit_status(restaurant_id, VisitStatus.WANT_TO_VISIT)
        return self.set_visit_status(restaurant_id, VisitStatus.VISITED)

    def delete_overlay(self, restaurant_id: UUID) -> bool:
        """Drop the overlay of a restaurant."""
        if not self.repository.delete(restaurant_id):
            return False
        self.notifier.publish(ChangeEvent(OVERLAYS_TOPIC, "deleted", restaurant_id))
        return True

    def handle_catalog_change(self, event: ChangeEvent) -> None:
        """Cascade restaurant removals to their overlays."""
        if event.topic == RESTAURANTS_TOPIC and event.action == "removed":
            if isinstance(event.subject_id, UUID):
                self.delete_overlay(event.subject_id)

    def _save(self, overlay: UserOverlay) -> UserOverlay:
        self.repository.save(overlay)
        self.notifier.publish(
            ChangeEvent(OVERLAYS_TOPIC, "updated", overlay.restaurant_id)
        )
        return overlay
