"""In-memory storage for user overlays."""

from dataclasses import dataclass, field
from uuid import UUID

from reeleats.domain.overlays import UserOverlay
from reeleats.services.overlays import OverlayRepository


@dataclass
class InMemoryOverlayRepository(OverlayRepository):
    """Overlay storage keyed by restaurant identity."""

    overlays: dict[UUID, UserOverlay] = field(default_factory=dict)

    def get(self, restaurant_id: UUID) -> UserOverlay | None:
        return self.overlays.get(restaurant_id)

    def save(self, overlay: UserOverlay) -> None:
        self.overlays[overlay.restaurant_id] = overlay

    def delete(self, restaurant_id: UUID) -> bool:
        return self.overlays.pop(restaurant_id, None) is not None
