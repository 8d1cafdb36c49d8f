"""Domain models for viewer-specific restaurant annotations."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class VisitStatus(StrEnum):
    """Visit state of a restaurant for the viewer."""

    UNVISITED = "unvisited"
    WANT_TO_VISIT = "wantToVisit"
    VISITED = "visited"


@dataclass(frozen=True)
class UserOverlay:
    """Per-restaurant annotation kept apart from the catalog entry."""

    restaurant_id: UUID
    status: VisitStatus = VisitStatus.UNVISITED
    rating: float = 0.0
    visited_at: datetime | None = None


def default_overlay(restaurant_id: UUID) -> UserOverlay:
    """Return the implicit overlay of a restaurant nobody has touched."""
    return UserOverlay(restaurant_id=restaurant_id)
