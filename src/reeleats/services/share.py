"""Detection of restaurants in shared social posts."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from urllib.parse import urlparse

from reeleats.domain.errors import InvalidArgumentError
from reeleats.domain.places import (
    PlaceResult,
    ShareDetection,
    restaurant_from_place,
)
from reeleats.domain.restaurants import Restaurant, SocialSource
from reeleats.services.catalog import CatalogService
from reeleats.services.lookups import LookupTracker, PendingLookup

_logger = logging.getLogger(__name__)

_SOURCE_HOSTS = {
    SocialSource.INSTAGRAM: ("instagram.com", "instagr.am"),
    SocialSource.TIKTOK: ("tiktok.com",),
}


class SharedPostDetector(Protocol):
    """Interface for extracting places from a shared post."""

    async def detect(self, url: str, source: SocialSource) -> list[PlaceResult]:
        """Return the places mentioned by the post at url."""


def source_for_url(url: str) -> SocialSource:
    """Classify a shared link by the platform it points at."""
    parsed = urlparse(url if "://" in url else f"https://{url}")
    host = (parsed.hostname or "").lower()
    for source, domains in _SOURCE_HOSTS.items():
        if any(host == domain or host.endswith(f".{domain}") for domain in domains):
            return source
    return SocialSource.WEB


@dataclass
class ShareService:
    """Turns shared links into detected places and saved restaurants."""

    detector: SharedPostDetector
    debug: bool = False
    tracker: LookupTracker = field(default_factory=LookupTracker)

    async def detect(self, url: str) -> ShareDetection:
        """Inspect a shared link."""
        cleaned = url.strip()
        if not cleaned:
            raise InvalidArgumentError("Shared link must not be empty")
        source = source_for_url(cleaned)
        places = await self.detector.detect(cleaned, source)
        if self.debug:
            _logger.info(
                "Share detection: source=%s places=%s", source.value, len(places)
            )
        return ShareDetection(url=cleaned, source=source, places=tuple(places))

    def start_detection(self, url: str) -> PendingLookup[ShareDetection]:
        """Start detection on the running loop and return its handle."""
        return self.tracker.track(PendingLookup.start(self.detect(url)))

    def save(
        self,
        detection: ShareDetection,
        catalog: CatalogService,
        names: set[str] | None = None,
    ) -> list[Restaurant]:
        """Add detected places to the catalog, optionally only the named ones."""
        saved = []
        for place in detection.places:
            if names is not None and place.name not in names:
                continue
            restaurant = restaurant_from_place(place, detection.source)
            catalog.add(restaurant)
            saved.append(restaurant)
        return saved

    async def close(self) -> None:
        """Cancel detections that are still in flight."""
        await self.tracker.cancel_all()
