"""Domain models for restaurant collections."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID, uuid4


class CollectionOwnership(StrEnum):
    """Who put a collection together, relative to the viewer."""

    BY_ME = "By Me"
    BY_US = "By Us"
    BY_OTHERS = "By Others"


@dataclass
class Collection:
    """Named, ordered group of restaurant identities."""

    name: str
    restaurant_ids: list[UUID] = field(default_factory=list)
    creators: tuple[str, ...] = ()
    is_collaborative: bool = False
    id: UUID = field(default_factory=uuid4)

    def ownership(self, owner: str) -> CollectionOwnership:
        """Classify the collection relative to the given owner name."""
        if owner in self.creators and len(self.creators) == 1:
            return CollectionOwnership.BY_ME
        if owner in self.creators:
            return CollectionOwnership.BY_US
        return CollectionOwnership.BY_OTHERS

    @property
    def creator_text(self) -> str:
        """Short label such as ``Julz +2``."""
        if not self.creators:
            return ""
        if len(self.creators) == 1:
            return self.creators[0]
        return f"{self.creators[0]} +{len(self.creators) - 1}"
