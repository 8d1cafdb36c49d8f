"""Domain models for filter facets."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, StrEnum

from reeleats.domain.restaurants import Restaurant


class SelectionMode(StrEnum):
    """Selection cardinality of a facet."""

    SINGLE = "single"
    MULTI = "multi"


class SelectionState(Enum):
    """Observable state of a facet selection."""

    EMPTY = "empty"
    PARTIALLY_SELECTED = "partially_selected"
    FULLY_SELECTED = "fully_selected"
    SINGLE_SELECTED = "single_selected"


FacetMatcher = Callable[[Restaurant, frozenset[str]], bool]


def match_everything(restaurant: Restaurant, selected: frozenset[str]) -> bool:
    """Matcher for facets that never constrain the result."""
    return True


@dataclass(frozen=True)
class Facet:
    """Filter dimension with a fixed option domain and a current selection."""

    id: str
    label: str
    options: tuple[str, ...]
    mode: SelectionMode
    matcher: FacetMatcher = field(default=match_everything, compare=False)
    reset_options: frozenset[str] = frozenset()
    selected: frozenset[str] = frozenset()

    @property
    def selected_options(self) -> list[str]:
        """Selected options in domain order."""
        return [option for option in self.options if option in self.selected]

    @property
    def state(self) -> SelectionState:
        """Return the selection state of this facet."""
        if not self.selected:
            return SelectionState.EMPTY
        if self.mode is SelectionMode.SINGLE:
            return SelectionState.SINGLE_SELECTED
        if len(self.selected) == len(self.options):
            return SelectionState.FULLY_SELECTED
        return SelectionState.PARTIALLY_SELECTED
