"""Faceted filtering over catalog restaurants."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from reeleats.domain.errors import InvalidArgumentError
from reeleats.domain.facets import Facet, SelectionMode, SelectionState
from reeleats.domain.restaurants import Restaurant
from reeleats.services.events import ChangeEvent, ChangeNotifier, Listener

FACETS_TOPIC = "facets"


@dataclass
class FacetFilterEngine:
    """Holds the facet set and evaluates the combined predicate.

    Facets with an empty selection impose no constraint. Selected options of a
    single facet are OR-ed; facets are AND-ed.
    """

    notifier: ChangeNotifier = field(default_factory=ChangeNotifier)
    _facets: dict[str, Facet] = field(default_factory=dict)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Observe selection and option changes."""
        return self.notifier.subscribe(listener)

    def register(self, facet: Facet) -> None:
        """Add a facet, replacing any facet with the same id."""
        self._facets[facet.id] = facet

    def facets(self) -> list[Facet]:
        """Return facets in registration order."""
        return list(self._facets.values())

    def facet(self, facet_id: str) -> Facet:
        """Return a facet or raise InvalidArgumentError."""
        facet = self._facets.get(facet_id)
        if facet is None:
            raise InvalidArgumentError(f"Unknown facet: {facet_id}")
        return facet

    def selection(self, facet_id: str) -> frozenset[str]:
        """Return the current selection of a facet."""
        return self.facet(facet_id).selected

    def state(self, facet_id: str) -> SelectionState:
        """Return the selection state of a facet."""
        return self.facet(facet_id).state

    def toggle_option(self, facet_id: str, option: str) -> Facet:
        """Toggle an option according to the facet's selection mode."""
        facet = self.facet(facet_id)
        if option in facet.reset_options:
            selected: frozenset[str] = frozenset()
        elif option not in facet.options:
            raise InvalidArgumentError(f"Unknown option for {facet_id}: {option}")
        elif option in facet.selected:
            selected = facet.selected - {option}
        elif facet.mode is SelectionMode.SINGLE:
            selected = frozenset({option})
        else:
            selected = facet.selected | {option}
        return self._update(replace(facet, selected=selected), "toggled")

    def clear(self, facet_id: str) -> Facet:
        """Reset one facet to an empty selection."""
        facet = self.facet(facet_id)
        return self._update(replace(facet, selected=frozenset()), "cleared")

    def clear_all(self) -> None:
        """Reset every facet before notifying observers once."""
        for facet_id, facet in self._facets.items():
            self._facets[facet_id] = replace(facet, selected=frozenset())
        self.notifier.publish(ChangeEvent(FACETS_TOPIC, "cleared"))

    def has_active_filters(self) -> bool:
        """Return True when any facet has a non-empty selection."""
        return any(facet.selected for facet in self._facets.values())

    def set_options(self, facet_id: str, options: Iterable[str]) -> Facet:
        """Replace a facet's option domain, dropping stale selections."""
        facet = self.facet(facet_id)
        domain = tuple(dict.fromkeys(options))
        updated = replace(
            facet,
            options=domain,
            selected=frozenset(option for option in facet.selected if option in domain),
        )
        if updated == facet:
            return facet
        return self._update(updated, "options")

    def evaluate(self, restaurants: Iterable[Restaurant]) -> list[Restaurant]:
        """Return the order-preserving subsequence matching every active facet."""
        active = [facet for facet in self._facets.values() if facet.selected]
        return [
            restaurant
            for restaurant in restaurants
            if all(facet.matcher(restaurant, facet.selected) for facet in active)
        ]

    def _update(self, facet: Facet, action: str) -> Facet:
        self._facets[facet.id] = facet
        self.notifier.publish(ChangeEvent(FACETS_TOPIC, action, facet.id))
        return facet
