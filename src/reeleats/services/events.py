"""Synchronous change notification for the in-memory stores."""

from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class ChangeEvent:
    """Describes a completed mutation."""

    topic: str
    action: str
    subject_id: UUID | str | None = None


Listener = Callable[[ChangeEvent], None]


@dataclass
class ChangeNotifier:
    """Fan-out of change events to subscribed listeners."""

    _listeners: list[Listener] = field(default_factory=list)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self._listeners[:] = [
                item for item in self._listeners if item is not listener
            ]

        return unsubscribe

    def publish(self, event: ChangeEvent) -> None:
        """Call every listener in subscription order."""
        for listener in list(self._listeners):
            listener(event)
