"""Append-only log of graph events read by the rendering side."""

from typing import Iterator

from .events import AddedEdge, AddedNode, RemovedEdge, RemovedNode

GraphEventType = AddedNode | AddedEdge | RemovedNode | RemovedEdge


class GraphEventLog:
    """Ordered record of committed graph mutations.

    Consumers either poll ``is_changed``/``latest`` or, preferably, call
    ``take_new`` which hands over each event exactly once, in order.
    """

    def __init__(self):
        self._events: list[GraphEventType] = []
        self._cursor = 0

    def append(self, event: GraphEventType) -> None:
        """Append a committed mutation. Only the gesture resolver calls this."""
        self._events.append(event)

    def latest(self) -> GraphEventType | None:
        """Get the newest event, if any."""
        return self._events[-1] if self._events else None

    def is_changed(self) -> bool:
        """Check if events were appended since the last ``take_new``."""
        return self._cursor < len(self._events)

    def take_new(self) -> list[GraphEventType]:
        """Get events appended since the last call and clear the change flag."""
        new = self._events[self._cursor:]
        self._cursor = len(self._events)
        return new

    @property
    def entries(self) -> tuple[GraphEventType, ...]:
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[GraphEventType]:
        return iter(self._events)
