"""Placements for live diagram elements, kept in sync from graph events."""

import logging
from dataclasses import dataclass

from .graph.models import EntityKind, Position
from .resolver.event_log import GraphEventLog
from .resolver.events import AddedEdge, AddedNode, RemovedEdge, RemovedNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """Where a placed element sits and what it is."""

    identity: int
    kind: EntityKind
    position: Position


class Scene:
    """Stand-in for the renderer: one placement per live element.

    Nodes sit at their own position, edges at the midpoint of their
    endpoints. The scene learns about the graph only through the event log.
    """

    def __init__(self):
        self._placements: dict[int, Placement] = {}

    def sync(self, event_log: GraphEventLog) -> int:
        """Apply events appended since the last sync.

        Returns:
            The number of events applied.
        """
        events = event_log.take_new()
        for event in events:
            if isinstance(event, AddedNode):
                self._place(event.node.identity, EntityKind.NODE, event.node.position)
            elif isinstance(event, AddedEdge):
                edge = event.edge
                a = self._placements.get(edge.node_a)
                b = self._placements.get(edge.node_b)
                if a is None or b is None:
                    logger.warning("Edge %d has an endpoint with no placement", edge.identity)
                    continue
                self._place(edge.identity, EntityKind.EDGE, a.position.midpoint(b.position))
            elif isinstance(event, (RemovedNode, RemovedEdge)):
                element = event.node if isinstance(event, RemovedNode) else event.edge
                self._placements.pop(element.identity, None)
        return len(events)

    def _place(self, identity: int, kind: EntityKind, position: Position) -> None:
        self._placements[identity] = Placement(identity, kind, position)
        logger.debug("Placed %s %d at (%s, %s)", kind.value, identity, position.x, position.y)

    def pick(self, point: Position, radius: float) -> Placement | None:
        """Find the placement under a point.

        A placement is hit when the point lies strictly within ``radius`` of
        it. Overlapping hits are resolved in favour of the earliest placement.
        """
        hits = [
            placement
            for placement in self._placements.values()
            if point.planar_distance(placement.position) < radius
        ]
        if not hits:
            return None
        if len(hits) > 1:
            logger.debug(
                "Ambiguous click at (%s, %s): %d candidates, taking %d",
                point.x,
                point.y,
                len(hits),
                hits[0].identity,
            )
        return hits[0]

    @property
    def placements(self) -> list[Placement]:
        return list(self._placements.values())

    def __len__(self) -> int:
        return len(self._placements)
