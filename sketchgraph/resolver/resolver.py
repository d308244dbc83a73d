"""The gesture resolver: turns the interaction log tail into graph mutations."""

import logging
from dataclasses import dataclass, field

from ..errors import GraphStoreError
from ..graph.store import GraphStore
from ..interaction.events import Clicked, ClickedEmpty, Consumed, is_raw
from ..interaction.log import InteractionLog
from .event_log import GraphEventLog, GraphEventType
from .events import AddedEdge, AddedNode, RemovedEdge, RemovedNode
from .gestures import GestureIntent, classify, is_edge_click_on_node

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """Outcome of one resolver step."""

    intent: GestureIntent = GestureIntent.NONE
    events: list[GraphEventType] = field(default_factory=list)
    consumed: bool = False
    target: int | None = None
    error: str | None = None

    @property
    def committed(self) -> bool:
        """Check if the step changed the graph."""
        return bool(self.events)

    @property
    def failed(self) -> bool:
        """Check if the store rejected the requested mutation."""
        return self.error is not None


class GestureResolver:
    """State machine over the last two interaction log entries.

    The store and both logs are injected; the resolver is the only writer
    of the store and of the graph event log. Gestures span at most two raw
    clicks, and the only two-click gesture is connecting two nodes with the
    edge tool. Every committed mutation is followed by a consumed marker so
    its clicks are never read again.
    """

    def __init__(
        self,
        store: GraphStore,
        interaction_log: InteractionLog,
        event_log: GraphEventLog,
    ):
        self.store = store
        self.interaction_log = interaction_log
        self.event_log = event_log

    def run(self) -> Resolution | None:
        """Resolve once if a click was recorded since the previous run.

        Returns:
            The resolution, or None if the log has not changed.
        """
        if not self.interaction_log.take_change():
            return None
        return self.resolve()

    def resolve(self) -> Resolution:
        """Resolve the current log tail.

        Safe to call repeatedly: once a gesture is committed the tail ends
        in a consumed marker and further calls do nothing.
        """
        last = self.interaction_log.last()
        if last is None or isinstance(last, Consumed):
            return Resolution()

        intent = classify(last)

        if intent == GestureIntent.ADD_NODE:
            return self._add_node(last)
        if intent == GestureIntent.CONNECT_NODES:
            return self._connect_nodes(last)
        if intent in (GestureIntent.INSPECT_NODE, GestureIntent.INSPECT_EDGE):
            logger.debug("Inspecting element %d", last.target)
            return Resolution(intent=intent, target=last.target)

        logger.debug("Click with the %s tool has no gesture", last.tool.value)
        return Resolution()

    # -------------------------------------------------------------------------
    # Click gestures
    # -------------------------------------------------------------------------

    def _add_node(self, click: ClickedEmpty) -> Resolution:
        node_id = self.store.add_node(click.position)
        event = AddedNode(node=self.store.get_node(node_id))
        return self._commit(GestureIntent.ADD_NODE, [event], node_id)

    def _connect_nodes(self, click: Clicked) -> Resolution:
        previous = self.interaction_log.second_to_last()

        if not is_edge_click_on_node(previous):
            # First half of the gesture; it stays pending until the next click.
            return Resolution(intent=GestureIntent.NONE, target=click.target)

        if previous.target == click.target:
            logger.debug("Node %d clicked twice, edge still pending", click.target)
            return Resolution(intent=GestureIntent.NONE, target=click.target)

        try:
            edge_id = self.store.add_edge(previous.target, click.target)
        except GraphStoreError as e:
            logger.warning("Could not connect nodes: %s", e)
            return Resolution(
                intent=GestureIntent.CONNECT_NODES, target=click.target, error=str(e)
            )

        event = AddedEdge(edge=self.store.get_edge(edge_id))
        return self._commit(GestureIntent.CONNECT_NODES, [event], edge_id)

    def _commit(
        self, intent: GestureIntent, events: list[GraphEventType], target: int
    ) -> Resolution:
        for event in events:
            self.event_log.append(event)
        self.interaction_log.mark_consumed()
        logger.info("Committed %s (%d)", intent.value, target)
        return Resolution(intent=intent, events=events, consumed=True, target=target)

    # -------------------------------------------------------------------------
    # Explicit commands
    # -------------------------------------------------------------------------

    def remove_node(self, node_id: int) -> Resolution:
        """Remove a node and its incident edges.

        Appends one ``RemovedEdge`` per cascaded edge, then ``RemovedNode``,
        and retires any click still pending in the interaction log.
        An unknown identity is reported in the resolution and changes nothing.
        """
        try:
            node, edges = self.store.remove_node(node_id)
        except GraphStoreError as e:
            logger.warning("Could not remove node: %s", e)
            return Resolution(intent=GestureIntent.REMOVE_NODE, target=node_id, error=str(e))

        events: list[GraphEventType] = [RemovedEdge(edge=edge) for edge in edges]
        events.append(RemovedNode(node=node))
        for event in events:
            self.event_log.append(event)
        consumed = self._retire_pending()
        logger.info("Removed node %d and %d edge(s)", node_id, len(edges))
        return Resolution(
            intent=GestureIntent.REMOVE_NODE, events=events, target=node_id, consumed=consumed
        )

    def remove_edge(self, edge_id: int) -> Resolution:
        """Remove a single edge."""
        try:
            edge = self.store.remove_edge(edge_id)
        except GraphStoreError as e:
            logger.warning("Could not remove edge: %s", e)
            return Resolution(intent=GestureIntent.REMOVE_EDGE, target=edge_id, error=str(e))

        event = RemovedEdge(edge=edge)
        self.event_log.append(event)
        consumed = self._retire_pending()
        logger.info("Removed edge %d", edge_id)
        return Resolution(
            intent=GestureIntent.REMOVE_EDGE, events=[event], target=edge_id, consumed=consumed
        )

    def _retire_pending(self) -> bool:
        """Consume a trailing raw click so it cannot pair with a later one."""
        if not is_raw(self.interaction_log.last()):
            return False
        self.interaction_log.mark_consumed()
        return True
