"""Graph store backed by a networkx MultiGraph."""

import itertools
import logging
from typing import Iterator

import networkx as nx

from ..errors import DuplicateEdgeError, NotFoundError, UnknownNodeError
from .models import Edge, Node, Position

logger = logging.getLogger(__name__)


class GraphStore:
    """The single owner of diagram topology.

    Wraps an undirected networkx MultiGraph. Nodes are keyed by their
    identity and edges use their identity as the multigraph key, so
    parallel edges between the same pair stay distinct.

    Node and edge identities come from one arena counter: they are unique
    across both kinds, never reused, and stay valid until the element is
    explicitly removed.
    """

    def __init__(self, allow_duplicate_edges: bool = True):
        """Initialize an empty store.

        Args:
            allow_duplicate_edges: Accept a second edge between a pair of
                nodes that is already connected.
        """
        self._graph = nx.MultiGraph()
        self._edges: dict[int, Edge] = {}
        self._ids = itertools.count()
        self.allow_duplicate_edges = allow_duplicate_edges

    @property
    def graph(self) -> nx.MultiGraph:
        """Get the underlying networkx graph (treat as read-only)."""
        return self._graph

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_node(self, position: Position, label: str = "") -> int:
        """Insert a node.

        Args:
            position: Where the node sits on the canvas.
            label: The node label, empty by default.

        Returns:
            The new node identity.
        """
        node_id = next(self._ids)
        node = Node(identity=node_id, label=label, position=position)
        self._graph.add_node(node_id, node=node)
        logger.debug("Stored node %d at (%s, %s)", node_id, position.x, position.y)
        return node_id

    def add_edge(self, node_a: int, node_b: int) -> int:
        """Connect two live nodes.

        Args:
            node_a: First endpoint identity.
            node_b: Second endpoint identity (may equal ``node_a``).

        Returns:
            The new edge identity.

        Raises:
            UnknownNodeError: If either endpoint is not a live node.
            DuplicateEdgeError: If duplicates are rejected and the pair is
                already connected.
        """
        for node_id in (node_a, node_b):
            if not self._graph.has_node(node_id):
                raise UnknownNodeError(node_id)

        if not self.allow_duplicate_edges and self._graph.has_edge(node_a, node_b):
            raise DuplicateEdgeError(node_a, node_b)

        edge_id = next(self._ids)
        edge = Edge(identity=edge_id, node_a=node_a, node_b=node_b)
        self._graph.add_edge(node_a, node_b, key=edge_id)
        self._edges[edge_id] = edge
        logger.debug("Stored edge %d between %d and %d", edge_id, node_a, node_b)
        return edge_id

    def remove_edge(self, edge_id: int) -> Edge:
        """Remove an edge.

        Returns:
            The removed edge snapshot.

        Raises:
            NotFoundError: If no live edge has this identity.
        """
        edge = self._edges.pop(edge_id, None)
        if edge is None:
            raise NotFoundError(edge_id, "edge")
        self._graph.remove_edge(edge.node_a, edge.node_b, key=edge_id)
        return edge

    def remove_node(self, node_id: int) -> tuple[Node, list[Edge]]:
        """Remove a node and every edge incident to it.

        Returns:
            The removed node snapshot and the cascaded edges, in identity order.

        Raises:
            NotFoundError: If no live node has this identity.
        """
        node = self.get_node(node_id)
        if node is None:
            raise NotFoundError(node_id, "node")

        removed = [self.remove_edge(edge.identity) for edge in self.incident_edges(node_id)]
        self._graph.remove_node(node_id)
        return node, removed

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def lookup(self, identity: int) -> Node | Edge | None:
        """Get the node or edge with this identity, if it is live."""
        node = self.get_node(identity)
        if node is not None:
            return node
        return self.get_edge(identity)

    def get_node(self, node_id: int) -> Node | None:
        """Get a node by identity."""
        if self._graph.has_node(node_id):
            return self._graph.nodes[node_id]["node"]
        return None

    def get_edge(self, edge_id: int) -> Edge | None:
        """Get an edge by identity."""
        return self._edges.get(edge_id)

    def __contains__(self, identity: int) -> bool:
        return self._graph.has_node(identity) or identity in self._edges

    @property
    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate over live nodes in insertion order."""
        for _, data in self._graph.nodes(data=True):
            yield data["node"]

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over live edges in insertion order."""
        yield from self._edges.values()

    def incident_edges(self, node_id: int) -> list[Edge]:
        """Get all edges touching a node, sorted by identity."""
        if not self._graph.has_node(node_id):
            return []
        keys = {key for _, _, key in self._graph.edges(node_id, keys=True)}
        return [self._edges[key] for key in sorted(keys)]

    def edges_between(self, node_a: int, node_b: int) -> list[Edge]:
        """Get all edges connecting an unordered pair of nodes."""
        if not self._graph.has_edge(node_a, node_b):
            return []
        keys = self._graph.get_edge_data(node_a, node_b)
        return [self._edges[key] for key in sorted(keys)]

    def neighbors(self, node_id: int) -> set[int]:
        """Get identities of nodes adjacent to a node."""
        if not self._graph.has_node(node_id):
            return set()
        return set(self._graph.neighbors(node_id))
