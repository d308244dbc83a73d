"""Graph layer holding diagram nodes and edges in a networkx graph."""

from .models import Edge, EntityKind, Node, Position
from .store import GraphStore

__all__ = [
    "Edge",
    "EntityKind",
    "Node",
    "Position",
    "GraphStore",
]
