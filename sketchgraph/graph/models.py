"""Pydantic models for diagram nodes and edges."""

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict


class EntityKind(str, Enum):
    """Kinds of placed entities a click can land on."""

    NODE = "node"
    EDGE = "edge"


class Position(BaseModel):
    """A point in canvas space."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float = 0.0

    def midpoint(self, other: "Position") -> "Position":
        """Get the point halfway between this position and another."""
        return Position(
            x=(self.x + other.x) / 2,
            y=(self.y + other.y) / 2,
            z=(self.z + other.z) / 2,
        )

    def planar_distance(self, other: "Position") -> float:
        """Distance in the canvas plane, ignoring depth."""
        return math.hypot(self.x - other.x, self.y - other.y)


class Node(BaseModel):
    """A diagram node snapshot."""

    model_config = ConfigDict(frozen=True)

    identity: int
    label: str = ""
    position: Position


class Edge(BaseModel):
    """An undirected connection between two nodes."""

    model_config = ConfigDict(frozen=True)

    identity: int
    node_a: int
    node_b: int

    @property
    def endpoints(self) -> frozenset[int]:
        """The unordered pair of node identities."""
        return frozenset((self.node_a, self.node_b))

    @property
    def is_loop(self) -> bool:
        return self.node_a == self.node_b

    def touches(self, node_id: int) -> bool:
        """Check if the edge is incident to a node."""
        return node_id in (self.node_a, self.node_b)
