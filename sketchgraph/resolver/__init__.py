"""Gesture resolution and the graph event log."""

from .event_log import GraphEventLog
from .events import AddedEdge, AddedNode, GraphEvent, RemovedEdge, RemovedNode
from .gestures import GESTURE_TABLE, GestureIntent, classify, gesture_table
from .resolver import GestureResolver, Resolution

__all__ = [
    "GraphEventLog",
    "AddedEdge",
    "AddedNode",
    "GraphEvent",
    "RemovedEdge",
    "RemovedNode",
    "GESTURE_TABLE",
    "GestureIntent",
    "classify",
    "gesture_table",
    "GestureResolver",
    "Resolution",
]
