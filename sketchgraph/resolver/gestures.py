"""Classification of click events into gesture intents."""

from enum import Enum

from ..graph.models import EntityKind
from ..interaction.events import Clicked, ClickedEmpty, Consumed
from ..interaction.tools import Tool


class GestureIntent(str, Enum):
    """What a click (or explicit command) asks the editor to do."""

    NONE = "none"
    ADD_NODE = "add_node"
    CONNECT_NODES = "connect_nodes"  # second click of a two-click gesture
    INSPECT_NODE = "inspect_node"
    INSPECT_EDGE = "inspect_edge"
    REMOVE_NODE = "remove_node"
    REMOVE_EDGE = "remove_edge"


# (target kind, active tool) -> intent. ``None`` stands for empty space.
#
#   target \ tool | selector      | node          | edge
#   --------------+---------------+---------------+--------------
#   empty         | none          | add_node      | none
#   node          | inspect_node  | inspect_node  | connect_nodes
#   edge          | inspect_edge  | none          | inspect_edge
GESTURE_TABLE: dict[tuple[EntityKind | None, Tool], GestureIntent] = {
    (None, Tool.SELECTOR): GestureIntent.NONE,
    (None, Tool.NODE): GestureIntent.ADD_NODE,
    (None, Tool.EDGE): GestureIntent.NONE,
    (EntityKind.NODE, Tool.SELECTOR): GestureIntent.INSPECT_NODE,
    (EntityKind.NODE, Tool.NODE): GestureIntent.INSPECT_NODE,
    (EntityKind.NODE, Tool.EDGE): GestureIntent.CONNECT_NODES,
    (EntityKind.EDGE, Tool.SELECTOR): GestureIntent.INSPECT_EDGE,
    (EntityKind.EDGE, Tool.NODE): GestureIntent.NONE,
    (EntityKind.EDGE, Tool.EDGE): GestureIntent.INSPECT_EDGE,
}


def classify(entry: Clicked | ClickedEmpty | Consumed | None) -> GestureIntent:
    """Look up the intent of a single log entry.

    Markers and a missing entry classify as ``NONE``.
    """
    if isinstance(entry, Clicked):
        return GESTURE_TABLE[(entry.target_kind, entry.tool)]
    if isinstance(entry, ClickedEmpty):
        return GESTURE_TABLE[(None, entry.tool)]
    return GestureIntent.NONE


def is_edge_click_on_node(entry: object) -> bool:
    """Check if an entry is a node click made with the edge tool."""
    return (
        isinstance(entry, Clicked)
        and entry.target_kind == EntityKind.NODE
        and entry.tool == Tool.EDGE
    )


def gesture_table() -> list[tuple[str, str, GestureIntent]]:
    """Get the table as ``(target, tool, intent)`` rows for display."""
    return [
        (kind.value if kind else "empty", tool.value, intent)
        for (kind, tool), intent in GESTURE_TABLE.items()
    ]
