"""Output formatting for editor state."""

import json
from typing import Literal

from ..editor import Editor
from ..interaction.events import Clicked, ClickedEmpty


def format_editor_state(
    editor: Editor,
    format: Literal["text", "json"] = "text",
    show_log: bool = False,
) -> str:
    """Format the graph, its event history and any failures.

    Args:
        editor: The editor to describe.
        format: Output format ("text" or "json").
        show_log: Include the raw interaction log.

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(editor, show_log)
    return _format_text(editor, show_log)


def _format_text(editor: Editor, show_log: bool) -> str:
    lines: list[str] = []
    store = editor.store

    lines.append("NODES:")
    nodes = list(store.iter_nodes())
    if nodes:
        for node in nodes:
            label = f" '{node.label}'" if node.label else ""
            lines.append(
                f"  #{node.identity}{label} at ({node.position.x:g}, {node.position.y:g})"
            )
    else:
        lines.append("  (none)")

    lines.append("")
    lines.append("EDGES:")
    edges = list(store.iter_edges())
    if edges:
        for edge in edges:
            lines.append(f"  #{edge.identity}: {edge.node_a} -- {edge.node_b}")
    else:
        lines.append("  (none)")

    lines.append("")
    lines.append("GRAPH EVENTS:")
    if len(editor.event_log):
        for event in editor.event_log:
            lines.append(f"  {_describe_event(event)}")
    else:
        lines.append("  (none)")

    if show_log:
        lines.append("")
        lines.append("INTERACTION LOG:")
        for entry in editor.interaction_log:
            lines.append(f"  {_describe_entry(entry)}")

    failures = editor.failures
    if failures:
        lines.append("")
        lines.append("FAILURES:")
        for resolution in failures:
            lines.append(f"  ✘ {resolution.intent.value}: {resolution.error}")

    lines.append("")
    lines.append(
        f"{store.node_count} node(s), {store.edge_count} edge(s), "
        f"tool: {editor.tools.current.value}"
    )
    return "\n".join(lines)


def _describe_event(event) -> str:
    if event.kind in ("added_node", "removed_node"):
        return f"{event.kind} #{event.node.identity}"
    return f"{event.kind} #{event.edge.identity} ({event.edge.node_a} -- {event.edge.node_b})"


def _describe_entry(entry) -> str:
    if isinstance(entry, Clicked):
        return f"clicked {entry.target_kind.value} #{entry.target} with {entry.tool.value}"
    if isinstance(entry, ClickedEmpty):
        return (
            f"clicked empty ({entry.position.x:g}, {entry.position.y:g}) "
            f"with {entry.tool.value}"
        )
    return "--- consumed ---"


def _format_json(editor: Editor, show_log: bool) -> str:
    store = editor.store
    data = {
        "node_count": store.node_count,
        "edge_count": store.edge_count,
        "current_tool": editor.tools.current.value,
        "nodes": [node.model_dump(mode="json") for node in store.iter_nodes()],
        "edges": [edge.model_dump(mode="json") for edge in store.iter_edges()],
        "events": [event.model_dump(mode="json") for event in editor.event_log],
        "failures": [
            {"intent": r.intent.value, "target": r.target, "error": r.error}
            for r in editor.failures
        ],
    }
    if show_log:
        data["interaction_log"] = [
            entry.model_dump(mode="json") for entry in editor.interaction_log
        ]
    return json.dumps(data, indent=2)
