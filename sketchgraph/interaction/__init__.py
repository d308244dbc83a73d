"""Interaction layer: tools, click events and the interaction log."""

from .events import (
    CONSUMED,
    ClickEvent,
    Clicked,
    ClickedEmpty,
    Consumed,
    LogEntry,
    is_raw,
)
from .log import InteractionLog
from .tools import Tool, ToolState

__all__ = [
    "CONSUMED",
    "ClickEvent",
    "Clicked",
    "ClickedEmpty",
    "Consumed",
    "LogEntry",
    "is_raw",
    "InteractionLog",
    "Tool",
    "ToolState",
]
