"""Editor tools and the active-tool state."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Tool(str, Enum):
    """Interaction modes that decide how a click is interpreted."""

    SELECTOR = "selector"
    NODE = "node"
    EDGE = "edge"


class ToolState:
    """Tracks the active tool and the one active before it."""

    def __init__(self, current: Tool = Tool.SELECTOR):
        self.current = Tool(current)
        self.previous: Tool | None = None

    def select(self, tool: Tool) -> None:
        """Make a tool current, remembering the outgoing one.

        Re-selecting the current tool still records it as previous.
        """
        tool = Tool(tool)
        self.previous = self.current
        self.current = tool
        logger.info("Selected the %s tool", tool.value)

    def __repr__(self) -> str:
        previous = self.previous.value if self.previous else None
        return f"ToolState(current={self.current.value!r}, previous={previous!r})"
