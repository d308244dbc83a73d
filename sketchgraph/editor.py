"""Editor wiring: one click in, one resolver pass, scene brought up to date."""

import logging

from .config import EditorSettings
from .graph.models import EntityKind, Position
from .graph.store import GraphStore
from .interaction.events import Clicked, ClickedEmpty
from .interaction.log import InteractionLog
from .interaction.tools import Tool, ToolState
from .resolver.event_log import GraphEventLog
from .resolver.gestures import GestureIntent
from .resolver.resolver import GestureResolver, Resolution
from .scene import Scene

logger = logging.getLogger(__name__)


class Editor:
    """Owns the editor state and drives it one tick per action.

    A tick is: record a click, run the resolver, sync the scene. Nothing
    here is global; tests build as many editors as they like.
    """

    def __init__(self, settings: EditorSettings | None = None):
        self.settings = settings or EditorSettings()
        self.store = GraphStore(
            allow_duplicate_edges=self.settings.duplicate_edges == "allow"
        )
        self.tools = ToolState(self.settings.initial_tool)
        self.interaction_log = InteractionLog()
        self.event_log = GraphEventLog()
        self.resolver = GestureResolver(self.store, self.interaction_log, self.event_log)
        self.scene = Scene()
        self.selection: tuple[EntityKind, int] | None = None
        self.resolutions: list[Resolution] = []

    def select_tool(self, tool: Tool) -> None:
        self.tools.select(tool)

    def click(self, x: float, y: float, z: float = 0.0) -> Resolution:
        """Click the canvas with the current tool.

        The topmost placement within the pick radius becomes the target;
        otherwise the click lands on empty space.
        """
        point = Position(x=x, y=y, z=z)
        tool = self.tools.current
        hit = self.scene.pick(point, self.settings.pick_radius)

        if hit is None:
            event: Clicked | ClickedEmpty = ClickedEmpty(tool=tool, position=point)
        else:
            event = Clicked(
                target=hit.identity, target_kind=hit.kind, tool=tool, position=point
            )
        return self.record(event)

    def record(self, event: Clicked | ClickedEmpty) -> Resolution:
        """Record a click event and run one tick."""
        self.interaction_log.record(event)
        resolution = self.resolver.run() or Resolution()
        self._finish_tick(resolution)
        return resolution

    def delete_selection(self) -> Resolution:
        """Remove the element last inspected, if any."""
        if self.selection is None:
            logger.debug("Nothing selected to delete")
            return Resolution()

        kind, identity = self.selection
        if kind == EntityKind.NODE:
            resolution = self.resolver.remove_node(identity)
        else:
            resolution = self.resolver.remove_edge(identity)
        self.selection = None
        self._finish_tick(resolution)
        return resolution

    def _finish_tick(self, resolution: Resolution) -> None:
        if resolution.intent == GestureIntent.INSPECT_NODE:
            self.selection = (EntityKind.NODE, resolution.target)
        elif resolution.intent == GestureIntent.INSPECT_EDGE:
            self.selection = (EntityKind.EDGE, resolution.target)
        self.scene.sync(self.event_log)
        self.resolutions.append(resolution)

    @property
    def failures(self) -> list[Resolution]:
        """Get resolutions the store rejected."""
        return [r for r in self.resolutions if r.failed]
