"""Click events and the consumed marker stored in the interaction log."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..graph.models import EntityKind, Position
from .tools import Tool


class Clicked(BaseModel):
    """A click that landed on a placed node or edge."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["clicked"] = "clicked"
    target: int
    target_kind: EntityKind
    tool: Tool
    position: Position | None = None


class ClickedEmpty(BaseModel):
    """A click on empty canvas space."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["clicked_empty"] = "clicked_empty"
    tool: Tool
    position: Position


class Consumed(BaseModel):
    """Marks that the raw clicks before it completed a gesture."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["consumed"] = "consumed"


CONSUMED = Consumed()

ClickEvent = Annotated[Union[Clicked, ClickedEmpty], Field(discriminator="kind")]
LogEntry = Annotated[
    Union[Clicked, ClickedEmpty, Consumed], Field(discriminator="kind")
]


def is_raw(entry: object) -> bool:
    """Check if a log entry is a click rather than a marker."""
    return isinstance(entry, (Clicked, ClickedEmpty))
