"""Pydantic models for session scripts."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from ..graph.models import Position
from ..interaction.tools import Tool


class Step(BaseModel):
    """One editor action: switch tool, click, or delete the selection."""

    tool: Tool | None = None
    click: Position | None = None
    delete: Literal["selection"] | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_click(cls, data: dict) -> dict:
        """Accept ``click: [x, y]`` and ``click: [x, y, z]`` shorthand."""
        if isinstance(data, dict):
            click = data.get("click")
            if isinstance(click, (list, tuple)):
                if len(click) not in (2, 3):
                    raise ValueError("click must be [x, y] or [x, y, z]")
                data = {**data, "click": dict(zip(("x", "y", "z"), click))}
        return data

    @model_validator(mode="after")
    def exactly_one_action(self) -> "Step":
        actions = [a for a in (self.tool, self.click, self.delete) if a is not None]
        if len(actions) != 1:
            raise ValueError("each step needs exactly one of: tool, click, delete")
        return self


class Session(BaseModel):
    """Root model for a session YAML file."""

    name: str = ""
    initial_tool: Tool | None = None
    steps: list[Step] = Field(default_factory=list)
