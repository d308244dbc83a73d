"""Editor settings loaded with Pydantic Settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .interaction.tools import Tool


class EditorSettings(BaseSettings):
    """Settings read from ``SKETCHGRAPH_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="SKETCHGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    initial_tool: Tool = Tool.SELECTOR
    pick_radius: float = Field(
        default=15.0,
        gt=0,
        description="Distance from a placement's center that still counts as a hit",
    )
    duplicate_edges: Literal["allow", "reject"] = Field(
        default="allow",
        description="Whether a second edge between the same pair of nodes is accepted",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


def get_settings(**overrides) -> EditorSettings:
    """Build settings from the environment, applying explicit overrides."""
    return EditorSettings(**overrides)
