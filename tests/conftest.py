"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from sketchgraph.config import EditorSettings
from sketchgraph.editor import Editor
from sketchgraph.graph.store import GraphStore
from sketchgraph.interaction.log import InteractionLog
from sketchgraph.resolver.event_log import GraphEventLog
from sketchgraph.resolver.resolver import GestureResolver


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def store() -> GraphStore:
    return GraphStore()


@pytest.fixture
def interaction_log() -> InteractionLog:
    return InteractionLog()


@pytest.fixture
def event_log() -> GraphEventLog:
    return GraphEventLog()


@pytest.fixture
def resolver(store, interaction_log, event_log) -> GestureResolver:
    return GestureResolver(store, interaction_log, event_log)


@pytest.fixture
def settings() -> EditorSettings:
    """Settings that ignore the environment and any .env file."""
    return EditorSettings(_env_file=None)


@pytest.fixture
def editor(settings) -> Editor:
    return Editor(settings)
