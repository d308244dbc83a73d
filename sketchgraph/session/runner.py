"""Replay session scripts against a fresh editor."""

import logging
from pathlib import Path

from ..config import EditorSettings
from ..editor import Editor
from .loader import parse_session
from .models import Session

logger = logging.getLogger(__name__)


def replay(session: Session, settings: EditorSettings | None = None) -> Editor:
    """Run every step of a session.

    Args:
        session: The parsed session.
        settings: Editor settings; the session's ``initial_tool`` overrides
            the configured one.

    Returns:
        The editor after the last step.
    """
    settings = settings or EditorSettings()
    if session.initial_tool is not None:
        settings = settings.model_copy(update={"initial_tool": session.initial_tool})

    editor = Editor(settings)
    for index, step in enumerate(session.steps):
        if step.tool is not None:
            editor.select_tool(step.tool)
        elif step.click is not None:
            editor.click(step.click.x, step.click.y, step.click.z)
        else:
            editor.delete_selection()
        logger.debug("Step %d done: %s", index, step)

    return editor


def replay_file(path: str | Path, settings: EditorSettings | None = None) -> Editor:
    """Load and replay a session file.

    Raises:
        SessionLoadError: If the file cannot be loaded.
        SessionValidationError: If the session fails validation.
    """
    return replay(parse_session(path), settings)
