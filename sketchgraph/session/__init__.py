"""Session scripts: YAML-described editor actions to replay."""

from ..errors import SessionError, SessionLoadError, SessionValidationError
from .loader import load_yaml, parse_session, parse_session_from_string
from .models import Session, Step
from .runner import replay, replay_file

__all__ = [
    "SessionError",
    "SessionLoadError",
    "SessionValidationError",
    "load_yaml",
    "parse_session",
    "parse_session_from_string",
    "Session",
    "Step",
    "replay",
    "replay_file",
]
