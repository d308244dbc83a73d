"""Reading session scripts from YAML."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..errors import SessionLoadError, SessionValidationError
from .models import Session


def load_yaml(path: str | Path) -> dict:
    """Read a session file into its raw mapping.

    An empty file is an empty session.

    Raises:
        SessionLoadError: If the file is missing, unreadable, not YAML, or
            its root is not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        reason = "Not a file" if path.exists() else "File not found"
        raise SessionLoadError(reason, str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SessionLoadError(f"Cannot read file: {e}", str(path)) from e

    return _parse_yaml(text, str(path))


def parse_session(path: str | Path) -> Session:
    """Read and validate a session file.

    Raises:
        SessionLoadError: If the file cannot be read or parsed.
        SessionValidationError: If a step is malformed.
    """
    return _build_session(load_yaml(path), str(path))


def parse_session_from_string(yaml_string: str) -> Session:
    """Validate a session given as YAML text."""
    return _build_session(_parse_yaml(yaml_string))


def _parse_yaml(text: str, path: str | None = None) -> dict:
    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SessionLoadError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SessionLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", path
        )
    return data


def _build_session(data: dict, path: str | None = None) -> Session:
    try:
        return Session.model_validate(data)
    except ValidationError as e:
        errors = [_describe_error(err) for err in e.errors()]
        summary = "; ".join(f"{err['loc']}: {err['msg']}" for err in errors[:3])
        raise SessionValidationError(
            f"{len(errors)} invalid entr{'y' if len(errors) == 1 else 'ies'} ({summary})",
            errors,
            path,
        ) from e


def _describe_error(err: dict) -> dict:
    """Name the offending step (1-based) instead of the raw pydantic location."""
    loc = list(err["loc"])
    step = None
    if len(loc) >= 2 and loc[0] == "steps" and isinstance(loc[1], int):
        step = loc[1] + 1
        field = ".".join(str(part) for part in loc[2:])
        where = f"step {step} ({field})" if field else f"step {step}"
    else:
        where = ".".join(str(part) for part in loc) or "session"
    return {"loc": where, "step": step, "msg": err["msg"], "type": err["type"]}
