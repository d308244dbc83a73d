"""Command-line interface for SketchGraph."""

import logging
import sys

import click

from .config import EditorSettings
from .errors import SessionLoadError, SessionValidationError
from .output.formatter import format_editor_state
from .resolver.gestures import gesture_table
from .session.runner import replay_file


@click.group()
@click.version_option(package_name="sketchgraph")
def main():
    """SketchGraph: replay and inspect diagram editing sessions."""
    pass


@main.command()
@click.argument("session_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--show-log",
    is_flag=True,
    default=False,
    help="Include the raw interaction log",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail if the graph store rejected any gesture",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to SKETCHGRAPH_LOG_LEVEL)",
)
def replay(
    session_file: str,
    output_format: str,
    show_log: bool,
    strict: bool,
    log_level: str | None,
):
    """Replay a session script and print the resulting diagram.

    SESSION_FILE is the path to a YAML session file.

    Exit codes:
      0 - Replay finished
      1 - A gesture was rejected (with --strict)
      2 - File or schema error
    """
    settings = EditorSettings()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        editor = replay_file(session_file, settings)
    except SessionLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SessionValidationError as e:
        click.echo(f"Session validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)

    click.echo(format_editor_state(editor, output_format, show_log))  # type: ignore

    if strict and editor.failures:
        sys.exit(1)
    sys.exit(0)


@main.command()
def gestures():
    """Print how each (target, tool) click is interpreted."""
    click.echo(f"{'TARGET':<8} {'TOOL':<10} INTENT")
    for target, tool, intent in gesture_table():
        click.echo(f"{target:<8} {tool:<10} {intent.value}")


if __name__ == "__main__":
    main()
