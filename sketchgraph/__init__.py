"""SketchGraph: the gesture state machine behind a tool-driven diagram editor."""

__version__ = "0.1.0"
