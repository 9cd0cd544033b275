"""
errors.py - Exception hierarchy
================================
Everything the visualizer raises on purpose derives from VisualizerError,
so entry points (CLI, Flask app) can catch one type.

"No path exists" and "no more augmenting paths" are NOT errors: they
surface as step() returning False.
"""


class VisualizerError(Exception):
    """Base class for every deliberate failure in the visualizer."""


class ConfigError(VisualizerError, ValueError):
    """Malformed graph configuration text."""

    def __init__(self, message: str, line_no: int = 0):
        if line_no:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class GraphError(VisualizerError, RuntimeError):
    """Broken topology or a violated algorithm invariant."""


class FrameError(VisualizerError, ValueError):
    """A drawing operation fell outside the frame."""
