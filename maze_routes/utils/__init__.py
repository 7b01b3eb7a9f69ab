"""
maze_routes utilities.

Organization:
- maze_logging/: Logging configuration and structured log helpers
- exceptions: Structured error types and validation helpers
- route_result: Route result objects (import directly from the submodule)
"""

from .exceptions import (
    ComputationCancelledError,
    ComputationNotFinishedError,
    ConfigurationError,
    InvalidDimensionsError,
    MazeError,
    UnreachableError,
)

__all__ = [
    "ComputationCancelledError",
    "ComputationNotFinishedError",
    "ConfigurationError",
    "InvalidDimensionsError",
    "MazeError",
    "UnreachableError",
]
