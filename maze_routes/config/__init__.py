"""
Configuration management for maze_routes.

Quick Start
-----------
>>> from maze_routes.config import MazeConfig
>>> config = MazeConfig(width=20, length=10, wall_bias=40, seed=7)
"""

from .core import (
    DEFAULT_MAX_CELLS,
    LoggingConfig,
    MazeConfig,
    create_default_config,
    create_small_config,
)

__all__ = [
    "DEFAULT_MAX_CELLS",
    "LoggingConfig",
    "MazeConfig",
    "create_default_config",
    "create_small_config",
]
