"""
Logging utilities for maze_routes.

Usage:
    >>> from maze_routes.utils.maze_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Carving maze...")
"""

from __future__ import annotations

from .logger import (
    MazeFormatter,
    MazeLogger,
    configure_development_logging,
    configure_logging,
    get_logger,
    log_performance_metric,
    log_search_completion,
    log_search_start,
)

__all__ = [
    "MazeFormatter",
    "MazeLogger",
    "configure_development_logging",
    "configure_logging",
    "get_logger",
    "log_performance_metric",
    "log_search_completion",
    "log_search_start",
]
