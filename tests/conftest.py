"""
Pytest configuration and shared fixtures for the maze_routes test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import pytest

import numpy as np

from maze_routes.geometry.mazes import MazeGrid, build_maze
from maze_routes.utils.maze_logging import configure_logging

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)

        # Mark slow tests based on name patterns
        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def _quiet_logging():
    """Keep test output readable; tests that inspect logs reconfigure explicitly."""
    configure_logging(level="WARNING", use_colors=False)
    yield
    configure_logging(level="WARNING", use_colors=False)


# =============================================================================
# Grid Fixtures
# =============================================================================


@pytest.fixture
def pinned_grid():
    """3x3 maze carved with seed 42 and bias 50 (layout pinned in the tests)."""
    return build_maze(3, 3, wall_bias=50, seed=42)


@pytest.fixture
def small_grid():
    """Small reproducible maze."""
    return build_maze(6, 5, wall_bias=50, seed=7)


@pytest.fixture
def medium_grid():
    """Medium reproducible maze."""
    return build_maze(15, 12, wall_bias=50, seed=2024)


@pytest.fixture
def ring_grid():
    """
    3x3 grid whose outer ring is one open corridor around a walled-off center.

    The center cell (1, 1) is unreachable from everywhere else.
    """
    right_walls = np.array(
        [
            [False, True, False],
            [False, True, False],
            [True, True, True],
        ]
    )
    down_walls = np.array(
        [
            [False, False, True],
            [True, True, True],
            [False, False, True],
        ]
    )
    return MazeGrid(right_walls, down_walls)


@pytest.fixture
def open_grid():
    """3x2 grid with no interior walls (contains loops)."""
    right_walls = np.zeros((3, 2), dtype=bool)
    down_walls = np.zeros((3, 2), dtype=bool)
    right_walls[-1, :] = True
    down_walls[:, -1] = True
    return MazeGrid(right_walls, down_walls)
