"""
Maze structure analysis: reachability, loops and boundary closure.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

import numpy as np

from maze_routes.geometry.mazes.maze_grid import Direction, MazeGrid, Position
from maze_routes.utils.exceptions import validate_position

if TYPE_CHECKING:
    from numpy.typing import NDArray


def bfs_distances(grid: MazeGrid, origin: Position) -> NDArray[np.int64]:
    """
    Breadth-first distances from ``origin`` to every cell.

    Args:
        grid: Maze grid
        origin: Source cell

    Returns:
        Array of shape (width, length) with the number of steps to each cell,
        or -1 where the cell is unreachable
    """
    validate_position(origin, grid.width, grid.length, "origin", component="bfs_distances")

    distances = np.full(grid.shape, -1, dtype=np.int64)
    distances[origin] = 0
    queue = deque([origin])

    while queue:
        current = queue.popleft()
        for direction in Direction:
            if not grid.has_exit(current, direction):
                continue
            dx, dy = direction.offset
            neighbor = (current[0] + dx, current[1] + dy)
            if distances[neighbor] < 0:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)

    return distances


def verify_maze(grid: MazeGrid) -> dict:
    """
    Verify the structural guarantees of a generated maze.

    A valid maze must satisfy:
    1. Connectivity: every cell reachable from the first cell
    2. Boundary closure: right walls on the last column, bottom walls on the last row

    A perfect maze additionally has no loops, i.e. exactly (n-1) passages for n cells.

    Args:
        grid: Maze grid to verify

    Returns:
        Dictionary with verification results including:
        - is_valid: Connected and boundary closed
        - is_perfect: Valid and loop free
        - is_connected: Connectivity check
        - is_boundary_closed: Outer boundary check
        - visited_cells: Number of reachable cells
        - total_cells: Total number of cells
        - passage_count: Number of passages
        - expected_passages: Passages of a loop-free maze
        - loop_count: Passages beyond a spanning tree
    """
    distances = bfs_distances(grid, (0, 0))
    visited_cells = int(np.count_nonzero(distances >= 0))
    total_cells = grid.num_cells
    is_connected = visited_cells == total_cells

    is_boundary_closed = bool(np.all(grid.right_walls[-1, :]) and np.all(grid.down_walls[:, -1]))

    passage_count = grid.passage_count()
    expected_passages = total_cells - 1

    return {
        "is_valid": is_connected and is_boundary_closed,
        "is_perfect": is_connected and is_boundary_closed and passage_count == expected_passages,
        "is_connected": is_connected,
        "is_boundary_closed": is_boundary_closed,
        "visited_cells": visited_cells,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
        "loop_count": max(0, passage_count - expected_passages),
    }
