"""
Maze diameter search.

Finds the two cells that are furthest apart along the maze's passages by
running a breadth-first search from every cell. The diameter of a connected
graph is the largest eccentricity over all vertices, so the exhaustive sweep
is exact.

Complexity: O(V^2) for V = width * length cells. Intended for modest mazes;
large grids should be driven in slices through ``DiameterSearch.run``.
"""

from __future__ import annotations

import time
from collections import deque

import numpy as np

from maze_routes.alg.base_solver import ResumableComputation
from maze_routes.geometry.mazes.maze_grid import Direction, MazeGrid, Position
from maze_routes.utils.maze_logging import get_logger, log_performance_metric, log_search_start

logger = get_logger(__name__)


class DiameterSearch(ResumableComputation[tuple[Position, Position]]):
    """
    Resumable all-origins breadth-first sweep.

    One step dequeues and expands one cell of the current origin's search;
    when that search runs dry the origin is scored and the next origin
    starts.

    Attributes:
        origin_index: Index of the current origin (x outer, y inner)
        origin: Current origin cell
        queue: Frontier of the current breadth-first search
        distances: Scratch grid, 1 at the origin and 0 for unvisited cells
        eccentricity: Largest label reached from the current origin
        farthest: First cell that reached ``eccentricity``
        best_origin, best_destination: Best pair so far
        best_label: Label of the best pair (distance + 1)
    """

    name = "DiameterSearch"

    def __init__(self, grid: MazeGrid):
        super().__init__()
        self.grid = grid
        self.distances = np.zeros(grid.shape, dtype=np.int64)
        self.queue: deque[Position] = deque()

        self.origin_index = 0
        self.origin: Position = (0, 0)
        self.eccentricity = 0
        self.farthest: Position = (0, 0)

        self.best_label = 0
        self.best_origin: Position | None = None
        self.best_destination: Position | None = None
        self._start_time = time.perf_counter()

        log_search_start(logger, self.name, {"width": grid.width, "length": grid.length})
        self._start_origin()

    @property
    def distance(self) -> int:
        """Edge count between the best pair found so far."""
        return max(self.best_label - 1, 0)

    def _start_origin(self) -> None:
        self.origin = (self.origin_index // self.grid.length, self.origin_index % self.grid.length)
        self.distances.fill(0)
        self.distances[self.origin] = 1
        self.queue.clear()
        self.queue.append(self.origin)
        self.eccentricity = 1
        self.farthest = self.origin

    def _advance(self) -> None:
        if self.queue:
            self._expand(self.queue.popleft())
        if not self.queue:
            self._finish_origin()

    def _expand(self, current: Position) -> None:
        label = self.distances[current]
        if label > self.eccentricity:
            self.eccentricity = int(label)
            self.farthest = current

        for direction in Direction:
            if not self.grid.has_exit(current, direction):
                continue
            dx, dy = direction.offset
            neighbor = (current[0] + dx, current[1] + dy)
            if self.distances[neighbor] == 0 or label + 1 < self.distances[neighbor]:
                self.distances[neighbor] = label + 1
                self.queue.append(neighbor)

    def _finish_origin(self) -> None:
        # Strictly greater: ties keep the first pair found
        if self.eccentricity > self.best_label:
            self.best_label = self.eccentricity
            self.best_origin = self.origin
            self.best_destination = self.farthest

        self.origin_index += 1
        if self.origin_index < self.grid.num_cells:
            self._start_origin()
            return

        self._result = (self.best_origin, self.best_destination)
        self._finished = True
        log_performance_metric(
            logger,
            f"{self.name} {self.grid.width}x{self.grid.length}",
            time.perf_counter() - self._start_time,
            {
                "steps": self.steps_taken + 1,
                "origin": self.best_origin,
                "destination": self.best_destination,
                "distance": self.distance,
            },
        )


def find_diameter_endpoints(grid: MazeGrid) -> tuple[Position, Position]:
    """
    Find the pair of cells with the greatest passage distance.

    Args:
        grid: Maze grid

    Returns:
        (origin, destination); a single-cell grid returns that cell twice

    Example:
        >>> grid = build_maze(10, 10, seed=7)
        >>> entrance, exit_ = find_diameter_endpoints(grid)
    """
    return DiameterSearch(grid).run_to_completion()
