"""
Best-first shortest-path search.

The search is seeded at the goal and expands toward the start, ordered by
cost-so-far plus the Manhattan distance to the start. With unit edge costs
and axis-aligned moves the heuristic is admissible and consistent, so the
cost recorded for the start when it is popped is optimal.

Once the start is reached, the route is read off by walking downhill on the
recorded costs from the start to the goal: at each cell the first open
direction (UP, RIGHT, DOWN, LEFT) whose neighbour has a smaller recorded cost
is taken.
"""

from __future__ import annotations

import heapq
import time
from enum import Enum

import numpy as np

from maze_routes.alg.base_solver import ResumableComputation
from maze_routes.geometry.mazes.maze_grid import Direction, Edge, MazeGrid, Position
from maze_routes.utils.exceptions import MazeError, UnreachableError, validate_position
from maze_routes.utils.maze_logging import get_logger, log_performance_metric, log_search_start
from maze_routes.utils.route_result import Route, RouteTermination

logger = get_logger(__name__)


class SearchPhase(Enum):
    SEARCH = "search"
    BACKTRACE = "backtrace"


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class ShortestPathSearch(ResumableComputation[Route]):
    """
    Resumable goal-seeded best-first search with gradient backtrace.

    One step pops one frontier cell while searching, or appends one edge
    while backtracing.

    Attributes:
        costs: Cost grid, 1 at the goal and 0 for unvisited cells
        frontier: Heap of (priority, insertion counter, cell)
        phase: SEARCH or BACKTRACE
        current: Cell the backtrace has reached
        edges: Route built so far by the backtrace
        solved: True once the start has been popped
        expanded: Number of cells popped from the frontier
    """

    name = "ShortestPathSearch"

    def __init__(self, grid: MazeGrid, start: Position, goal: Position):
        super().__init__()
        validate_position(start, grid.width, grid.length, "start", component=self.name)
        validate_position(goal, grid.width, grid.length, "goal", component=self.name)

        self.grid = grid
        self.start = (int(start[0]), int(start[1]))
        self.goal = (int(goal[0]), int(goal[1]))

        self.costs = np.zeros(grid.shape, dtype=np.int64)
        self.costs[self.goal] = 1
        self.frontier: list[tuple[int, int, Position]] = []
        self._counter = 0
        self._push(self.goal, 0)

        self.phase = SearchPhase.SEARCH
        self.current = self.start
        self.edges: list[Edge] = []
        self.solved = False
        self.expanded = 0
        self._start_time = time.perf_counter()

        log_search_start(logger, self.name, {"start": self.start, "goal": self.goal})

    def _push(self, cell: Position, priority: int) -> None:
        heapq.heappush(self.frontier, (priority, self._counter, cell))
        self._counter += 1

    def _advance(self) -> None:
        if self.phase == SearchPhase.SEARCH:
            self._search_step()
        else:
            self._backtrace_step()

    def _search_step(self) -> None:
        if not self.frontier:
            self._finish()
            return

        _, _, current = heapq.heappop(self.frontier)
        self.expanded += 1

        if current == self.start:
            self.solved = True
            self.phase = SearchPhase.BACKTRACE
            if self.start == self.goal:
                self._finish()
            return

        tentative = self.costs[current] + 1
        for direction in Direction:
            if not self.grid.has_exit(current, direction):
                continue
            dx, dy = direction.offset
            neighbor = (current[0] + dx, current[1] + dy)

            recorded = self.costs[neighbor]
            if recorded != 0 and recorded < tentative:
                continue

            self.costs[neighbor] = tentative
            self._push(neighbor, int(tentative) + manhattan_distance(neighbor, self.start))

    def _backtrace_step(self) -> None:
        here = self.costs[self.current]
        for direction in Direction:
            if not self.grid.has_exit(self.current, direction):
                continue
            edge = Edge(self.current, direction)
            target = edge.leads_to()
            cost = self.costs[target]
            if cost == 0 or cost >= here:
                continue

            self.edges.append(edge)
            self.current = target
            break
        else:
            raise MazeError(
                f"Backtrace stalled at {self.current}: no neighbour with a lower cost",
                component=self.name,
                suggested_action="Do not modify the cost grid while a search is running",
                error_code="BACKTRACE_STALLED",
                diagnostic_data={"start": self.start, "goal": self.goal, "cost": int(here)},
            )

        if self.current == self.goal:
            self._finish()

    def _finish(self) -> None:
        self._finished = True
        elapsed = time.perf_counter() - self._start_time

        if not self.solved:
            logger.warning(f"No route from {self.start} to {self.goal} after expanding {self.expanded} cells")
            return

        self._result = Route(
            start=self.start,
            goal=self.goal,
            edges=list(self.edges),
            termination=RouteTermination.REACHED_GOAL,
            algorithm="shortest_path",
            metadata={"expanded_cells": self.expanded},
        )
        log_performance_metric(
            logger,
            self.name,
            elapsed,
            {"steps": self.steps_taken + 1, "expanded": self.expanded, "length": len(self.edges)},
        )

    def result(self) -> Route:
        """
        Get the shortest route.

        Raises:
            UnreachableError: If the frontier emptied before reaching the start
        """
        route = super().result()
        if not self.solved:
            raise UnreachableError(self.start, self.goal, self.expanded, component=self.name)
        return route


def shortest_path(grid: MazeGrid, start: Position, goal: Position) -> Route:
    """
    Compute a minimum-edge-count route from ``start`` to ``goal``.

    Args:
        grid: Maze grid
        start: First cell of the route
        goal: Last cell of the route

    Returns:
        Route whose edges walk from start to goal

    Raises:
        UnreachableError: If no route exists
    """
    return ShortestPathSearch(grid, start, goal).run_to_completion()
