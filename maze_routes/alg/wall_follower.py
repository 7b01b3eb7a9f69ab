"""
Wall-following maze agents.

The hand rule is defined on direction indices (UP=0, RIGHT=1, DOWN=2,
LEFT=3). A left-hand agent heading ``d`` tries ``d + 1`` first, then straight
ahead, then ``d - 1``, and turns back only when nothing else is open. A
right-hand agent tries ``d - 1`` first and mirrors the rest. With row 0 drawn
at the bottom of the screen (y growing upward) ``d + 1`` is a left turn; in
the y-down array layout of ``MazeGrid.to_numpy_array`` it is
``Direction.turn_right``.

Wall following is only guaranteed to reach goals on the outer boundary of a
simply connected maze. Interior goals can leave the agent circling; the walk
then stops as soon as it repeats a (cell, heading) step and returns the
partial route.
"""

from __future__ import annotations

import time
from enum import Enum

from maze_routes.alg.base_solver import ResumableComputation
from maze_routes.geometry.mazes.maze_grid import Direction, Edge, MazeGrid, Position
from maze_routes.utils.exceptions import validate_position
from maze_routes.utils.maze_logging import get_logger, log_performance_metric, log_search_start
from maze_routes.utils.route_result import Route, RouteTermination

logger = get_logger(__name__)


class Handedness(Enum):
    """Which hand stays on the wall."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def initial_heading(self) -> Direction:
        return Direction.LEFT if self == Handedness.LEFT else Direction.RIGHT

    def candidates(self, heading: Direction) -> list[Direction]:
        """Headings to try from ``heading``, most preferred first."""
        sweep = 1 if self == Handedness.LEFT else -1
        return [Direction((heading + sweep) % 4), heading, Direction((heading - sweep) % 4), heading.reverse()]


class WallFollowerWalk(ResumableComputation[Route]):
    """
    Resumable wall-following walk.

    One step is one move (plus the repeat check for that move).

    Attributes:
        position: Agent's current cell
        heading: Agent's current heading
        edges: Steps taken so far
        seen: Every step taken so far, for loop detection
        termination: Why the walk stopped (None while running)
    """

    name = "WallFollowerWalk"

    def __init__(self, grid: MazeGrid, start: Position, goal: Position, handedness: Handedness | str):
        super().__init__()
        validate_position(start, grid.width, grid.length, "start", component=self.name)
        validate_position(goal, grid.width, grid.length, "goal", component=self.name)

        self.grid = grid
        self.start = (int(start[0]), int(start[1]))
        self.goal = (int(goal[0]), int(goal[1]))
        self.handedness = Handedness(handedness)

        self.position = self.start
        self.heading = self.handedness.initial_heading
        self.edges: list[Edge] = []
        self.seen: set[Edge] = set()
        self.termination: RouteTermination | None = None
        self._start_time = time.perf_counter()

        log_search_start(
            logger,
            self.name,
            {"start": self.start, "goal": self.goal, "handedness": self.handedness.value},
        )
        if self.position == self.goal:
            self._finish(RouteTermination.REACHED_GOAL)

    def _advance(self) -> None:
        for direction in self.handedness.candidates(self.heading):
            if self.grid.has_exit(self.position, direction):
                break
        else:
            self._finish(RouteTermination.NO_EXIT)
            return

        self.heading = direction
        edge = Edge(self.position, direction)
        self.edges.append(edge)
        self.position = edge.leads_to()

        if not self.grid.in_bounds(self.position):
            self._finish(RouteTermination.LEFT_GRID)
        elif edge in self.seen:
            # Same cell, same heading: the agent is circling
            self._finish(RouteTermination.LOOP_DETECTED)
        elif self.position == self.goal:
            self._finish(RouteTermination.REACHED_GOAL)
        else:
            self.seen.add(edge)

    def _finish(self, termination: RouteTermination) -> None:
        self.termination = termination
        self._result = Route(
            start=self.start,
            goal=self.goal,
            edges=list(self.edges),
            termination=termination,
            algorithm=f"{self.handedness.value}_hand",
        )
        self._finished = True

        if termination != RouteTermination.REACHED_GOAL:
            logger.debug(f"{self.handedness.value}-hand walk stopped early: {termination.value} at {self.position}")
        log_performance_metric(
            logger,
            f"{self.name} ({self.handedness.value})",
            time.perf_counter() - self._start_time,
            {"steps": len(self.edges), "termination": termination.value},
        )


def follow_wall(grid: MazeGrid, start: Position, goal: Position, handedness: Handedness | str) -> Route:
    """
    Walk from ``start`` keeping one hand on the wall.

    Always returns; check ``route.reached_goal`` since the walk may stop early
    when it starts repeating itself.

    Args:
        grid: Maze grid
        start: Starting cell
        goal: Cell to reach
        handedness: Handedness.LEFT / Handedness.RIGHT or "left" / "right"

    Returns:
        Route, partial when ``route.is_partial``
    """
    return WallFollowerWalk(grid, start, goal, handedness).run_to_completion()
