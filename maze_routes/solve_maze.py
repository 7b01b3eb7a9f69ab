"""
High-Level Maze Interface

Carves a maze, picks its two most distant cells as entrance and exit, and
routes between them with the shortest-path solver and both wall followers.

Example:
    >>> from maze_routes import solve_maze
    >>>
    >>> solution = solve_maze(width=20, length=10, seed=42)
    >>> print(len(solution.direct_path), solution.left_hand_path.reached_goal)
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

from maze_routes.alg.diameter import find_diameter_endpoints
from maze_routes.alg.shortest_path import shortest_path
from maze_routes.alg.wall_follower import Handedness, follow_wall
from maze_routes.config import MazeConfig
from maze_routes.geometry.mazes.maze_generator import build_maze
from maze_routes.geometry.mazes.maze_grid import MazeGrid, Position
from maze_routes.utils.maze_logging import configure_logging, get_logger, log_search_completion
from maze_routes.utils.route_result import Route

logger = get_logger(__name__)


@dataclass
class MazeSolution:
    """
    A carved maze with its entrance, exit and three routes between them.

    Attributes:
        grid: Carved maze
        entrance: First cell of the diameter pair
        exit: Second cell of the diameter pair
        direct_path: Shortest route from entrance to exit
        left_hand_path: Left-hand wall-follower route (possibly partial)
        right_hand_path: Right-hand wall-follower route (possibly partial)
    """

    grid: MazeGrid
    entrance: Position
    exit: Position
    direct_path: Route
    left_hand_path: Route
    right_hand_path: Route

    @property
    def seed(self) -> int | None:
        return self.grid.seed

    def summary(self) -> dict[str, Any]:
        return {
            "width": self.grid.width,
            "length": self.grid.length,
            "seed": self.grid.seed,
            "entrance": self.entrance,
            "exit": self.exit,
            "direct_length": len(self.direct_path),
            "left_hand_length": len(self.left_hand_path),
            "left_hand_termination": self.left_hand_path.termination.value,
            "right_hand_length": len(self.right_hand_path),
            "right_hand_termination": self.right_hand_path.termination.value,
        }


def solve_maze(config: MazeConfig | None = None, **overrides: Any) -> MazeSolution:
    """
    Carve a maze and route between its most distant cells.

    Args:
        config: Maze configuration (default: MazeConfig())
        **overrides: Fields replacing those of ``config``, validated the same way

    Returns:
        MazeSolution

    Raises:
        pydantic.ValidationError: If the configuration or overrides are invalid

    Example:
        >>> solution = solve_maze(width=8, length=8, seed=3)
        >>> solution.direct_path.reached_goal
        True
    """
    config = config or MazeConfig()
    if overrides:
        config = MazeConfig.model_validate({**config.model_dump(), **overrides})

    configure_logging(
        level=config.logging.level,
        use_colors=config.logging.use_colors,
        log_to_file=config.logging.log_file is not None,
        log_file_path=config.logging.log_file,
    )

    start_time = time.perf_counter()
    grid = build_maze(
        config.width,
        config.length,
        config.wall_bias,
        config.seed,
        group_tracking=config.group_tracking,
    )
    entrance, exit_ = find_diameter_endpoints(grid)

    solution = MazeSolution(
        grid=grid,
        entrance=entrance,
        exit=exit_,
        direct_path=shortest_path(grid, entrance, exit_),
        left_hand_path=follow_wall(grid, entrance, exit_, Handedness.LEFT),
        right_hand_path=follow_wall(grid, entrance, exit_, Handedness.RIGHT),
    )

    log_search_completion(
        logger,
        "solve_maze",
        len(solution.direct_path),
        "solved",
        {**solution.summary(), "time": f"{time.perf_counter() - start_time:.3f}s"},
    )
    return solution
