"""
Geometry for maze_routes: the maze grid model and its generators.
"""

from .mazes import (
    Cell,
    Direction,
    Edge,
    MazeGrid,
    Position,
    RowCarvingGenerator,
    build_maze,
    verify_maze,
)

__all__ = [
    "Cell",
    "Direction",
    "Edge",
    "MazeGrid",
    "Position",
    "RowCarvingGenerator",
    "build_maze",
    "verify_maze",
]
