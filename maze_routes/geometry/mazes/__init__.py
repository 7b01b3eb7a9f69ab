"""
Maze carving and analysis.

Mazes are width x length grids of cells with right and bottom walls, carved
row by row with transient group labels so every cell stays reachable.

Examples
--------
>>> from maze_routes.geometry.mazes import build_maze, verify_maze
>>> grid = build_maze(20, 20, wall_bias=50, seed=42)
>>> verify_maze(grid)["is_valid"]
True
"""

from .maze_grid import Cell, Direction, Edge, MazeGrid, Position
from .group_labels import (
    DisjointSetGroupLabels,
    GroupLabels,
    GroupTracking,
    RescanGroupLabels,
    create_group_labels,
)
from .maze_generator import CarvePhase, RowCarvingGenerator, build_maze, draw_seed
from .maze_analysis import bfs_distances, verify_maze

__all__ = [
    # Data model
    "Cell",
    "Direction",
    "Edge",
    "MazeGrid",
    "Position",
    # Group labels
    "GroupLabels",
    "GroupTracking",
    "RescanGroupLabels",
    "DisjointSetGroupLabels",
    "create_group_labels",
    # Generation
    "CarvePhase",
    "RowCarvingGenerator",
    "build_maze",
    "draw_seed",
    # Analysis
    "bfs_distances",
    "verify_maze",
]
