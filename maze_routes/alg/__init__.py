"""
Route-finding algorithms for maze_routes.

Every algorithm is a resumable step-state object (see ``base_solver``) with a
one-call convenience function:
- diameter: most distant pair of cells (entrance and exit)
- shortest_path: optimal route between two cells
- wall_follower: left-hand and right-hand rule agents
"""

from __future__ import annotations

from .base_solver import ResumableComputation
from .diameter import DiameterSearch, find_diameter_endpoints
from .shortest_path import SearchPhase, ShortestPathSearch, manhattan_distance, shortest_path
from .wall_follower import Handedness, WallFollowerWalk, follow_wall

__all__ = [
    "ResumableComputation",
    "DiameterSearch",
    "find_diameter_endpoints",
    "SearchPhase",
    "ShortestPathSearch",
    "manhattan_distance",
    "shortest_path",
    "Handedness",
    "WallFollowerWalk",
    "follow_wall",
]
