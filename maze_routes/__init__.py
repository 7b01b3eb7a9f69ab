from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("maze_routes")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

# Geometry first: the generators pull in the resumable base from alg
from .geometry import (
    Direction,
    Edge,
    MazeGrid,
    RowCarvingGenerator,
    build_maze,
    verify_maze,
)
from .alg import (
    DiameterSearch,
    Handedness,
    ShortestPathSearch,
    WallFollowerWalk,
    find_diameter_endpoints,
    follow_wall,
    shortest_path,
)
from .config import MazeConfig
from .solve_maze import MazeSolution, solve_maze
from .utils.exceptions import MazeError, UnreachableError
from .utils.maze_logging import configure_logging, get_logger
from .utils.route_result import Route, RouteTermination

__all__ = [
    "__version__",
    "Direction",
    "Edge",
    "MazeGrid",
    "RowCarvingGenerator",
    "build_maze",
    "verify_maze",
    "DiameterSearch",
    "Handedness",
    "ShortestPathSearch",
    "WallFollowerWalk",
    "find_diameter_endpoints",
    "follow_wall",
    "shortest_path",
    "MazeConfig",
    "MazeSolution",
    "solve_maze",
    "MazeError",
    "UnreachableError",
    "configure_logging",
    "get_logger",
    "Route",
    "RouteTermination",
]
