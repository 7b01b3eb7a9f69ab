"""
Core maze configuration classes.

Configurations specify HOW a maze is carved and solved (dimensions, wall
bias, seed, group-label implementation, logging). The carved grid itself is
a MazeGrid instance, not configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

# The diameter sweep runs one breadth-first search per cell
DEFAULT_MAX_CELLS = 10_000


class LoggingConfig(BaseModel):
    """
    Configuration for logging.

    Attributes
    ----------
    level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
        Logging level (default: INFO)
    use_colors : bool
        Colored console output (default: False)
    log_file : str | None
        Also write logs to this file (default: None)
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    use_colors: bool = False
    log_file: str | None = None


class MazeConfig(BaseModel):
    """
    Maze generation and solving configuration.

    Attributes
    ----------
    width : int
        Number of columns (default: 10)
    length : int
        Number of rows (default: 10)
    wall_bias : float
        Wall probability weight in [0, 100] (default: 50)
    seed : int | None
        Random seed; None or 0 draws one from the OS (default: None)
    group_tracking : Literal["rescan", "disjoint_set"]
        Group-label implementation used while carving (default: rescan)
    max_cells : int
        Largest grid accepted, bounding the O(V^2) diameter sweep (default: 10000)
    logging : LoggingConfig
        Logging configuration

    Examples
    --------
    >>> config = MazeConfig(width=20, length=15, seed=42)
    >>> solution = solve_maze(config)
    """

    width: int = Field(default=10, ge=1)
    length: int = Field(default=10, ge=1)
    wall_bias: float = Field(default=50.0, ge=0, le=100)
    seed: int | None = Field(default=None, ge=0)
    group_tracking: Literal["rescan", "disjoint_set"] = "rescan"
    max_cells: int = Field(default=DEFAULT_MAX_CELLS, ge=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_size(self) -> MazeConfig:
        """Reject grids too large for the all-origins diameter sweep."""
        if self.width * self.length > self.max_cells:
            raise ValueError(
                f"{self.width}x{self.length} maze has {self.width * self.length} cells, "
                f"more than max_cells={self.max_cells}"
            )
        return self

    @property
    def num_cells(self) -> int:
        return self.width * self.length


def create_default_config() -> MazeConfig:
    """10x10 maze, bias 50, fresh seed."""
    return MazeConfig()


def create_small_config(seed: int | None = 42) -> MazeConfig:
    """
    Small reproducible maze for quick checks and debugging.

    Args:
        seed: Random seed (default: 42)
    """
    return MazeConfig(width=5, length=5, seed=seed, logging=LoggingConfig(level="DEBUG"))
