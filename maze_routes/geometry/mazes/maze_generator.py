"""
Row-Carving Maze Generation

Carves a width x length maze one row at a time, in the spirit of Eller's
algorithm: every cell of the current row carries a transient group id, and
the carver only places walls that keep every group connected to the rows
still to come.

Algorithm (per row, top to bottom):
1. Label: every unlabelled cell gets a fresh group id.
2. Right walls: for each adjacent pair, cells already in the same group get a
   wall (no loops); otherwise a biased draw either places a wall or removes
   it and merges the two groups.
3. Last row only: after the pair decisions, every right wall between two
   different groups is removed so the bottom row ends as one connected run.
4. Bottom walls: a cell may get a bottom wall only if its group keeps at
   least one other way down; a cell without a bottom wall passes its group
   id to the cell below.
5. The row's labels are cleared.
Finally the outer boundary is closed (last column right walls, last row
bottom walls).

Mathematical Foundation:
Each group is a connected set of cells, and every group in a row has at least
one member continuing into the next row, so every cell is connected to the
last row, which is itself connected. The result is a spanning connected
graph; it is a tree except where the last-row corrective pass joins two
cells that were already connected through an upper row.

Reference: Eller (1982), "An Efficient Method for Generating Mazes"
"""

from __future__ import annotations

import numbers
import random
import time
from enum import Enum

import numpy as np

from maze_routes.alg.base_solver import ResumableComputation
from maze_routes.geometry.mazes.group_labels import GroupTracking, create_group_labels
from maze_routes.geometry.mazes.maze_grid import MazeGrid
from maze_routes.utils.exceptions import validate_dimensions, validate_parameter_value
from maze_routes.utils.maze_logging import get_logger, log_performance_metric, log_search_start

logger = get_logger(__name__)

MAX_SEED = 2**31 - 1


class CarvePhase(Enum):
    """Stage of the current row."""

    LABEL = "label"
    RIGHT_WALLS = "right_walls"
    CORRECT_LAST_ROW = "correct_last_row"
    BOTTOM_WALLS = "bottom_walls"
    CLEAR = "clear"
    CLOSE_BOUNDARY = "close_boundary"


def draw_seed() -> int:
    """Draw a fresh seed from the operating system entropy source."""
    return random.SystemRandom().randint(1, MAX_SEED)


class RowCarvingGenerator(ResumableComputation[MazeGrid]):
    """
    Resumable row-by-row maze carver.

    One step is one labelling pass, one right-wall decision, one last-row
    correction, one bottom-wall decision, one row clear, or the final
    boundary closure. All carving state lives on the instance:

    Attributes:
        row: Row currently being carved
        phase: Stage of the current row
        column: Next column to decide within the phase
        groups: Transient group labels
        bottom_wall_counts: Bottom walls placed per group in the current row
        right_walls, down_walls: Working wall arrays of shape (width, length)
        rng: Random generator owned by this carver
    """

    name = "RowCarvingGenerator"

    def __init__(
        self,
        width: int,
        length: int,
        wall_bias: float = 50.0,
        seed: int | None = None,
        group_tracking: GroupTracking | str = GroupTracking.RESCAN,
    ):
        """
        Initialize the carver.

        Args:
            width: Number of columns (>= 1)
            length: Number of rows (>= 1)
            wall_bias: Wall probability weight in [0, 100]
            seed: Random seed; None or 0 draws a fresh one (reported as ``self.seed``)
            group_tracking: Group-label implementation ("rescan" or "disjoint_set")

        Raises:
            InvalidDimensionsError: If width or length is below 1
            ConfigurationError: If wall_bias is outside [0, 100] or seed is not an integer
        """
        super().__init__()
        validate_dimensions(width, length, component=self.name)
        validate_parameter_value(wall_bias, "wall_bias", (int, float), (0, 100), component=self.name)
        if seed is not None:
            validate_parameter_value(seed, "seed", numbers.Integral, component=self.name)
            seed = int(seed)

        width, length = int(width), int(length)
        self.width = width
        self.length = length
        self.wall_bias = float(wall_bias)
        self.seed = seed if seed else draw_seed()
        self.rng = random.Random(self.seed)
        self.group_tracking = GroupTracking(group_tracking)
        self.groups = create_group_labels(self.group_tracking, width, length)

        self.right_walls = np.zeros((width, length), dtype=bool)
        self.down_walls = np.zeros((width, length), dtype=bool)

        self.row = 0
        self.column = 0
        self.phase = CarvePhase.LABEL
        self.bottom_wall_counts: dict[int, int] = {}
        self._start_time = time.perf_counter()

        log_search_start(
            logger,
            self.name,
            {
                "width": width,
                "length": length,
                "wall_bias": self.wall_bias,
                "seed": self.seed,
                "group_tracking": self.group_tracking.value,
            },
        )

    @property
    def on_last_row(self) -> bool:
        return self.row == self.length - 1

    def _draw_wall(self) -> bool:
        """Biased draw: True means place the wall."""
        return self.rng.randrange(100) < self.wall_bias

    def _enter(self, phase: CarvePhase) -> None:
        self.phase = phase
        self.column = 0
        if phase == CarvePhase.BOTTOM_WALLS:
            self.bottom_wall_counts = {}

    def _after_right_walls(self) -> CarvePhase:
        return CarvePhase.CORRECT_LAST_ROW if self.on_last_row else CarvePhase.BOTTOM_WALLS

    def _advance(self) -> None:
        if self.phase == CarvePhase.LABEL:
            self._label_row()
        elif self.phase == CarvePhase.RIGHT_WALLS:
            self._decide_right_wall()
        elif self.phase == CarvePhase.CORRECT_LAST_ROW:
            self._correct_last_row()
        elif self.phase == CarvePhase.BOTTOM_WALLS:
            self._decide_bottom_wall()
        elif self.phase == CarvePhase.CLEAR:
            self._clear_row()
        else:
            self._close_boundary()

    def _label_row(self) -> None:
        y = self.row
        for x in range(self.width):
            if not self.groups.is_labelled(x, y):
                self.groups.assign(x, y, y * self.width + x + 1)

        if self.width > 1:
            self._enter(CarvePhase.RIGHT_WALLS)
        else:
            self._enter(self._after_right_walls())

    def _decide_right_wall(self) -> None:
        x, y = self.column, self.row
        left = self.groups.group(x, y)
        right = self.groups.group(x + 1, y)

        if left == right:
            self.right_walls[x, y] = True
        elif self._draw_wall():
            self.right_walls[x, y] = True
        elif not self.on_last_row or x < self.width - 2:
            # The last row stops merging one column early; the correction pass
            # below still joins the final pair.
            self.groups.merge(left, right)

        self.column += 1
        if self.column >= self.width - 1:
            self._enter(self._after_right_walls())

    def _correct_last_row(self) -> None:
        y = self.row
        for x in range(self.width - 1):
            if self.groups.group(x, y) != self.groups.group(x + 1, y):
                self.right_walls[x, y] = False
        self._enter(CarvePhase.BOTTOM_WALLS)

    def _decide_bottom_wall(self) -> None:
        x, y = self.column, self.row
        group = self.groups.group(x, y)
        walled = False

        if self.groups.is_alone(group):
            pass
        elif group in self.bottom_wall_counts and (
            self.bottom_wall_counts[group] >= self.groups.row_count(group, y) - 1
        ):
            # At least one member of the group must continue downward
            pass
        elif self._draw_wall():
            self.bottom_wall_counts[group] = self.bottom_wall_counts.get(group, 0) + 1
            self.down_walls[x, y] = True
            walled = True

        if not walled and not self.on_last_row:
            self.groups.assign(x, y + 1, group)

        self.column += 1
        if self.column >= self.width:
            self._enter(CarvePhase.CLEAR)

    def _clear_row(self) -> None:
        self.groups.clear_row(self.row)
        self.row += 1
        if self.row < self.length:
            self._enter(CarvePhase.LABEL)
        else:
            self._enter(CarvePhase.CLOSE_BOUNDARY)

    def _close_boundary(self) -> None:
        self.right_walls[self.width - 1, :] = True
        self.down_walls[:, self.length - 1] = True

        self._result = MazeGrid(self.right_walls, self.down_walls, seed=self.seed, wall_bias=self.wall_bias)
        self._finished = True

        log_performance_metric(
            logger,
            f"{self.name} {self.width}x{self.length}",
            time.perf_counter() - self._start_time,
            {"steps": self.steps_taken + 1, "seed": self.seed, "passages": self._result.passage_count()},
        )


def build_maze(
    width: int,
    length: int,
    wall_bias: float = 50.0,
    seed: int | None = None,
    *,
    group_tracking: GroupTracking | str = GroupTracking.RESCAN,
) -> MazeGrid:
    """
    High-level function to carve a maze in one call.

    Args:
        width: Number of columns (>= 1)
        length: Number of rows (>= 1)
        wall_bias: Wall probability weight in [0, 100]
        seed: Random seed for reproducibility; None or 0 draws one (see ``grid.seed``)
        group_tracking: Group-label implementation ("rescan" or "disjoint_set")

    Returns:
        Read-only MazeGrid

    Raises:
        InvalidDimensionsError: If width or length is below 1

    Example:
        >>> grid = build_maze(20, 10, wall_bias=50, seed=42)
        >>> grid.shape
        (20, 10)
    """
    generator = RowCarvingGenerator(width, length, wall_bias, seed, group_tracking=group_tracking)
    return generator.run_to_completion()
