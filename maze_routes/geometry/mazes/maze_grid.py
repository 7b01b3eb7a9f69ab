"""
Maze Grid Data Model

Cell walls are stored per cell as two flags: a wall on the cell's right edge
and a wall on its bottom edge. The left wall of a cell is its left neighbour's
right wall and its top wall is its upper neighbour's bottom wall, so every
interior wall is stored exactly once.

Coordinates are (x, y) integer pairs with x in [0, width) and y in [0, length).
y grows downward: moving UP decreases y, moving DOWN increases it.

Wall arrays are indexed [x, y] and have shape (width, length).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

import networkx as nx
import numpy as np

from maze_routes.utils.exceptions import InvalidDimensionsError

if TYPE_CHECKING:
    from numpy.typing import NDArray

Position = tuple[int, int]


class Direction(IntEnum):
    """Cardinal directions in clockwise order."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) for one step in this direction."""
        return _OFFSETS[self]

    def turn_left(self) -> Direction:
        return Direction((self - 1) % 4)

    def turn_right(self) -> Direction:
        return Direction((self + 1) % 4)

    def reverse(self) -> Direction:
        return Direction((self + 2) % 4)


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


@dataclass(frozen=True)
class Cell:
    """
    Wall flags of one maze cell.

    Attributes:
        right_wall: Wall on the cell's right edge
        down_wall: Wall on the cell's bottom edge
    """

    right_wall: bool = False
    down_wall: bool = False


@dataclass(frozen=True)
class Edge:
    """
    One directed traversal step: leave ``position`` heading ``direction``.

    Two edges are equal when both position and direction match.
    """

    position: Position
    direction: Direction

    def leads_to(self) -> Position:
        """Position reached by taking this step."""
        dx, dy = self.direction.offset
        return (self.position[0] + dx, self.position[1] + dy)


class MazeGrid:
    """
    Width x length grid of cells with right/bottom walls.

    Instances are read-only: the wall arrays are copied on construction and
    flagged non-writeable, so one grid can be shared between several searches.
    """

    def __init__(
        self,
        right_walls: NDArray[np.bool_],
        down_walls: NDArray[np.bool_],
        seed: int | None = None,
        wall_bias: float | None = None,
    ):
        """
        Initialize grid.

        Args:
            right_walls: Boolean array of shape (width, length)
            down_walls: Boolean array of shape (width, length)
            seed: Seed the grid was generated with, if any
            wall_bias: Wall bias the grid was generated with, if any

        Raises:
            ValueError: If the arrays are not 2D or their shapes differ
            InvalidDimensionsError: If either axis is empty
        """
        right = np.array(right_walls, dtype=bool)
        down = np.array(down_walls, dtype=bool)
        if right.ndim != 2 or right.shape != down.shape:
            raise ValueError(f"Wall arrays must share one 2D shape: right{right.shape} vs down{down.shape}")
        if right.shape[0] < 1 or right.shape[1] < 1:
            raise InvalidDimensionsError(right.shape[0], right.shape[1], component="MazeGrid")
        right.flags.writeable = False
        down.flags.writeable = False

        self.right_walls = right
        self.down_walls = down
        self.width, self.length = right.shape
        self.seed = seed
        self.wall_bias = wall_bias

    @property
    def shape(self) -> tuple[int, int]:
        return (self.width, self.length)

    @property
    def num_cells(self) -> int:
        return self.width * self.length

    def cell(self, x: int, y: int) -> Cell:
        """Get the wall flags of the cell at (x, y)."""
        return Cell(right_wall=bool(self.right_walls[x, y]), down_wall=bool(self.down_walls[x, y]))

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.length

    def has_exit(self, position: Position, direction: Direction) -> bool:
        """
        Check whether a step from ``position`` in ``direction`` is open.

        Positions outside the grid have no exits, and no step may leave the
        grid even where a boundary wall flag is missing.
        """
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.length):
            return False

        if direction == Direction.RIGHT:
            return x < self.width - 1 and not self.right_walls[x, y]
        if direction == Direction.DOWN:
            return y < self.length - 1 and not self.down_walls[x, y]
        if direction == Direction.LEFT:
            return x > 0 and not self.right_walls[x - 1, y]
        return y > 0 and not self.down_walls[x, y - 1]

    def exits(self, position: Position) -> list[Direction]:
        """Open directions from ``position`` in enumeration order."""
        return [d for d in Direction if self.has_exit(position, d)]

    def positions(self):
        """Iterate over all positions, x outer and y inner."""
        for x in range(self.width):
            for y in range(self.length):
                yield (x, y)

    def passage_count(self) -> int:
        """Number of open interior walls (undirected passages)."""
        horizontal = int(np.count_nonzero(~self.right_walls[:-1, :]))
        vertical = int(np.count_nonzero(~self.down_walls[:, :-1]))
        return horizontal + vertical

    def to_graph(self) -> nx.Graph:
        """Undirected adjacency graph of cells joined by an open passage."""
        graph = nx.Graph()
        graph.add_nodes_from(self.positions())
        for x, y in self.positions():
            if self.has_exit((x, y), Direction.RIGHT):
                graph.add_edge((x, y), (x + 1, y))
            if self.has_exit((x, y), Direction.DOWN):
                graph.add_edge((x, y), (x, y + 1))
        return graph

    def to_numpy_array(self, wall_thickness: int = 1) -> NDArray[np.int32]:
        """
        Convert maze to numpy array representation.

        Rows of the array follow y and columns follow x.

        Args:
            wall_thickness: Thickness of walls in array elements

        Returns:
            Numpy array where 1 = wall, 0 = passage
        """
        t = wall_thickness
        cell_size = 2 * t + 1
        height = self.length * cell_size + t
        width = self.width * cell_size + t

        maze = np.ones((height, width), dtype=np.int32)

        for x, y in self.positions():
            r_start = y * cell_size + t
            c_start = x * cell_size + t
            r_end = r_start + cell_size - t
            c_end = c_start + cell_size - t

            maze[r_start:r_end, c_start:c_end] = 0

            if not self.right_walls[x, y]:
                maze[r_start:r_end, c_end : c_end + t] = 0
            if not self.down_walls[x, y]:
                maze[r_end : r_end + t, c_start:c_end] = 0

        return maze

    def __eq__(self, other):
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return (
            self.shape == other.shape
            and np.array_equal(self.right_walls, other.right_walls)
            and np.array_equal(self.down_walls, other.down_walls)
        )

    def __repr__(self) -> str:
        return f"MazeGrid(width={self.width}, length={self.length}, seed={self.seed})"
