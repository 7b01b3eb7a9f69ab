"""
Unit tests for the maze grid data model.

Tests directions and turns, edges, exit queries at the grid boundary,
read-only storage and the array/graph conversions.
"""

import pytest

import numpy as np

from maze_routes.geometry.mazes import Cell, Direction, Edge, MazeGrid
from maze_routes.utils.exceptions import InvalidDimensionsError


class TestDirection:
    """Test the clockwise direction enumeration."""

    def test_enumeration_order(self):
        """Directions enumerate clockwise starting at UP."""
        assert list(Direction) == [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]

    @pytest.mark.parametrize(
        ("direction", "left", "right", "back"),
        [
            (Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN),
            (Direction.RIGHT, Direction.UP, Direction.DOWN, Direction.LEFT),
            (Direction.DOWN, Direction.RIGHT, Direction.LEFT, Direction.UP),
            (Direction.LEFT, Direction.DOWN, Direction.UP, Direction.RIGHT),
        ],
    )
    def test_turns(self, direction, left, right, back):
        """Turns follow the y-down screen frame."""
        assert direction.turn_left() == left
        assert direction.turn_right() == right
        assert direction.reverse() == back

    def test_offsets(self):
        """UP decreases y and DOWN increases it."""
        assert Direction.UP.offset == (0, -1)
        assert Direction.RIGHT.offset == (1, 0)
        assert Direction.DOWN.offset == (0, 1)
        assert Direction.LEFT.offset == (-1, 0)


class TestEdge:
    """Test directed traversal steps."""

    def test_leads_to(self):
        assert Edge((2, 3), Direction.UP).leads_to() == (2, 2)
        assert Edge((2, 3), Direction.LEFT).leads_to() == (1, 3)

    def test_value_equality_and_hash(self):
        """Edges compare by position and direction and work as set members."""
        a = Edge((1, 1), Direction.DOWN)
        b = Edge((1, 1), Direction.DOWN)
        c = Edge((1, 1), Direction.UP)

        assert a == b
        assert a != c
        assert len({a, b, c}) == 2


class TestMazeGrid:
    """Test MazeGrid queries."""

    def test_dimensions(self, small_grid):
        assert small_grid.width == 6
        assert small_grid.length == 5
        assert small_grid.shape == (6, 5)
        assert small_grid.num_cells == 30

    def test_cell_flags(self, pinned_grid):
        """Cell flags mirror the wall arrays."""
        assert pinned_grid.cell(0, 0) == Cell(right_wall=False, down_wall=True)
        assert pinned_grid.cell(1, 0) == Cell(right_wall=True, down_wall=False)

    def test_no_exit_across_boundary(self, open_grid):
        """Open flags never allow stepping off the grid."""
        assert not open_grid.has_exit((0, 0), Direction.UP)
        assert not open_grid.has_exit((0, 0), Direction.LEFT)
        assert not open_grid.has_exit((2, 1), Direction.RIGHT)
        assert not open_grid.has_exit((2, 1), Direction.DOWN)

    def test_no_exit_outside_grid(self, open_grid):
        assert not open_grid.has_exit((-1, 0), Direction.RIGHT)
        assert not open_grid.has_exit((3, 0), Direction.LEFT)

    def test_exits_are_symmetric(self, medium_grid):
        """A passage is open from both sides."""
        for position in medium_grid.positions():
            for direction in medium_grid.exits(position):
                target = Edge(position, direction).leads_to()
                assert medium_grid.has_exit(target, direction.reverse())

    def test_exits_in_enumeration_order(self, open_grid):
        assert open_grid.exits((1, 0)) == [Direction.RIGHT, Direction.DOWN, Direction.LEFT]

    def test_positions_x_outer(self):
        grid = MazeGrid(np.ones((2, 2), dtype=bool), np.ones((2, 2), dtype=bool))
        assert list(grid.positions()) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_grid_is_read_only(self, small_grid):
        """Wall arrays cannot be modified after construction."""
        with pytest.raises(ValueError):
            small_grid.right_walls[0, 0] = not small_grid.right_walls[0, 0]
        with pytest.raises(ValueError):
            small_grid.down_walls[0, 0] = not small_grid.down_walls[0, 0]

    def test_construction_copies_arrays(self):
        """Mutating the source arrays does not change the grid."""
        right = np.ones((2, 2), dtype=bool)
        down = np.ones((2, 2), dtype=bool)
        grid = MazeGrid(right, down)

        right[0, 0] = False

        assert grid.right_walls[0, 0]

    def test_mismatched_shapes_rejected(self):
        with pytest.raises(ValueError, match="shape"):
            MazeGrid(np.ones((2, 3), dtype=bool), np.ones((3, 2), dtype=bool))

    @pytest.mark.parametrize("shape", [(0, 3), (3, 0), (0, 0)])
    def test_empty_grid_rejected(self, shape):
        """A grid needs at least one cell along each axis."""
        with pytest.raises(InvalidDimensionsError):
            MazeGrid(np.ones(shape, dtype=bool), np.ones(shape, dtype=bool))

    def test_equality(self, open_grid):
        """Equality compares layouts, not seeds."""
        copy = MazeGrid(open_grid.right_walls, open_grid.down_walls, seed=99)
        assert copy == open_grid

        changed = np.array(open_grid.right_walls)
        changed[0, 0] = True
        assert MazeGrid(changed, open_grid.down_walls) != open_grid

    def test_passage_count(self, open_grid, ring_grid):
        # 3x2 fully open: 2 horizontal per row * 2 rows + 3 vertical
        assert open_grid.passage_count() == 7
        assert ring_grid.passage_count() == 8


class TestConversions:
    """Test array and graph conversions."""

    @pytest.mark.parametrize("thickness", [1, 2])
    def test_numpy_array_shape(self, small_grid, thickness):
        """Block array has one row band per maze row."""
        maze = small_grid.to_numpy_array(wall_thickness=thickness)
        cell_size = 2 * thickness + 1

        assert maze.shape == (5 * cell_size + thickness, 6 * cell_size + thickness)
        assert maze.dtype == np.int32
        assert np.all((maze == 0) | (maze == 1))

    def test_numpy_array_outer_frame_is_wall(self, small_grid):
        maze = small_grid.to_numpy_array()

        assert np.all(maze[0, :] == 1)
        assert np.all(maze[-1, :] == 1)
        assert np.all(maze[:, 0] == 1)
        assert np.all(maze[:, -1] == 1)

    def test_numpy_array_pinned_layout(self, pinned_grid):
        """Open right wall of (0, 0) shows as a gap between the first two cells."""
        maze = pinned_grid.to_numpy_array()

        assert maze[1, 3] == 0  # right of (0, 0): open
        assert maze[1, 6] == 1  # right of (1, 0): wall
        assert maze[3, 1] == 1  # below (0, 0): wall
        assert maze[3, 4] == 0  # below (1, 0): open

    def test_graph_matches_passages(self, medium_grid):
        graph = medium_grid.to_graph()

        assert graph.number_of_nodes() == medium_grid.num_cells
        assert graph.number_of_edges() == medium_grid.passage_count()
        for a, b in graph.edges:
            assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
