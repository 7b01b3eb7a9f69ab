"""
Unit tests for the maze diameter search.

Checks the all-origins sweep against networkx eccentricities on carved and
hand-built grids.
"""

import pytest

import networkx as nx

from maze_routes.alg.diameter import DiameterSearch, find_diameter_endpoints
from maze_routes.geometry.mazes import build_maze
from maze_routes.utils.exceptions import ComputationNotFinishedError


def _diameter_reference(grid):
    """Diameter and first (x-major) origin attaining it, via networkx."""
    eccentricity = nx.eccentricity(grid.to_graph())
    diameter = max(eccentricity.values())
    origin = next(position for position in grid.positions() if eccentricity[position] == diameter)
    return diameter, origin


class TestDiameterSearch:
    """Test diameter endpoints."""

    def test_pinned_endpoints(self, pinned_grid):
        """3x3 seed-42 maze: (0, 0) and (2, 0) are 6 passages apart."""
        search = DiameterSearch(pinned_grid)
        assert search.run_to_completion() == ((0, 0), (2, 0))
        assert search.distance == 6

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5, 6, 7, 8])
    @pytest.mark.parametrize(("width", "length"), [(2, 3), (4, 4), (6, 5), (6, 6)])
    def test_matches_networkx(self, seed, width, length):
        """Distance equals the graph diameter and the origin is the first eccentric cell."""
        grid = build_maze(width, length, seed=seed)
        diameter, origin = _diameter_reference(grid)

        search = DiameterSearch(grid)
        start, end = search.run_to_completion()

        assert search.distance == diameter
        assert start == origin
        assert nx.shortest_path_length(grid.to_graph(), start, end) == diameter

    def test_grid_with_loops(self, open_grid):
        """Fully open 3x2 grid: opposite corners are 3 apart; (0, 0) is the first eccentric origin."""
        search = DiameterSearch(open_grid)
        start, end = search.run_to_completion()

        assert search.distance == 3
        assert start == (0, 0)
        assert end == (2, 1)

    def test_single_cell(self):
        """A 1x1 grid pairs its only cell with itself."""
        grid = build_maze(1, 1, seed=1)

        assert find_diameter_endpoints(grid) == ((0, 0), (0, 0))

    def test_single_row(self):
        grid = build_maze(5, 1, seed=1)

        assert find_diameter_endpoints(grid) == ((0, 0), (4, 0))


class TestResumableDiameter:
    """Test step-by-step diameter search."""

    def test_result_before_completion(self, small_grid):
        search = DiameterSearch(small_grid)
        search.step()

        with pytest.raises(ComputationNotFinishedError):
            search.result()

    @pytest.mark.parametrize("slice_size", [1, 5, 64])
    def test_sliced_search_matches_one_call(self, small_grid, slice_size):
        search = DiameterSearch(small_grid)
        while not search.run(max_steps=slice_size):
            pass

        assert search.result() == find_diameter_endpoints(small_grid)

    def test_one_step_per_dequeued_cell(self, small_grid):
        """Each origin's search dequeues every reachable cell once."""
        search = DiameterSearch(small_grid)
        search.run_to_completion()

        assert search.steps_taken == small_grid.num_cells**2

    def test_origin_order(self, small_grid):
        """Origins advance with x outer and y inner."""
        search = DiameterSearch(small_grid)
        search.run(max_steps=small_grid.num_cells)

        assert search.origin_index == 1
        assert search.origin == (0, 1)
