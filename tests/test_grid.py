"""Tests for ZoneGrid layout, origin shift, neighbors and copies."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from zombiesim.core.grid import ZoneGrid, cell_range
from zombiesim.systems.map_generator import generate_empty_map


class TestLayout:

    @pytest.mark.parametrize("size", [25, 26, 27])
    def test_exactly_size_squared_cells(self, size):
        grid = ZoneGrid(size)
        assert len(grid) == size * size
        assert len(set(grid.keys())) == size * size

    def test_odd_size_is_centred(self):
        assert list(cell_range(25))[0] == -12
        assert list(cell_range(25))[-1] == 12

    def test_even_size_extra_cell_on_negative_side(self):
        r = list(cell_range(26))
        assert r[0] == -13 and r[-1] == 12

    def test_origin_shift_applied_once(self):
        grid = ZoneGrid(25, origin_x=3, origin_y=-2)
        assert grid.origin_x == 3 and grid.origin_y == -2
        # Logical corner (-12, -12) is stored shifted by the origin
        assert grid.get(-15, -10) is not None
        assert grid.get(-12 - 3, 12 + 2) is not None
        assert grid.get(12, -12) is None
        # Town stays at (0, 0) while inside the grid
        assert grid.town is not None and grid.town.is_town

    def test_missing_lookup_returns_none(self):
        grid = ZoneGrid(25)
        assert grid.get(13, 0) is None
        assert grid.get(100, -100) is None
        assert (13, 0) not in grid
        assert (12, 0) in grid


class TestScenarioEmptyMap:

    def test_town_on_empty_map(self):
        grid = generate_empty_map(25)
        town = grid.get(0, 0)
        assert town.zombies == 0
        assert town.is_town
        assert town.distance == 0
        assert grid.total_zombies() == 0
        assert not any(z.is_ruin or z.has_building for z in grid)


class TestNeighbors:

    def test_interior_counts(self):
        grid = ZoneGrid(5)
        zone = grid.get(0, 1)
        assert len(list(grid.neighbors(zone, include_diagonal=True))) == 8
        assert len(list(grid.neighbors(zone, include_diagonal=False))) == 4

    def test_corner_excludes_off_grid(self):
        grid = ZoneGrid(5)
        corner = grid.get(2, 2)
        diag = list(grid.neighbors(corner, include_diagonal=True))
        assert len(diag) == 3
        assert sum(1 for _, direct in diag if direct) == 2
        assert len(list(grid.neighbors(corner, include_diagonal=False))) == 2

    def test_edge_counts(self):
        grid = ZoneGrid(5)
        edge = grid.get(2, 0)
        assert len(list(grid.neighbors(edge, include_diagonal=True))) == 5
        assert len(list(grid.neighbors(edge, include_diagonal=False))) == 3


class TestCopy:

    def test_copy_is_deep(self):
        grid = ZoneGrid(5)
        grid.get(1, 1).zombies = 4
        clone = grid.copy()
        clone.get(1, 1).zombies = 40
        assert grid.get(1, 1).zombies == 4
        assert clone.total_zombies() == 40
        assert clone.size == 5
