"""Tests for direct zone edits and grid queries."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from zombiesim.config import SimulationConfig
from zombiesim.engine.edits import (
    add_zombies,
    create_empty_grid,
    edit_zone,
    generate_grid,
    kill_zombies,
    minimum_threshold,
    total_zombies,
    zone_at,
)
from zombiesim.systems.rng import RandomStream


class TestKillAndAdd:

    def test_kill_clamps_at_zero(self):
        grid = create_empty_grid(25)
        zone_at(grid, 2, 3).zombies = 3
        zone = kill_zombies(grid, 2, 3, 10)
        assert zone.zombies == 0

    def test_kill_partial(self):
        grid = create_empty_grid(25)
        zone_at(grid, 2, 3).zombies = 8
        assert kill_zombies(grid, 2, 3, 3).zombies == 5

    def test_add(self):
        grid = create_empty_grid(25)
        add_zombies(grid, -4, 1, 6)
        add_zombies(grid, -4, 1, 2)
        assert zone_at(grid, -4, 1).zombies == 8
        assert total_zombies(grid) == 8

    def test_negative_add_clamps(self):
        grid = create_empty_grid(25)
        add_zombies(grid, 1, 1, 2)
        assert add_zombies(grid, 1, 1, -5).zombies == 0

    def test_missing_zone_is_noop(self):
        grid = create_empty_grid(25)
        assert kill_zombies(grid, 40, 40, 1) is None
        assert add_zombies(grid, 40, 40, 1) is None
        assert zone_at(grid, 40, 40) is None

    def test_town_is_never_edited(self):
        grid = create_empty_grid(25)
        assert add_zombies(grid, 0, 0, 5) is None
        assert edit_zone(grid, 0, 0, zombies=3, is_ruin=True) is None
        town = zone_at(grid, 0, 0)
        assert town.zombies == 0 and not town.is_ruin


class TestEditZone:

    def test_only_given_fields_change(self):
        grid = create_empty_grid(25)
        zone = zone_at(grid, 5, -2)
        zone.zombies = 4
        edit_zone(grid, 5, -2, has_building=True)
        assert zone.has_building and zone.zombies == 4 and not zone.is_ruin

        edit_zone(grid, 5, -2, zombies=9, is_ruin=True)
        assert zone.zombies == 9 and zone.is_ruin

    def test_zombies_clamped(self):
        grid = create_empty_grid(25)
        assert edit_zone(grid, 1, 0, zombies=-4).zombies == 0


class TestQueries:

    def test_generate_grid_and_threshold(self):
        cfg = SimulationConfig()
        grid = generate_grid(25, cfg, RandomStream(1))
        assert total_zombies(grid) == sum(z.zombies for z in grid)
        assert minimum_threshold(3, cfg) == 75
