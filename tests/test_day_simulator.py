"""Tests for the nightly transition: freeze, respawn check, spread, despair decay."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from types import MappingProxyType

import pytest

import zombiesim.engine.day_simulator as day_simulator
from zombiesim.config import SimulationConfig
from zombiesim.core.grid import ZoneGrid
from zombiesim.core.snapshot import DespairSnapshot
from zombiesim.engine.day_simulator import advance_day, apply_despair, freeze_day
from zombiesim.systems.map_generator import generate_map
from zombiesim.systems.rng import RandomStream

NO_RESPAWN = SimulationConfig(respawn_threshold=0)


class TestFreeze:

    def test_despair_from_pre_freeze_values(self):
        grid = ZoneGrid(5)
        zone = grid.get(2, 2)
        zone.initial_zombies = 10
        zone.zombies = 3

        despair = freeze_day(grid, RandomStream(1))

        assert despair.get((2, 2)) == 3
        assert zone.initial_zombies == 3
        assert zone.despair == 0

    def test_scout_offsets_rerolled(self):
        grid = ZoneGrid(25)
        freeze_day(grid, RandomStream(1))
        offsets = [z.scout_estimation_offset for z in grid]
        assert set(offsets) <= {-2, -1, 0, 1, 2}
        assert len(set(offsets)) > 1

    def test_snapshot_is_read_only(self):
        despair = freeze_day(ZoneGrid(5), RandomStream(1))
        with pytest.raises(TypeError):
            despair.values[(1, 1)] = 4  # type: ignore[index]


class TestDespairDecay:

    def test_decay_after_spread(self):
        grid = ZoneGrid(5)
        grid.get(2, 2).zombies = 5
        despair = DespairSnapshot(values=MappingProxyType({(2, 2): 3}))

        removed = apply_despair(grid, despair)

        assert grid.get(2, 2).zombies == 2
        assert removed == 3

    def test_decay_clamps_at_zero(self):
        grid = ZoneGrid(5)
        grid.get(1, 2).zombies = 1
        despair = DespairSnapshot(values=MappingProxyType({(1, 2): 4}))
        assert apply_despair(grid, despair) == 1
        assert grid.get(1, 2).zombies == 0

    def test_player_deaths_reset(self):
        grid = ZoneGrid(5)
        grid.get(1, 1).player_deaths = 3
        apply_despair(grid, DespairSnapshot.empty())
        assert grid.get(1, 1).player_deaths == 0


class TestAdvanceDay:

    def test_cleared_zone_is_suppressed_then_decays(self):
        grid = ZoneGrid(25)
        zone = grid.get(4, 4)
        zone.initial_zombies = 10
        zone.zombies = 3     # despair (10 - 3 - 1) // 2 = 3

        report = advance_day(grid, 3, NO_RESPAWN, RandomStream(1))

        # Spread skipped the zone, despair removed all 3
        assert zone.zombies == 0
        assert report.despair_removed >= 3
        assert report.respawn is None

    def test_spread_flags_follow_day(self, monkeypatch):
        calls: list[dict] = []

        def fake_cycle(grid, rng, **kwargs):
            calls.append(kwargs)
            return 0

        monkeypatch.setattr(day_simulator, "run_spread_cycle", fake_cycle)
        advance_day(ZoneGrid(5), 1, NO_RESPAWN, RandomStream(1))
        advance_day(ZoneGrid(5), 2, NO_RESPAWN, RandomStream(1))

        assert len(calls) == 2
        assert calls[0]["observe_despair"] is True
        assert calls[0]["diagonal_neighbors"] is False
        assert calls[1]["diagonal_neighbors"] is True

    def test_respawn_checked_against_next_day(self, monkeypatch):
        seen: list[int] = []

        def fake_respawn(grid, day, config, rng):
            seen.append(day)
            return None

        monkeypatch.setattr(day_simulator, "perform_respawn", fake_respawn)
        cfg = SimulationConfig(respawn_threshold=10, respawn_factor=1.0)
        grid = ZoneGrid(25)
        grid.get(3, 3).zombies = 20   # enough for day 2, not for day 3

        advance_day(grid, 2, cfg, RandomStream(1))
        assert seen == [3]

    def test_no_respawn_when_above_floor(self, monkeypatch):
        monkeypatch.setattr(
            day_simulator, "perform_respawn",
            lambda *a, **k: pytest.fail("respawn should not run"),
        )
        cfg = SimulationConfig(respawn_threshold=10, respawn_factor=1.0)
        grid = ZoneGrid(25)
        grid.get(3, 3).zombies = 30
        advance_day(grid, 2, cfg, RandomStream(1))

    def test_report_totals_consistent(self):
        grid = generate_map(25, SimulationConfig(), RandomStream(3))
        report = advance_day(grid, 2, SimulationConfig(), RandomStream(4))
        assert report.total_after == grid.total_zombies()
        assert report.day == 2

    def test_respawn_regrows_collapsed_map(self):
        cfg = SimulationConfig()
        grid = generate_map(25, cfg, RandomStream(3))
        for zone in grid:
            zone.zombies = 0
            zone.initial_zombies = 0

        report = advance_day(grid, 4, cfg, RandomStream(5))

        assert report.respawn is not None
        assert report.respawn.regrown >= report.respawn.threshold
        assert grid.total_zombies() > 0


class TestInvariants:

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_non_negative_and_town_empty_over_many_days(self, seed):
        cfg = SimulationConfig()
        rng = RandomStream(seed)
        grid = generate_map(25, cfg, rng)
        for day in range(1, 16):
            # Clear a few zones to exercise despair
            for x in range(-3, 4):
                zone = grid.get(x, 5)
                zone.zombies = max(0, zone.zombies - 6)
            advance_day(grid, day, cfg, rng)
            assert all(z.zombies >= 0 for z in grid)
            assert grid.get(0, 0).zombies == 0
