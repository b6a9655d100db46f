"""Tests for Zone derived values: town, distance, despair, killed, danger."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from zombiesim.core.enums import DangerLevel
from zombiesim.core.models import Zone, compute_despair, round_half_up, zone_key


class TestTownAndDistance:

    def test_origin_is_town(self):
        zone = Zone(0, 0)
        assert zone.is_town
        assert zone.distance == 0

    def test_non_origin_is_not_town(self):
        assert not Zone(1, 0).is_town
        assert not Zone(0, -1).is_town

    def test_distance_is_rounded_euclidean(self):
        assert Zone(3, 4).distance == 5
        assert Zone(1, 1).distance == 1      # 1.414
        assert Zone(2, 1).distance == 2      # 2.236
        assert Zone(-2, -2).distance == 3    # 2.828
        assert Zone(12, 12).distance == 17   # 16.97

    def test_key_format(self):
        assert Zone(-3, 7).key == "-3,7"
        assert zone_key(0, 0) == "0,0"


class TestDespair:

    def test_no_kills_no_despair(self):
        assert Zone(1, 1, zombies=5, initial_zombies=5).despair == 0

    def test_small_clear_no_despair(self):
        # (3 - 1 - 1) / 2 = 0.5 -> 0
        assert Zone(1, 1, zombies=1, initial_zombies=3).despair == 0

    def test_large_clear(self):
        # (10 - 3 - 1) / 2 = 3
        assert Zone(1, 1, zombies=3, initial_zombies=10).despair == 3
        # (10 - 0 - 1) / 2 = 4.5 -> 4
        assert Zone(1, 1, zombies=0, initial_zombies=10).despair == 4

    def test_growth_never_negative(self):
        assert compute_despair(2, 9) == 0
        assert compute_despair(0, 1) == 0


class TestKilledAndDanger:

    def test_killed(self):
        assert Zone(1, 0, zombies=2, initial_zombies=7).killed == 5
        assert Zone(1, 0, zombies=9, initial_zombies=7).killed == 0

    def test_danger_buckets(self):
        expected = {
            0: DangerLevel.NONE,
            1: DangerLevel.LOW, 2: DangerLevel.LOW,
            3: DangerLevel.MEDIUM, 5: DangerLevel.MEDIUM,
            6: DangerLevel.HIGH, 9: DangerLevel.HIGH,
            10: DangerLevel.EXTREME, 250: DangerLevel.EXTREME,
        }
        for zombies, level in expected.items():
            assert Zone(2, 2, zombies=zombies).danger_level == level, zombies

    def test_scout_estimate_clamped(self):
        assert Zone(1, 0, zombies=1, scout_estimation_offset=-2).scout_estimate == 0
        assert Zone(1, 0, zombies=4, scout_estimation_offset=2).scout_estimate == 6


class TestCopyAndRounding:

    def test_copy_is_independent(self):
        zone = Zone(4, -1, zombies=3, initial_zombies=5, start_zombies=2, has_building=True, is_ruin=True)
        clone = zone.copy()
        assert clone == zone
        clone.zombies = 99
        assert zone.zombies == 3

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(2.49) == 2
        assert round_half_up(4.8) == 5
