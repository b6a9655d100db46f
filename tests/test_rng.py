"""Tests for the xxhash-backed DeterministicRNG and RandomStream."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from zombiesim.core.enums import Domain
from zombiesim.systems.rng import DeterministicRNG, RandomStream


class TestDeterministicRNG:

    def test_pure_function_of_inputs(self):
        a = DeterministicRNG(42)
        b = DeterministicRNG(42)
        for i in range(50):
            assert a.next_float(Domain.SPREAD, 0, i) == b.next_float(Domain.SPREAD, 0, i)

    def test_float_range(self):
        rng = DeterministicRNG(7)
        for i in range(500):
            f = rng.next_float(Domain.MAP_GEN, 3, i)
            assert 0.0 <= f < 1.0

    def test_int_inclusive_bounds(self):
        rng = DeterministicRNG(7)
        values = {rng.next_int(Domain.SPAWN, 0, i, -2, 2) for i in range(500)}
        assert values == {-2, -1, 0, 1, 2}

    def test_domains_are_separated(self):
        rng = DeterministicRNG(1)
        spread = [rng.next_float(Domain.SPREAD, 0, i) for i in range(20)]
        spawn = [rng.next_float(Domain.SPAWN, 0, i) for i in range(20)]
        assert spread != spawn


class TestRandomStream:

    def test_same_seed_same_sequence(self):
        a = RandomStream(123)
        b = RandomStream(123)
        assert [a.randint(Domain.SPREAD, 0, 100) for _ in range(30)] == \
               [b.randint(Domain.SPREAD, 0, 100) for _ in range(30)]

    def test_different_seeds_diverge(self):
        a = RandomStream(1)
        b = RandomStream(2)
        assert [a.randint(Domain.SPREAD, 0, 1000) for _ in range(30)] != \
               [b.randint(Domain.SPREAD, 0, 1000) for _ in range(30)]

    def test_cursor_per_domain(self):
        stream = RandomStream(5)
        stream.randint(Domain.SPREAD, 0, 1)
        stream.randint(Domain.SPREAD, 0, 1)
        stream.chance(Domain.SCOUT, 0.5)
        assert stream.draws(Domain.SPREAD) == 2
        assert stream.draws(Domain.SCOUT) == 1
        assert stream.draws(Domain.RESPAWN) == 0

    def test_successive_draws_differ(self):
        stream = RandomStream(5)
        values = [stream.randint(Domain.SPREAD, 0, 10**6) for _ in range(20)]
        assert len(set(values)) > 15

    def test_chance_extremes(self):
        stream = RandomStream(9)
        assert not any(stream.chance(Domain.SPREAD, 0.0) for _ in range(100))
        assert all(stream.chance(Domain.SPREAD, 1.0) for _ in range(100))

    def test_shuffled_is_permutation(self):
        stream = RandomStream(11)
        items = list(range(40))
        shuffled = stream.shuffled(Domain.MAP_GEN, items)
        assert sorted(shuffled) == items
        assert shuffled != items
        assert items == list(range(40))  # input untouched

    def test_sample_distinct_and_capped(self):
        stream = RandomStream(11)
        picked = stream.sample(Domain.SPAWN, list("abcdefgh"), 3)
        assert len(picked) == 3
        assert len(set(picked)) == 3
        assert sorted(stream.sample(Domain.SPAWN, [1, 2], 10)) == [1, 2]
        assert stream.sample(Domain.SPAWN, [1, 2], 0) == []
