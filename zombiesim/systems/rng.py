"""Seeded randomness for map generation and spread, built on xxhash.

Every draw is Hash(WorldSeed, Domain, Key, Index). A RandomStream walks the
index forward per domain, so replaying the same calls against the same seed
reproduces a map and its whole day history.
"""

from __future__ import annotations

import struct
from typing import Sequence, TypeVar

import xxhash

from zombiesim.core.enums import Domain

T = TypeVar("T")


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, key, index) with
    no internal mutable state.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, index: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, index)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, index: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, index) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, index: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, index)
        return low + int(f * (high - low + 1))

    def next_bool(self, domain: Domain, key: int, index: int, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, key, index) < probability


class RandomStream:
    """Sequential generator threaded through every random operation.

    Wraps a DeterministicRNG with one draw cursor per domain, so map
    generation, spread and respawn consume independent sequences.
    """

    __slots__ = ("_rng", "_cursors")

    def __init__(self, seed: int) -> None:
        self._rng = DeterministicRNG(seed)
        self._cursors: dict[Domain, int] = {}

    @property
    def seed(self) -> int:
        return self._rng.seed

    def draws(self, domain: Domain) -> int:
        """Number of values drawn so far in *domain*."""
        return self._cursors.get(domain, 0)

    def _advance(self, domain: Domain) -> int:
        idx = self._cursors.get(domain, 0)
        self._cursors[domain] = idx + 1
        return idx

    def randint(self, domain: Domain, low: int, high: int) -> int:
        """Integer in [low, high] inclusive."""
        return self._rng.next_int(domain, 0, self._advance(domain), low, high)

    def chance(self, domain: Domain, probability: float) -> bool:
        return self._rng.next_bool(domain, 0, self._advance(domain), probability)

    def shuffled(self, domain: Domain, items: Sequence[T]) -> list[T]:
        """Return a uniformly shuffled copy (Fisher-Yates)."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.randint(domain, 0, i)
            result[i], result[j] = result[j], result[i]
        return result

    def sample(self, domain: Domain, items: Sequence[T], count: int) -> list[T]:
        """Draw up to *count* distinct items without replacement."""
        return self.shuffled(domain, items)[:max(0, count)]
