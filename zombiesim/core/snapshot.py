"""Immutable snapshots: per-cycle zombie counts, frozen despair, and history."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from zombiesim.core.grid import ZoneGrid
from zombiesim.core.models import compute_despair

EMPTY_DESPAIR: Mapping[tuple[int, int], int] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class CountSnapshot:
    """Zombie counts frozen before a spread cycle mutates anything."""

    counts: Mapping[tuple[int, int], int]

    @classmethod
    def from_grid(cls, grid: ZoneGrid) -> CountSnapshot:
        return cls(counts=MappingProxyType(grid.zombie_counts()))

    def get(self, coords: tuple[int, int]) -> int:
        return self.counts.get(coords, 0)


@dataclass(frozen=True, slots=True)
class DespairSnapshot:
    """Per-zone despair frozen at the start of a day."""

    values: Mapping[tuple[int, int], int]

    @classmethod
    def from_grid(cls, grid: ZoneGrid) -> DespairSnapshot:
        """Compute despair from the zones' current (pre-freeze) values."""
        return cls(values=MappingProxyType({
            coords: compute_despair(z.initial_zombies, z.zombies)
            for coords, z in grid.items()
        }))

    @classmethod
    def empty(cls) -> DespairSnapshot:
        return cls(values=EMPTY_DESPAIR)

    def get(self, coords: tuple[int, int]) -> int:
        return self.values.get(coords, 0)


@dataclass(frozen=True, slots=True)
class HistorySnapshot:
    """Full, independent copy of the map at a given day."""

    day: int
    total_zombies: int
    grid: ZoneGrid

    @classmethod
    def capture(cls, day: int, grid: ZoneGrid) -> HistorySnapshot:
        return cls(day=day, total_zombies=grid.total_zombies(), grid=grid.copy())
