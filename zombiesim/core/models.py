"""Core data models: Zone and the derived-value rules."""

from __future__ import annotations

import math
from dataclasses import dataclass

from zombiesim.core.enums import DangerLevel

# Danger thresholds: (max zombies, level), checked in order
_DANGER_BUCKETS: tuple[tuple[int, DangerLevel], ...] = (
    (0, DangerLevel.NONE),
    (2, DangerLevel.LOW),
    (5, DangerLevel.MEDIUM),
    (9, DangerLevel.HIGH),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up."""
    return math.floor(value + 0.5)


def zone_key(x: int, y: int) -> str:
    """String key used by the saved-map format."""
    return f"{x},{y}"


def compute_despair(initial_zombies: int, zombies: int) -> int:
    return max(0, (initial_zombies - zombies - 1) // 2)


@dataclass(slots=True)
class Zone:
    """Mutable map cell. Coordinates are relative to the town at (0, 0)."""

    x: int
    y: int
    zombies: int = 0
    initial_zombies: int = 0    # Frozen at the start of the current day
    start_zombies: int = 0      # Day-1 baseline used by respawn
    has_building: bool = False
    is_ruin: bool = False
    scout_estimation_offset: int = 0
    player_deaths: int = 0

    # -- derived --

    @property
    def coords(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def key(self) -> str:
        return zone_key(self.x, self.y)

    @property
    def is_town(self) -> bool:
        return self.x == 0 and self.y == 0

    @property
    def distance(self) -> int:
        """Euclidean distance from town in km."""
        return round_half_up(math.sqrt(self.x * self.x + self.y * self.y))

    @property
    def despair(self) -> int:
        """Resistance to re-infestation after zombies were cleared today."""
        return compute_despair(self.initial_zombies, self.zombies)

    @property
    def killed(self) -> int:
        return max(0, self.initial_zombies - self.zombies)

    @property
    def danger_level(self) -> DangerLevel:
        for upper, level in _DANGER_BUCKETS:
            if self.zombies <= upper:
                return level
        return DangerLevel.EXTREME

    @property
    def scout_estimate(self) -> int:
        return max(0, self.zombies + self.scout_estimation_offset)

    # -- copy --

    def copy(self) -> Zone:
        return Zone(
            x=self.x,
            y=self.y,
            zombies=self.zombies,
            initial_zombies=self.initial_zombies,
            start_zombies=self.start_zombies,
            has_building=self.has_building,
            is_ruin=self.is_ruin,
            scout_estimation_offset=self.scout_estimation_offset,
            player_deaths=self.player_deaths,
        )
