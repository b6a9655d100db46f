"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    MAP_GEN = 0
    SPAWN = 1
    SPREAD = 2
    RESPAWN = 3
    SCOUT = 4


@unique
class DangerLevel(IntEnum):
    """Zone danger buckets derived from the zombie count."""

    NONE = 0        # 0 zombies
    LOW = 1         # 1-2
    MEDIUM = 2      # 3-5
    HIGH = 3        # 6-9
    EXTREME = 4     # 10+


class Governor(str, Enum):
    """Spawn governor rule set."""

    MYHORDES = "MyHordes"
    HORDES = "Hordes"


class TownType(str, Enum):
    """Town difficulty; EASY towns get no free spawns close to town."""

    EASY = "EASY"
    NORMAL = "NORMAL"
    HARD = "HARD"


@unique
class RespawnOutcome(IntEnum):
    """How a respawn run terminated."""

    THRESHOLD_REACHED = 0
    STALLED = 1
    ITERATION_LIMIT = 2
    EMPTY_BASELINE = 3
