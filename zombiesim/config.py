"""Simulation configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace

from zombiesim.core.enums import Governor, TownType


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable configuration for the simulation run."""

    # World
    world_seed: int = 42
    map_size: int = 25
    origin_x: int = 0
    origin_y: int = 0

    # Respawn (population floor = threshold * day * factor)
    respawn_threshold: int = 50
    respawn_factor: float = 0.5
    respawn_max_iterations: int = 1000

    # Initial spawn
    free_spawn_dist: int = 0               # Min km for random spawn zones
    free_spawn_count: int = 3              # Number of random spawn zones
    ruin_count: int = 10
    min_ruin_distance: int = 1
    max_ruin_distance: int = 10

    # Rules
    governor: Governor = Governor.MYHORDES
    town_type: TownType = TownType.NORMAL

    # History (None = unbounded)
    history_limit: int | None = None

    # Logging
    log_level: str = "INFO"
    save_file: str = "saved_maps.json"

    def with_overrides(self, **changes) -> SimulationConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
