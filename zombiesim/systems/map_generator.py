"""Map generation: empty maps, ruin placement and initial zombie spawn."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from zombiesim.core.enums import Domain, Governor, TownType
from zombiesim.core.grid import ZoneGrid
from zombiesim.systems.spread import run_spread_cycle

if TYPE_CHECKING:
    from zombiesim.config import SimulationConfig
    from zombiesim.systems.rng import RandomStream

logger = logging.getLogger(__name__)

RUIN_ZOMBIE_VARIANCE = 0.2
EASY_SAFE_RADIUS = 3        # EASY towns get no free spawns closer than this
MAX_TOPUP_CYCLES = 3


def generate_empty_map(size: int, origin_x: int = 0, origin_y: int = 0) -> ZoneGrid:
    """All cells of a size x size map, shifted by the origin. No ruins, no zombies."""
    return ZoneGrid(size, origin_x, origin_y)


def generate_map(
    size: int,
    config: SimulationConfig,
    rng: RandomStream,
    origin_x: int = 0,
    origin_y: int = 0,
) -> ZoneGrid:
    """Build a populated map: ruins, seeded zombies and pre-day-1 spread."""
    grid = ZoneGrid(size, origin_x, origin_y)
    ruins = place_ruins(grid, config, rng)
    place_initial_zombies(grid, config, rng)
    logger.info(
        "Generated %dx%d map (origin=%d,%d): %d ruins, %d zombies",
        size, size, origin_x, origin_y, ruins, grid.total_zombies(),
    )
    return grid


def initial_cycles(config: SimulationConfig) -> int:
    return 3 if config.governor == Governor.HORDES else 2


def place_ruins(grid: ZoneGrid, config: SimulationConfig, rng: RandomStream) -> int:
    """Mark ``ruin_count`` random zones within the ruin distance band.

    Ruins may cluster; no spacing rule is applied.
    """
    candidates = [
        z for z in grid
        if z.distance != 0
        and config.min_ruin_distance <= z.distance <= config.max_ruin_distance
    ]
    chosen = rng.sample(Domain.MAP_GEN, candidates, config.ruin_count)
    for zone in chosen:
        zone.is_ruin = True
        zone.has_building = True
    return len(chosen)


def ruin_zombie_range(distance: int) -> tuple[int, int]:
    low = math.floor(distance * (1 - RUIN_ZOMBIE_VARIANCE))
    high = math.ceil(distance * (1 + RUIN_ZOMBIE_VARIANCE))
    return low, high


def place_initial_zombies(grid: ZoneGrid, config: SimulationConfig, rng: RandomStream) -> None:
    # 1. Ruins scale with distance from town
    for zone in grid:
        if zone.is_ruin:
            low, high = ruin_zombie_range(zone.distance)
            zone.zombies = max(1, rng.randint(Domain.SPAWN, low, high))

    # 2. Free spawn zones get 0-2
    free = [
        z for z in grid
        if not z.is_town and not z.is_ruin and z.distance >= config.free_spawn_dist
    ]
    for zone in rng.sample(Domain.SPAWN, free, config.free_spawn_count):
        if config.town_type != TownType.EASY or zone.distance >= EASY_SAFE_RADIUS:
            zone.zombies = rng.randint(Domain.SPAWN, 0, 2)

    # 3. Day-1 bookkeeping
    for zone in grid:
        zone.initial_zombies = zone.zombies
        zone.start_zombies = zone.zombies
        zone.scout_estimation_offset = rng.randint(Domain.SCOUT, -2, 2)
        zone.player_deaths = 0

    # 4. Pre-seed a realistic spatial pattern
    for _ in range(initial_cycles(config)):
        run_spread_cycle(grid, rng, observe_despair=False, diagonal_neighbors=True)

    # 5. Top up to the day-1 population floor
    floor = config.respawn_threshold * config.respawn_factor
    extra = 0
    while grid.total_zombies() < floor and extra < MAX_TOPUP_CYCLES:
        run_spread_cycle(grid, rng, observe_despair=False, diagonal_neighbors=True)
        extra += 1

    # 6. Respawn baseline follows the spread; initial_zombies stays pre-spread
    for zone in grid:
        zone.start_zombies = zone.zombies
