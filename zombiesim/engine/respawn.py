"""Respawn governor. Regrows the horde when the population falls too low.

The map is reset to its day-1 baseline, spread until the day's floor is
met, and the zombies that were on the map before are added back on top.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from zombiesim.core.enums import RespawnOutcome
from zombiesim.systems.spread import run_spread_cycle

if TYPE_CHECKING:
    from zombiesim.config import SimulationConfig
    from zombiesim.core.grid import ZoneGrid
    from zombiesim.systems.rng import RandomStream

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RespawnResult:
    """Diagnostic record of one respawn run."""

    day: int
    outcome: RespawnOutcome
    iterations: int
    baseline: int       # population after the reset to start_zombies
    regrown: int        # baseline after spreading
    threshold: float


def minimum_threshold(day: int, config: SimulationConfig) -> float:
    """Population floor for *day*."""
    return config.respawn_threshold * day * config.respawn_factor


def is_above_minimum(total: int, day: int, config: SimulationConfig) -> bool:
    return total >= minimum_threshold(day, config)


def perform_respawn(
    grid: ZoneGrid,
    day: int,
    config: SimulationConfig,
    rng: RandomStream,
) -> RespawnResult:
    """Regrow the map toward ``minimum_threshold(day)``. Despair is ignored."""
    threshold = minimum_threshold(day, config)
    backup = grid.zombie_counts()

    total = 0
    for zone in grid:
        zone.zombies = zone.start_zombies
        total += zone.zombies
    baseline = total

    if total == 0:
        for zone in grid:
            zone.zombies = backup[zone.coords]
        logger.warning("Respawn skipped on day %d: map has no start zombies.", day)
        return RespawnResult(
            day=day, outcome=RespawnOutcome.EMPTY_BASELINE, iterations=0,
            baseline=0, regrown=0, threshold=threshold,
        )

    outcome = RespawnOutcome.THRESHOLD_REACHED
    iterations = 0
    while not is_above_minimum(total, day, config):
        if iterations >= config.respawn_max_iterations:
            outcome = RespawnOutcome.ITERATION_LIMIT
            logger.warning("Respawn hit the iteration limit (%d) on day %d.", iterations, day)
            break
        added = run_spread_cycle(grid, rng, observe_despair=False, diagonal_neighbors=True)
        total += added
        iterations += 1
        if added == 0:
            outcome = RespawnOutcome.STALLED
            logger.warning("Respawn stalled on day %d: no zombies spreading (total=%d).", day, total)
            break

    for zone in grid:
        zone.zombies += backup[zone.coords]

    logger.info(
        "Respawn day %d: %s after %d cycles (baseline=%d, regrown=%d, floor=%.1f)",
        day, outcome.name, iterations, baseline, total, threshold,
    )
    return RespawnResult(
        day=day, outcome=outcome, iterations=iterations,
        baseline=baseline, regrown=total, threshold=threshold,
    )
