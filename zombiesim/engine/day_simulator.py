"""Day simulator: the fixed four-step nightly transition.

Step cycle:
  1. Freeze: capture despair, set initial_zombies, re-roll scout noise
  2. Respawn check: evaluated against the *upcoming* day number
  3. Spread: exactly one cycle observing the frozen despair
  4. Despair decay: applied to the post-spread counts
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from zombiesim.core.enums import Domain
from zombiesim.core.snapshot import DespairSnapshot
from zombiesim.engine.respawn import RespawnResult, is_above_minimum, perform_respawn
from zombiesim.systems.spread import run_spread_cycle

if TYPE_CHECKING:
    from zombiesim.config import SimulationConfig
    from zombiesim.core.grid import ZoneGrid
    from zombiesim.systems.rng import RandomStream

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DayReport:
    """Summary of one advance_day call."""

    day: int
    total_before: int
    respawn: RespawnResult | None
    spread_delta: int
    despair_removed: int
    total_after: int


def freeze_day(grid: ZoneGrid, rng: RandomStream) -> DespairSnapshot:
    """Step 1: freeze despair from the pre-freeze values, then start the day."""
    despair = DespairSnapshot.from_grid(grid)
    for zone in grid:
        zone.initial_zombies = zone.zombies
        zone.scout_estimation_offset = rng.randint(Domain.SCOUT, -2, 2)
    return despair


def apply_despair(grid: ZoneGrid, despair: DespairSnapshot) -> int:
    """Step 4: remove frozen despair from each zone. Returns zombies removed."""
    removed = 0
    for zone in grid:
        amount = despair.get(zone.coords)
        if amount >= 1:
            after = max(0, zone.zombies - amount)
            removed += zone.zombies - after
            zone.zombies = after
        zone.player_deaths = 0
    return removed


def advance_day(
    grid: ZoneGrid,
    day: int,
    config: SimulationConfig,
    rng: RandomStream,
) -> DayReport:
    """Run the nightly transition for *day* in place.

    The caller owns the day counter; it is not changed here.
    """
    despair = freeze_day(grid, rng)

    total_before = grid.total_zombies()
    respawn = None
    # The game increments the day before spawning, so check the next one
    if not is_above_minimum(total_before, day + 1, config):
        respawn = perform_respawn(grid, day + 1, config, rng)

    delta = run_spread_cycle(
        grid, rng, despair=despair, observe_despair=True, diagonal_neighbors=day >= 2,
    )
    removed = apply_despair(grid, despair)

    report = DayReport(
        day=day,
        total_before=total_before,
        respawn=respawn,
        spread_delta=delta,
        despair_removed=removed,
        total_after=grid.total_zombies(),
    )
    logger.info(
        "Day %d: %d -> %d zombies (spread %+d, despair -%d%s)",
        day, total_before, report.total_after, delta, removed,
        f", respawn {respawn.outcome.name}" if respawn else "",
    )
    return report
