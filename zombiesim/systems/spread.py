"""Zombie spread cycle: one synchronous pass over every non-town zone.

Every zone's next count is computed from a CountSnapshot taken before the
pass; writes are collected and committed only after all zones have been
evaluated, so zone iteration order never affects the outcome.

Populated zones grow by +1 (90%), or +0 / +2 (5% each).
Empty zones may be infected by their neighbors:
  - target  = round(infected * (8 or 4) / present neighbors)
  - limit   = 4 with an infected orthogonal neighbor, else 3
  - bias    = resistance derived from neighbor density
  - roll    = randint(-bias, limit), one retry if positive and off-target
  - with diagonals enabled a positive roll is capped to 1..2
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from zombiesim.core.enums import Domain
from zombiesim.core.models import round_half_up
from zombiesim.core.snapshot import CountSnapshot, DespairSnapshot

if TYPE_CHECKING:
    from zombiesim.core.grid import ZoneGrid
    from zombiesim.core.models import Zone
    from zombiesim.systems.rng import RandomStream

logger = logging.getLogger(__name__)

GROWTH_CHANCE = 0.9        # Populated zone gains exactly one zombie
HIGH_GROWTH_CHANCE = 0.5   # Otherwise: +2 vs +0


@dataclass(frozen=True, slots=True)
class NeighborhoodStats:
    """Neighbor statistics of an empty zone, read from the cycle snapshot."""

    total: int = 0              # present (on-grid) neighbors
    infected: int = 0           # neighbors with more zombies than the zone
    direct_infected: int = 0    # orthogonal subset of ``infected``
    zombies: int = 0            # sum over present neighbors
    max_zombies: int = 0        # max over present neighbors


def gather_neighborhood(
    zone: Zone,
    grid: ZoneGrid,
    snapshot: CountSnapshot,
    diagonal_neighbors: bool,
) -> NeighborhoodStats:
    own = snapshot.get(zone.coords)
    total = infected = direct = zombies = max_zombies = 0
    for neighbor, is_direct in grid.neighbors(zone, diagonal_neighbors):
        count = snapshot.get(neighbor.coords)
        total += 1
        zombies += count
        max_zombies = max(max_zombies, count)
        if count > own:
            infected += 1
            if is_direct:
                direct += 1
    return NeighborhoodStats(
        total=total,
        infected=infected,
        direct_infected=direct,
        zombies=zombies,
        max_zombies=max_zombies,
    )


def target_number(stats: NeighborhoodStats, diagonal_neighbors: bool) -> int:
    """Infected neighbors normalised to a full 8 (or 4) neighborhood."""
    full = 8.0 if diagonal_neighbors else 4.0
    return round_half_up(stats.infected * (full / stats.total))


def spawn_limit(stats: NeighborhoodStats) -> int:
    return 4 if stats.direct_infected > 0 else 3


def spawn_bias(stats: NeighborhoodStats, limit: int) -> int:
    """Resistance term; larger values suppress growth more."""
    if stats.max_zombies >= 5 and stats.infected >= 2:
        return -1
    if stats.max_zombies >= 15:
        return -1
    if stats.max_zombies >= 8:
        return 0
    if stats.zombies < 5:
        return min(4, limit)
    if stats.zombies < 10:
        return 3
    if stats.zombies < 15:
        return 2
    if stats.zombies < 20:
        return 1
    return 0


def empty_zone_spawn(
    stats: NeighborhoodStats,
    rng: RandomStream,
    diagonal_neighbors: bool,
) -> int:
    """Number of zombies appearing on a previously empty zone."""
    if stats.infected == 0:
        return 0

    target = target_number(stats, diagonal_neighbors)
    limit = spawn_limit(stats)
    bias = spawn_bias(stats, limit)

    new_zeds = rng.randint(Domain.SPREAD, -bias, limit)
    # Single biased retry, not a forced match
    if new_zeds > 0 and new_zeds != target:
        new_zeds = rng.randint(Domain.SPREAD, -bias, limit)

    # Day 2+ spread only ever seeds 1-2 zombies on empty zones
    if diagonal_neighbors and new_zeds > 0:
        new_zeds = max(1, min(2, rng.randint(Domain.SPREAD, -2, 3)))

    return max(0, min(limit, new_zeds))


def populated_zone_growth(rng: RandomStream) -> int:
    if rng.chance(Domain.SPREAD, GROWTH_CHANCE):
        return 1
    return 0 if rng.chance(Domain.SPREAD, HIGH_GROWTH_CHANCE) else 2


def run_spread_cycle(
    grid: ZoneGrid,
    rng: RandomStream,
    despair: DespairSnapshot | None = None,
    observe_despair: bool = False,
    diagonal_neighbors: bool = True,
) -> int:
    """Run one spread cycle over *grid*. Returns the net population change."""
    snapshot = CountSnapshot.from_grid(grid)
    if despair is None:
        despair = DespairSnapshot.empty()

    pending: list[tuple[Zone, int]] = []
    for zone in grid:
        if zone.is_town:
            continue
        if observe_despair and despair.get(zone.coords) > 0:
            continue

        before = snapshot.get(zone.coords)
        if before > 0:
            after = before + populated_zone_growth(rng)
        else:
            stats = gather_neighborhood(zone, grid, snapshot, diagonal_neighbors)
            after = empty_zone_spawn(stats, rng, diagonal_neighbors)
        if after != before:
            pending.append((zone, after))

    delta = 0
    for zone, after in pending:
        delta += after - snapshot.get(zone.coords)
        zone.zombies = after

    logger.debug(
        "Spread cycle: %d zones changed, delta=%+d (despair=%s, diagonal=%s)",
        len(pending), delta, observe_despair, diagonal_neighbors,
    )
    return delta
