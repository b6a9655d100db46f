"""Direct zone edits and read-only queries over a grid."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from zombiesim.engine.respawn import minimum_threshold
from zombiesim.systems.map_generator import generate_empty_map, generate_map

if TYPE_CHECKING:
    from zombiesim.config import SimulationConfig
    from zombiesim.core.grid import ZoneGrid
    from zombiesim.core.models import Zone
    from zombiesim.systems.rng import RandomStream

logger = logging.getLogger(__name__)

__all__ = [
    "add_zombies",
    "create_empty_grid",
    "edit_zone",
    "generate_grid",
    "kill_zombies",
    "minimum_threshold",
    "total_zombies",
    "zone_at",
]


def create_empty_grid(size: int, origin_x: int = 0, origin_y: int = 0) -> ZoneGrid:
    return generate_empty_map(size, origin_x, origin_y)


def generate_grid(
    size: int,
    config: SimulationConfig,
    rng: RandomStream,
    origin_x: int = 0,
    origin_y: int = 0,
) -> ZoneGrid:
    return generate_map(size, config, rng, origin_x, origin_y)


def zone_at(grid: ZoneGrid, x: int, y: int) -> Zone | None:
    return grid.get(x, y)


def total_zombies(grid: ZoneGrid) -> int:
    return grid.total_zombies()


def _editable(grid: ZoneGrid, x: int, y: int) -> Zone | None:
    zone = grid.get(x, y)
    if zone is None or zone.is_town:
        return None
    return zone


def kill_zombies(grid: ZoneGrid, x: int, y: int, amount: int) -> Zone | None:
    """Remove up to *amount* zombies. Counts never go below zero."""
    zone = _editable(grid, x, y)
    if zone is None:
        return None
    zone.zombies = max(0, zone.zombies - amount)
    return zone


def add_zombies(grid: ZoneGrid, x: int, y: int, amount: int) -> Zone | None:
    zone = _editable(grid, x, y)
    if zone is None:
        return None
    zone.zombies = max(0, zone.zombies + amount)
    return zone


def edit_zone(
    grid: ZoneGrid,
    x: int,
    y: int,
    zombies: int | None = None,
    has_building: bool | None = None,
    is_ruin: bool | None = None,
) -> Zone | None:
    """Overwrite the given fields of a zone; omitted fields are untouched."""
    zone = _editable(grid, x, y)
    if zone is None:
        logger.debug("edit_zone ignored for (%d, %d)", x, y)
        return None
    if zombies is not None:
        zone.zombies = max(0, zombies)
    if has_building is not None:
        zone.has_building = has_building
    if is_ruin is not None:
        zone.is_ruin = is_ruin
    return zone
