"""Engine layer: day simulator, respawn governor, direct edits."""

from zombiesim.engine.respawn import RespawnResult, minimum_threshold, perform_respawn
from zombiesim.engine.day_simulator import DayReport, advance_day
from zombiesim.engine.edits import (
    add_zombies,
    create_empty_grid,
    edit_zone,
    generate_grid,
    kill_zombies,
    total_zombies,
    zone_at,
)

__all__ = [
    "DayReport",
    "RespawnResult",
    "add_zombies",
    "advance_day",
    "create_empty_grid",
    "edit_zone",
    "generate_grid",
    "kill_zombies",
    "minimum_threshold",
    "perform_respawn",
    "total_zombies",
    "zone_at",
]
