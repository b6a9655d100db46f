"""Mutable authoritative simulation state: grid, day counter, history."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from zombiesim.core.grid import ZoneGrid
from zombiesim.core.snapshot import HistorySnapshot

if TYPE_CHECKING:
    from zombiesim.config import SimulationConfig
    from zombiesim.engine.day_simulator import DayReport
    from zombiesim.systems.rng import RandomStream

logger = logging.getLogger(__name__)


class SimulationState:
    """The single source of truth for one map.

    Not thread-safe: callers must serialise every mutation (single writer).
    """

    __slots__ = ("config", "grid", "day", "history", "day_start")

    def __init__(
        self,
        config: SimulationConfig,
        grid: ZoneGrid | None = None,
        day: int = 1,
    ) -> None:
        self.config = config
        self.grid: ZoneGrid = grid if grid is not None else ZoneGrid(
            config.map_size, config.origin_x, config.origin_y,
        )
        self.day: int = day
        self.history: list[HistorySnapshot] = []
        self.day_start: HistorySnapshot | None = None

    # -- derived --

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def origin(self) -> tuple[int, int]:
        return (self.grid.origin_x, self.grid.origin_y)

    def total_zombies(self) -> int:
        return self.grid.total_zombies()

    def minimum_threshold(self) -> float:
        from zombiesim.engine.respawn import minimum_threshold
        return minimum_threshold(self.day, self.config)

    def is_above_minimum(self) -> bool:
        return self.total_zombies() >= self.minimum_threshold()

    # -- snapshot primitives --

    def create_snapshot(self) -> HistorySnapshot:
        return HistorySnapshot.capture(self.day, self.grid)

    def restore_snapshot(self, snapshot: HistorySnapshot) -> None:
        """Restore a snapshot; the snapshot itself stays untouched."""
        self.day = snapshot.day
        self.grid = snapshot.grid.copy()

    def save_to_history(self) -> None:
        self.history.append(self.create_snapshot())
        limit = self.config.history_limit
        if limit is not None and len(self.history) > limit:
            del self.history[: len(self.history) - limit]

    def undo(self) -> bool:
        """Restore the most recent history entry. Returns False if there is none."""
        if not self.history:
            return False
        self.restore_snapshot(self.history.pop())
        return True

    # -- session operations --

    def advance_day(self, rng: RandomStream) -> DayReport:
        """Save history, simulate the night into the next day, bump the counter."""
        from zombiesim.engine.day_simulator import advance_day

        self.save_to_history()
        report = advance_day(self.grid, self.day + 1, self.config, rng)
        self.day += 1
        self.day_start = self.create_snapshot()
        return report

    def reset_to_start_of_day(self) -> bool:
        if self.day_start is None:
            return False
        self.restore_snapshot(self.day_start)
        return True

    def reset_day(self) -> None:
        """Back to day 1 with every zone at its start_zombies baseline."""
        for zone in self.grid:
            zone.zombies = zone.start_zombies
            zone.initial_zombies = zone.start_zombies
        self.day = 1
        self.history.clear()
        self.day_start = None

    def resize(self, new_size: int) -> None:
        """Change the map size, keeping every zone whose coordinates still exist."""
        new_grid = ZoneGrid(new_size, self.grid.origin_x, self.grid.origin_y)
        for zone in self.grid:
            if zone.coords in new_grid:
                new_grid.put(zone.copy())
        logger.info("Resized map %d -> %d", self.grid.size, new_size)
        self.grid = new_grid
        self.day_start = None

    def clear(self, origin_x: int = 0, origin_y: int = 0) -> None:
        from zombiesim.systems.map_generator import generate_empty_map

        self._replace(generate_empty_map(self.size, origin_x, origin_y))

    def regenerate(self, rng: RandomStream, origin_x: int = 0, origin_y: int = 0) -> None:
        from zombiesim.systems.map_generator import generate_map

        self._replace(generate_map(self.size, self.config, rng, origin_x, origin_y))

    def _replace(self, grid: ZoneGrid) -> None:
        self.grid = grid
        self.day = 1
        self.history.clear()
        self.day_start = None
