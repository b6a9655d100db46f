"""Owns the single simulation session served by the API.

The engine itself takes no locks; this manager is the single writer. Every
read and mutation of the SimulationState happens under one lock, so a day
advance never interleaves with an edit.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from zombiesim.core.simulation_state import SimulationState
from zombiesim.engine.edits import add_zombies, edit_zone, kill_zombies
from zombiesim.systems.rng import RandomStream
from zombiesim.utils.event_log import EventLog, SimEvent, events_for_day
from zombiesim.utils.persistence import MapLibrary, SavedMap, from_record

if TYPE_CHECKING:
    from zombiesim.config import SimulationConfig
    from zombiesim.core.models import Zone
    from zombiesim.engine.day_simulator import DayReport

logger = logging.getLogger(__name__)


class ZoneNotFound(LookupError):
    pass


class TownNotEditable(ValueError):
    pass


class EngineManager:
    """Serialises access to one SimulationState, its RNG and its map library."""

    def __init__(self, config: SimulationConfig) -> None:
        self._config = config
        self._lock = threading.Lock()
        self._event_log = EventLog()
        self._library = MapLibrary(config.save_file)
        self._rng: RandomStream = RandomStream(config.world_seed)
        self._state: SimulationState = SimulationState(config)
        logger.info("EngineManager ready (seed=%d, size=%d)", config.world_seed, config.map_size)

    # -- public properties --

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def library(self) -> MapLibrary:
        return self._library

    @contextmanager
    def session(self) -> Iterator[SimulationState]:
        """Hold the writer lock for the duration of the block."""
        with self._lock:
            yield self._state

    # -- configuration --

    def update_config(self, **changes) -> SimulationConfig:
        with self._lock:
            new = self._config.with_overrides(**changes)
            if new.world_seed != self._config.world_seed:
                self._rng = RandomStream(new.world_seed)
            if new.save_file != self._config.save_file:
                self._library = MapLibrary(new.save_file)
            self._config = new
            self._state.config = new
            logger.info("Config updated: %s", ", ".join(sorted(changes)))
            return new

    # -- day lifecycle --

    def advance(self) -> DayReport:
        with self._lock:
            report = self._state.advance_day(self._rng)
            self._event_log.append_many(events_for_day(report))
            return report

    def undo(self) -> bool:
        with self._lock:
            return self._state.undo()

    def reset_day(self) -> None:
        with self._lock:
            self._state.reset_day()
            self._event_log.append(SimEvent(day=1, category="control", message="Reset to day 1."))

    def reset_to_start_of_day(self) -> bool:
        with self._lock:
            return self._state.reset_to_start_of_day()

    def clear(self, origin_x: int = 0, origin_y: int = 0) -> None:
        with self._lock:
            self._state.clear(origin_x, origin_y)
            self._event_log.clear()

    def generate(self, origin_x: int = 0, origin_y: int = 0) -> int:
        with self._lock:
            self._state.regenerate(self._rng, origin_x, origin_y)
            self._event_log.clear()
            total = self._state.total_zombies()
            self._event_log.append(SimEvent(
                day=1, category="generate", message=f"New map with {total} zombies.",
            ))
            return total

    def resize(self, size: int) -> None:
        with self._lock:
            self._state.resize(size)

    # -- zone edits --

    def _checked_zone(self, x: int, y: int) -> Zone:
        zone = self._state.grid.get(x, y)
        if zone is None:
            raise ZoneNotFound(f"No zone at ({x}, {y})")
        if zone.is_town:
            raise TownNotEditable("The town zone cannot be edited")
        return zone

    def kill(self, x: int, y: int, amount: int) -> Zone:
        with self._lock:
            self._checked_zone(x, y)
            return kill_zombies(self._state.grid, x, y, amount)

    def add(self, x: int, y: int, amount: int) -> Zone:
        with self._lock:
            self._checked_zone(x, y)
            return add_zombies(self._state.grid, x, y, amount)

    def edit(
        self,
        x: int,
        y: int,
        zombies: int | None = None,
        has_building: bool | None = None,
        is_ruin: bool | None = None,
    ) -> Zone:
        with self._lock:
            self._checked_zone(x, y)
            return edit_zone(
                self._state.grid, x, y,
                zombies=zombies, has_building=has_building, is_ruin=is_ruin,
            )

    # -- saved maps --

    def save(self, name: str | None = None) -> SavedMap:
        with self._lock:
            return self._library.save(self._state, name)

    def load(self, index: int) -> SavedMap:
        with self._lock:
            record = self._library.get(index)
            self._state = from_record(record, self._config)
            self._event_log.clear()
            return record

    def delete_save(self, index: int) -> SavedMap:
        with self._lock:
            return self._library.delete(index)
