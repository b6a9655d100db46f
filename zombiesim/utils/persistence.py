"""Saved-map serialization and an on-disk JSON map library.

Record layout (camelCase on the wire)::

    {size, day, originX, originY,
     zones: [{key: "x,y", x, y, zombies, initialZombies, startZombies,
              hasBuilding, isRuin}, ...]}

Loading rebuilds a full empty grid first and overlays saved zones by key,
so saves taken before a resize still load.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from zombiesim.core.simulation_state import SimulationState
from zombiesim.systems.map_generator import generate_empty_map

if TYPE_CHECKING:
    from zombiesim.config import SimulationConfig

logger = logging.getLogger(__name__)


class SavedZone(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key: str
    x: int
    y: int
    zombies: int = 0
    initial_zombies: int = Field(0, alias="initialZombies")
    start_zombies: int = Field(0, alias="startZombies")
    has_building: bool = Field(False, alias="hasBuilding")
    is_ruin: bool = Field(False, alias="isRuin")

    def coords(self) -> tuple[int, int] | None:
        """Coordinates parsed from ``key``; None if the key is malformed."""
        parts = self.key.split(",")
        if len(parts) != 2:
            return None
        try:
            return (int(parts[0]), int(parts[1]))
        except ValueError:
            return None


class SavedMap(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    size: int
    day: int = 1
    origin_x: int = Field(0, alias="originX")
    origin_y: int = Field(0, alias="originY")
    zones: list[SavedZone] = Field(default_factory=list)
    # Library metadata
    name: str | None = None
    timestamp: str | None = None


def to_record(state: SimulationState, name: str | None = None) -> SavedMap:
    origin_x, origin_y = state.origin
    return SavedMap(
        size=state.size,
        day=state.day,
        origin_x=origin_x,
        origin_y=origin_y,
        zones=[
            SavedZone(
                key=z.key, x=z.x, y=z.y,
                zombies=z.zombies,
                initial_zombies=z.initial_zombies,
                start_zombies=z.start_zombies,
                has_building=z.has_building,
                is_ruin=z.is_ruin,
            )
            for z in state.grid
        ],
        name=name,
    )


def from_record(record: SavedMap, config: SimulationConfig) -> SimulationState:
    """Rebuild a SimulationState; unknown keys are ignored, missing keys keep defaults."""
    grid = generate_empty_map(record.size, record.origin_x, record.origin_y)
    skipped = 0
    for saved in record.zones:
        coords = saved.coords()
        zone = grid.get(*coords) if coords is not None else None
        if zone is None:
            skipped += 1
            continue
        if zone.is_town:
            continue
        zone.zombies = max(0, saved.zombies)
        zone.initial_zombies = saved.initial_zombies
        zone.start_zombies = saved.start_zombies
        zone.has_building = saved.has_building
        zone.is_ruin = saved.is_ruin
    if skipped:
        logger.info("Ignored %d saved zones outside the %dx%d grid", skipped, record.size, record.size)
    return SimulationState(config, grid=grid, day=record.day)


def dumps(record: SavedMap) -> str:
    return json.dumps(record.model_dump(by_alias=True, exclude_none=True))


def loads(raw: str) -> SavedMap:
    return SavedMap.model_validate_json(raw)


class MapLibrary:
    """Ordered list of saved maps kept in a single JSON file."""

    __slots__ = ("_path",)

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def entries(self) -> list[SavedMap]:
        if not self._path.exists():
            return []
        raw = json.loads(self._path.read_text(encoding="utf-8"))
        return [SavedMap.model_validate(item) for item in raw]

    def _write(self, entries: list[SavedMap]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = [e.model_dump(by_alias=True, exclude_none=True) for e in entries]
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def save(self, state: SimulationState, name: str | None = None) -> SavedMap:
        timestamp = datetime.now().isoformat(timespec="seconds")
        record = to_record(state, name=name or f"Map - Day {state.day} - {timestamp}")
        record.timestamp = timestamp
        entries = self.entries()
        entries.append(record)
        self._write(entries)
        logger.info("Saved map '%s' to %s (%d entries)", record.name, self._path, len(entries))
        return record

    def get(self, index: int) -> SavedMap:
        entries = self.entries()
        if not 0 <= index < len(entries):
            raise IndexError(f"No saved map at index {index}")
        return entries[index]

    def load(self, index: int, config: SimulationConfig) -> SimulationState:
        return from_record(self.get(index), config)

    def delete(self, index: int) -> SavedMap:
        entries = self.entries()
        if not 0 <= index < len(entries):
            raise IndexError(f"No saved map at index {index}")
        removed = entries.pop(index)
        self._write(entries)
        logger.info("Deleted saved map '%s'", removed.name)
        return removed
