"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from zombiesim.core.enums import Governor, TownType


# --- Zones / map ---

class ZoneSchema(BaseModel):
    key: str
    x: int
    y: int
    zombies: int
    initial_zombies: int
    start_zombies: int
    has_building: bool
    is_ruin: bool
    is_town: bool
    distance: int
    despair: int
    killed: int
    danger_level: int
    scout_estimate: int
    player_deaths: int = 0


class MapResponse(BaseModel):
    size: int
    origin_x: int
    origin_y: int
    day: int
    zones: list[ZoneSchema]


class ZoneEditRequest(BaseModel):
    zombies: int | None = Field(None, ge=0)
    has_building: bool | None = None
    is_ruin: bool | None = None


# --- State ---

class StateResponse(BaseModel):
    day: int
    size: int
    origin_x: int
    origin_y: int
    total_zombies: int
    minimum_threshold: float
    above_minimum: bool
    history_depth: int
    has_day_start: bool


class EventSchema(BaseModel):
    day: int
    category: str
    message: str


# --- Control ---

class RespawnSchema(BaseModel):
    outcome: str
    iterations: int
    baseline: int
    regrown: int
    threshold: float


class DayReportSchema(BaseModel):
    day: int
    total_before: int
    total_after: int
    spread_delta: int
    despair_removed: int
    respawn: RespawnSchema | None = None


class ControlResponse(BaseModel):
    status: str
    message: str
    day: int
    report: DayReportSchema | None = None


# --- Config ---

class SimulationConfigResponse(BaseModel):
    world_seed: int
    map_size: int
    origin_x: int
    origin_y: int
    respawn_threshold: int
    respawn_factor: float
    respawn_max_iterations: int
    free_spawn_dist: int
    free_spawn_count: int
    ruin_count: int
    min_ruin_distance: int
    max_ruin_distance: int
    governor: Governor
    town_type: TownType
    history_limit: int | None = None


class ConfigUpdateRequest(BaseModel):
    """Partial override; omitted fields keep their current value."""

    world_seed: int | None = None
    respawn_threshold: int | None = None
    respawn_factor: float | None = None
    respawn_max_iterations: int | None = None
    free_spawn_dist: int | None = None
    free_spawn_count: int | None = None
    ruin_count: int | None = None
    min_ruin_distance: int | None = None
    max_ruin_distance: int | None = None
    governor: Governor | None = None
    town_type: TownType | None = None
    history_limit: int | None = None


# --- Saved maps ---

class SavedMapSummary(BaseModel):
    index: int
    name: str | None = None
    timestamp: str | None = None
    size: int
    day: int


class SaveRequest(BaseModel):
    name: str | None = None
