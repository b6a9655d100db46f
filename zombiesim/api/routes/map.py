"""GET /api/v1/map and the per-zone read/edit endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from zombiesim.api.dependencies import get_engine_manager
from zombiesim.api.engine_manager import EngineManager, TownNotEditable, ZoneNotFound
from zombiesim.api.schemas import ControlResponse, MapResponse, ZoneEditRequest, ZoneSchema
from zombiesim.core.models import Zone

router = APIRouter()

MAP_SIZES = (25, 26, 27)


def zone_schema(z: Zone) -> ZoneSchema:
    return ZoneSchema(
        key=z.key, x=z.x, y=z.y,
        zombies=z.zombies,
        initial_zombies=z.initial_zombies,
        start_zombies=z.start_zombies,
        has_building=z.has_building,
        is_ruin=z.is_ruin,
        is_town=z.is_town,
        distance=z.distance,
        despair=z.despair,
        killed=z.killed,
        danger_level=int(z.danger_level),
        scout_estimate=z.scout_estimate,
        player_deaths=z.player_deaths,
    )


def _edit_errors(exc: Exception) -> HTTPException:
    if isinstance(exc, ZoneNotFound):
        return HTTPException(status_code=404, detail=str(exc))
    return HTTPException(status_code=409, detail=str(exc))


@router.get("/map", response_model=MapResponse)
def get_map(manager: EngineManager = Depends(get_engine_manager)) -> MapResponse:
    with manager.session() as state:
        return MapResponse(
            size=state.size,
            origin_x=state.grid.origin_x,
            origin_y=state.grid.origin_y,
            day=state.day,
            zones=[zone_schema(z) for z in state.grid],
        )


@router.get("/zones/{x}/{y}", response_model=ZoneSchema)
def get_zone(x: int, y: int, manager: EngineManager = Depends(get_engine_manager)) -> ZoneSchema:
    with manager.session() as state:
        zone = state.grid.get(x, y)
        if zone is None:
            raise HTTPException(status_code=404, detail=f"No zone at ({x}, {y})")
        return zone_schema(zone)


@router.post("/zones/{x}/{y}/kill", response_model=ZoneSchema)
def kill(
    x: int,
    y: int,
    amount: int = Query(1, ge=0),
    manager: EngineManager = Depends(get_engine_manager),
) -> ZoneSchema:
    try:
        return zone_schema(manager.kill(x, y, amount))
    except (ZoneNotFound, TownNotEditable) as exc:
        raise _edit_errors(exc) from exc


@router.post("/zones/{x}/{y}/add", response_model=ZoneSchema)
def add(
    x: int,
    y: int,
    amount: int = Query(1, ge=0),
    manager: EngineManager = Depends(get_engine_manager),
) -> ZoneSchema:
    try:
        return zone_schema(manager.add(x, y, amount))
    except (ZoneNotFound, TownNotEditable) as exc:
        raise _edit_errors(exc) from exc


@router.patch("/zones/{x}/{y}", response_model=ZoneSchema)
def edit(
    x: int,
    y: int,
    body: ZoneEditRequest,
    manager: EngineManager = Depends(get_engine_manager),
) -> ZoneSchema:
    try:
        zone = manager.edit(
            x, y, zombies=body.zombies, has_building=body.has_building, is_ruin=body.is_ruin,
        )
    except (ZoneNotFound, TownNotEditable) as exc:
        raise _edit_errors(exc) from exc
    return zone_schema(zone)


@router.post("/resize", response_model=ControlResponse)
def resize(
    size: int = Query(..., description="Map size (25, 26 or 27)"),
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    if size not in MAP_SIZES:
        raise HTTPException(status_code=422, detail=f"size must be one of {MAP_SIZES}")
    manager.resize(size)
    with manager.session() as state:
        return ControlResponse(status="ok", message=f"Map resized to {size}x{size}.", day=state.day)
