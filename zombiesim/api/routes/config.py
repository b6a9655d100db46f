"""GET/PUT /api/v1/config: simulation configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from zombiesim.api.dependencies import get_engine_manager
from zombiesim.api.engine_manager import EngineManager
from zombiesim.api.schemas import ConfigUpdateRequest, SimulationConfigResponse
from zombiesim.config import SimulationConfig

router = APIRouter()


def _config_response(cfg: SimulationConfig) -> SimulationConfigResponse:
    return SimulationConfigResponse(
        world_seed=cfg.world_seed,
        map_size=cfg.map_size,
        origin_x=cfg.origin_x,
        origin_y=cfg.origin_y,
        respawn_threshold=cfg.respawn_threshold,
        respawn_factor=cfg.respawn_factor,
        respawn_max_iterations=cfg.respawn_max_iterations,
        free_spawn_dist=cfg.free_spawn_dist,
        free_spawn_count=cfg.free_spawn_count,
        ruin_count=cfg.ruin_count,
        min_ruin_distance=cfg.min_ruin_distance,
        max_ruin_distance=cfg.max_ruin_distance,
        governor=cfg.governor,
        town_type=cfg.town_type,
        history_limit=cfg.history_limit,
    )


@router.get("/config", response_model=SimulationConfigResponse)
def get_config(manager: EngineManager = Depends(get_engine_manager)) -> SimulationConfigResponse:
    return _config_response(manager.config)


@router.put("/config", response_model=SimulationConfigResponse)
def update_config(
    body: ConfigUpdateRequest,
    manager: EngineManager = Depends(get_engine_manager),
) -> SimulationConfigResponse:
    changes = body.model_dump(exclude_unset=True)
    if not changes:
        return _config_response(manager.config)
    return _config_response(manager.update_config(**changes))
