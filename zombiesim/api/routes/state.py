"""GET /api/v1/state and /events: day counter, population and diagnostics."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from zombiesim.api.dependencies import get_engine_manager
from zombiesim.api.engine_manager import EngineManager
from zombiesim.api.schemas import EventSchema, StateResponse

router = APIRouter()


@router.get("/state", response_model=StateResponse)
def get_state(manager: EngineManager = Depends(get_engine_manager)) -> StateResponse:
    with manager.session() as state:
        return StateResponse(
            day=state.day,
            size=state.size,
            origin_x=state.grid.origin_x,
            origin_y=state.grid.origin_y,
            total_zombies=state.total_zombies(),
            minimum_threshold=state.minimum_threshold(),
            above_minimum=state.is_above_minimum(),
            history_depth=len(state.history),
            has_day_start=state.day_start is not None,
        )


@router.get("/events", response_model=list[EventSchema])
def get_events(
    since_day: int | None = Query(None, ge=1),
    limit: int = Query(50, ge=1, le=500),
    manager: EngineManager = Depends(get_engine_manager),
) -> list[EventSchema]:
    log = manager.event_log
    events = log.since_day(since_day)[-limit:] if since_day is not None else log.latest(limit)
    return [EventSchema(day=e.day, category=e.category, message=e.message) for e in events]
