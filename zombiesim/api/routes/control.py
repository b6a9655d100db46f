"""POST /api/v1/control/{action}: day lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, Query

from zombiesim.api.dependencies import get_engine_manager
from zombiesim.api.engine_manager import EngineManager
from zombiesim.api.schemas import ControlResponse, DayReportSchema, RespawnSchema
from zombiesim.engine.day_simulator import DayReport

router = APIRouter()


class ControlAction(str, Enum):
    advance = "advance"
    undo = "undo"
    reset_day = "reset_day"
    reset_to_start_of_day = "reset_to_start_of_day"
    clear = "clear"
    generate = "generate"


def _report_schema(report: DayReport) -> DayReportSchema:
    respawn = None
    if report.respawn is not None:
        r = report.respawn
        respawn = RespawnSchema(
            outcome=r.outcome.name.lower(),
            iterations=r.iterations,
            baseline=r.baseline,
            regrown=r.regrown,
            threshold=r.threshold,
        )
    return DayReportSchema(
        day=report.day,
        total_before=report.total_before,
        total_after=report.total_after,
        spread_delta=report.spread_delta,
        despair_removed=report.despair_removed,
        respawn=respawn,
    )


def _current_day(manager: EngineManager) -> int:
    with manager.session() as state:
        return state.day


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    origin_x: int = Query(0, description="Town X offset (clear/generate only)"),
    origin_y: int = Query(0, description="Town Y offset (clear/generate only)"),
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    match action:
        case ControlAction.advance:
            report = manager.advance()
            return ControlResponse(
                status="ok", message=f"Advanced to day {report.day}.",
                day=report.day, report=_report_schema(report),
            )

        case ControlAction.undo:
            if not manager.undo():
                return ControlResponse(status="noop", message="History is empty.", day=_current_day(manager))
            return ControlResponse(status="ok", message="Previous day restored.", day=_current_day(manager))

        case ControlAction.reset_day:
            manager.reset_day()
            return ControlResponse(status="ok", message="Map reset to day 1.", day=1)

        case ControlAction.reset_to_start_of_day:
            if not manager.reset_to_start_of_day():
                return ControlResponse(status="noop", message="No day-start snapshot yet.", day=_current_day(manager))
            return ControlResponse(status="ok", message="Day restarted.", day=_current_day(manager))

        case ControlAction.clear:
            manager.clear(origin_x, origin_y)
            return ControlResponse(status="ok", message="Map cleared.", day=1)

        case ControlAction.generate:
            total = manager.generate(origin_x, origin_y)
            return ControlResponse(status="ok", message=f"Map generated with {total} zombies.", day=1)
