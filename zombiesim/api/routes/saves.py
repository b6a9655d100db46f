"""Saved-map library: list, save, load and delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from zombiesim.api.dependencies import get_engine_manager
from zombiesim.api.engine_manager import EngineManager
from zombiesim.api.schemas import ControlResponse, SavedMapSummary, SaveRequest

router = APIRouter()


@router.get("/saves", response_model=list[SavedMapSummary])
def list_saves(manager: EngineManager = Depends(get_engine_manager)) -> list[SavedMapSummary]:
    return [
        SavedMapSummary(index=i, name=m.name, timestamp=m.timestamp, size=m.size, day=m.day)
        for i, m in enumerate(manager.library.entries())
    ]


@router.post("/saves", response_model=SavedMapSummary)
def save(
    body: SaveRequest | None = None,
    manager: EngineManager = Depends(get_engine_manager),
) -> SavedMapSummary:
    record = manager.save(body.name if body else None)
    index = len(manager.library.entries()) - 1
    return SavedMapSummary(
        index=index, name=record.name, timestamp=record.timestamp, size=record.size, day=record.day,
    )


@router.post("/saves/{index}/load", response_model=ControlResponse)
def load(index: int, manager: EngineManager = Depends(get_engine_manager)) -> ControlResponse:
    try:
        record = manager.load(index)
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return ControlResponse(status="ok", message=f"Loaded '{record.name}'.", day=record.day)


@router.delete("/saves/{index}", response_model=ControlResponse)
def delete(index: int, manager: EngineManager = Depends(get_engine_manager)) -> ControlResponse:
    try:
        record = manager.delete_save(index)
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    with manager.session() as state:
        return ControlResponse(status="ok", message=f"Deleted '{record.name}'.", day=state.day)
