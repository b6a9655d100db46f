"""Versioned API route modules."""

from fastapi import APIRouter

from zombiesim.api.routes.config import router as config_router
from zombiesim.api.routes.control import router as control_router
from zombiesim.api.routes.map import router as map_router
from zombiesim.api.routes.saves import router as saves_router
from zombiesim.api.routes.state import router as state_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(map_router, tags=["Map"])
api_router.include_router(state_router, tags=["State"])
api_router.include_router(control_router, tags=["Control"])
api_router.include_router(config_router, tags=["Config"])
api_router.include_router(saves_router, tags=["Saves"])

__all__ = ["api_router"]
