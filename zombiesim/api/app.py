"""Builds the REST app; the EngineManager lives for the lifespan of the app."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zombiesim.api.dependencies import set_engine_manager
from zombiesim.api.engine_manager import EngineManager
from zombiesim.api.routes import api_router
from zombiesim.config import SimulationConfig
from zombiesim.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: SimulationConfig | None = None, configure_logging: bool = True) -> FastAPI:
    """Create the API app around a fresh EngineManager for *config*."""
    if config is None:
        config = SimulationConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if configure_logging:
            setup_logging(config.log_level)
        set_engine_manager(EngineManager(config))
        logger.info("API server started on a %dx%d map.", config.map_size, config.map_size)
        yield
        set_engine_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Zombie Spread Simulator",
        description=(
            "Day-by-day simulation of horde spread across a town map.\n\n"
            "## API Groups\n\n"
            "- **State**: Day counter, population vs. respawn floor, diagnostic events\n"
            "- **Map**: Zones with stored and derived values; direct zone edits; resize\n"
            "- **Control**: Advance, undo, reset, clear and generate\n"
            "- **Config**: Spawn and respawn parameters\n"
            "- **Saves**: Saved-map library\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Current day, total population and the respawn floor."},
            {"name": "Map", "description": "Full zone listing, single-zone lookup and edits."},
            {"name": "Control", "description": "Day lifecycle: advance, undo, reset, clear, generate."},
            {"name": "Config", "description": "Read and override simulation parameters."},
            {"name": "Saves", "description": "Save the current map, list, load or delete saved maps."},
        ],
    )

    # CORS: any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
