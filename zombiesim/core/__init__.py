"""Core data models and map representation."""

from zombiesim.core.enums import DangerLevel, Domain, Governor, RespawnOutcome, TownType
from zombiesim.core.models import Zone
from zombiesim.core.grid import ZoneGrid
from zombiesim.core.snapshot import CountSnapshot, DespairSnapshot, HistorySnapshot
from zombiesim.core.simulation_state import SimulationState

__all__ = [
    "CountSnapshot",
    "DangerLevel",
    "DespairSnapshot",
    "Domain",
    "Governor",
    "HistorySnapshot",
    "RespawnOutcome",
    "SimulationState",
    "TownType",
    "Zone",
    "ZoneGrid",
]
