"""Engine systems: RNG, spread cycle, map generation."""

from zombiesim.systems.rng import DeterministicRNG, RandomStream
from zombiesim.systems.spread import run_spread_cycle
from zombiesim.systems.map_generator import generate_empty_map, generate_map

__all__ = ["DeterministicRNG", "RandomStream", "generate_empty_map", "generate_map", "run_spread_cycle"]
