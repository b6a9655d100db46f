"""Zombie horde spread simulator."""

__version__ = "0.1.0"
