"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys

# Per-cycle spread logging is very chatty during respawn loops
_CHATTY_LOGGERS = ("zombiesim.systems.spread",)


def setup_logging(level: str = "INFO", trace_spread: bool = False) -> None:
    """Configure the root logger for day-by-day simulation output.

    Spread-cycle debug lines are only emitted when *trace_spread* is set,
    even at DEBUG level.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if trace_spread else max(numeric_level, logging.INFO))
