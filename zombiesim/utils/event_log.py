"""Thread-safe log of simulation diagnostics exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zombiesim.engine.day_simulator import DayReport


@dataclass(frozen=True, slots=True)
class SimEvent:
    """A single diagnostic event: day summaries, respawn outcomes, edits."""

    day: int
    category: str
    message: str


def events_for_day(report: DayReport) -> list[SimEvent]:
    """Translate a DayReport into feed events."""
    events = [SimEvent(
        day=report.day,
        category="day",
        message=(
            f"{report.total_before} -> {report.total_after} zombies "
            f"(spread {report.spread_delta:+d}, despair -{report.despair_removed})"
        ),
    )]
    if report.respawn is not None:
        r = report.respawn
        events.append(SimEvent(
            day=report.day,
            category="respawn",
            message=(
                f"{r.outcome.name.lower()} after {r.iterations} cycles "
                f"(baseline {r.baseline}, regrown {r.regrown}, floor {r.threshold:g})"
            ),
        ))
    return events


class EventLog:
    """Bounded event log. Writers append; readers copy a slice.

    Guarded by a simple lock so API readers never see a half-written batch.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int | None = 500) -> None:
        self._buffer: deque[SimEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, event: SimEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def append_many(self, events: list[SimEvent]) -> None:
        with self._lock:
            self._buffer.extend(events)

    def since_day(self, day: int) -> list[SimEvent]:
        """Return all events with day >= *day*."""
        with self._lock:
            return [e for e in self._buffer if e.day >= day]

    def latest(self, count: int = 50) -> list[SimEvent]:
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
