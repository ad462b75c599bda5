"""Clock abstraction for aggregate timestamps.

SystemClock: real wall-clock time
ManualClock: deterministic time that only moves when told to

Aggregates never call datetime.now() directly — they ask their clock.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Current time as timezone-aware UTC datetime."""
        ...


class SystemClock:

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class ManualClock:
    """Clock whose time only changes via ``set_time`` / ``advance``."""

    def __init__(self, start: datetime | None = None) -> None:
        self._time = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._time

    def set_time(self, t: datetime) -> None:
        if t < self._time:
            raise ValueError(f"ManualClock cannot go backwards: {t} < {self._time}")
        self._time = t

    def advance(self, seconds: float = 1.0) -> None:
        self.set_time(self._time + timedelta(seconds=seconds))


SYSTEM_CLOCK = SystemClock()
