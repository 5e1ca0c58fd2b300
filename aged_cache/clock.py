"""Time sources for the aged cache.

A clock is anything with a ``now()`` method returning a ``datetime``.
``SystemClock`` reads the real wall clock; ``ManualClock`` is driven by hand
so expiry can be exercised without sleeping.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from threading import Lock
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Capability returning the current instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in the process's local offset."""

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def __repr__(self) -> str:
        return "SystemClock()"


class CallableClock:
    """Adapts a zero-argument callable into a clock."""

    def __init__(self, source: Callable[[], datetime]) -> None:
        self._source = source

    def now(self) -> datetime:
        return self._source()

    def __repr__(self) -> str:
        return f"CallableClock({self._source!r})"


class ManualClock:
    """Clock that only moves when told to. Thread-safe."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start if start is not None else datetime.now().astimezone()
        self._lock = Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._now

    def advance(self, *, milliseconds: float = 0, seconds: float = 0) -> datetime:
        """Move the clock forward and return the new instant."""
        with self._lock:
            self._now += timedelta(milliseconds=milliseconds, seconds=seconds)
            return self._now

    def set(self, instant: datetime) -> None:
        with self._lock:
            self._now = instant

    def __repr__(self) -> str:
        return f"ManualClock({self._now.isoformat()})"


def resolve_clock(clock: Clock | Callable[[], datetime] | None) -> Clock:
    """Return a usable clock, defaulting to the system clock."""
    if clock is None:
        return SystemClock()
    if isinstance(clock, Clock):
        return clock
    if callable(clock):
        return CallableClock(clock)
    raise TypeError(f"Expected a clock or a callable returning datetime, got {type(clock).__name__}")
