"""Thread-safe in-memory cache with per-entry time-to-live."""

from .cache import AgedCache, CacheEntry
from .clock import CallableClock, Clock, ManualClock, SystemClock
from .config import CacheConfig
from .log import configure_logging

__all__ = [
    "AgedCache",
    "CacheEntry",
    "CallableClock",
    "Clock",
    "ManualClock",
    "SystemClock",
    "CacheConfig",
    "configure_logging",
]
