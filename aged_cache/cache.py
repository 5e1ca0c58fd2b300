"""In-memory key-value store with a per-entry time-to-live.

Expired entries are never returned and never counted, but they are only
removed lazily: on a read of the expired key, or by the full scan that runs
before ``size()`` and ``is_empty()``. There is no background sweeper.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from threading import Lock
from typing import Any, Callable, Hashable

from .clock import Clock, resolve_clock
from .config import CacheConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        # An entry is still live at exactly its expiry instant.
        return now > self.expires_at


class AgedCache:
    """Thread-safe TTL cache with an injectable clock."""

    def __init__(
        self,
        clock: Clock | Callable[[], datetime] | None = None,
        config: CacheConfig | None = None,
    ) -> None:
        self._clock = resolve_clock(clock)
        self._config = config or CacheConfig.from_env()
        self._items: dict[Hashable, CacheEntry] = {}
        self._lock = Lock()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def config(self) -> CacheConfig:
        return self._config

    def put(self, key: Hashable, value: Any, retention_in_millis: int | None = None) -> None:
        """Store ``value`` under ``key`` for ``retention_in_millis`` milliseconds.

        Replaces any existing entry for ``key``, including its expiry. Zero or
        negative retention stores an entry that reads as absent once the clock
        is past the insertion instant.
        """
        if retention_in_millis is None:
            retention_in_millis = self._config.default_retention_ms
        now = self._clock.now()
        try:
            expires_at = now + timedelta(milliseconds=retention_in_millis)
        except OverflowError:
            # Out of datetime range: pin to the far end, live or already expired.
            limit = datetime.max if retention_in_millis > 0 else datetime.min
            expires_at = limit.replace(tzinfo=now.tzinfo)
        entry = CacheEntry(value=value, expires_at=expires_at)
        with self._lock:
            self._items[key] = entry

    def get(self, key: Hashable) -> Any | None:
        """Return the live value for ``key`` or ``None``, evicting it if expired."""
        found, value = self._lookup(key)
        return value if found else None

    def is_empty(self) -> bool:
        self._clean_up()
        with self._lock:
            return not self._items

    def size(self) -> int:
        self._clean_up()
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        found, _ = self._lookup(key)
        return found

    def __repr__(self) -> str:
        with self._lock:
            entries = len(self._items)
        return f"AgedCache(clock={self._clock!r}, entries={entries})"

    def _lookup(self, key: Any) -> tuple[bool, Any]:
        now = self._clock.now()
        with self._lock:
            entry = self._items.get(key)
            if entry is None:
                return False, None
            if entry.is_expired(now):
                del self._items[key]
                if self._config.log_evictions:
                    logger.debug("Evicted expired key %r (expired at %s)", key, entry.expires_at.isoformat())
                return False, None
            return True, entry.value

    def _clean_up(self) -> int:
        """Drop every expired entry and return how many were removed."""
        now = self._clock.now()
        with self._lock:
            expired = [key for key, entry in self._items.items() if entry.is_expired(now)]
            for key in expired:
                del self._items[key]
        if expired and self._config.log_evictions:
            logger.debug("Cleanup removed %d expired entries", len(expired))
        return len(expired)
