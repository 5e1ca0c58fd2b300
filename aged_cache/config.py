"""Configuration for the aged cache."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_RETENTION_MS = 60_000


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class CacheConfig(BaseModel):
    """Tunables for an ``AgedCache`` instance.

    Attributes:
        default_retention_ms: Retention applied when ``put`` is called without one
        log_evictions: Emit DEBUG records for expired-entry removals
    """

    model_config = ConfigDict(frozen=True)

    default_retention_ms: int = Field(
        default=DEFAULT_RETENTION_MS, ge=0, description="Fallback TTL in milliseconds"
    )
    log_evictions: bool = Field(default=False, description="Log evicted entries")

    @classmethod
    def from_env(cls) -> "CacheConfig":
        """Build a config from ``AGED_CACHE_*`` environment variables."""
        return cls(
            default_retention_ms=os.getenv(
                "AGED_CACHE_DEFAULT_RETENTION_MS", str(DEFAULT_RETENTION_MS)
            ),
            log_evictions=_env_bool("AGED_CACHE_LOG_EVICTIONS", False),
        )
