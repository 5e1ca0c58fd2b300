"""Shared fixtures for aged cache tests."""

from datetime import datetime, timezone

import pytest

from aged_cache import AgedCache, CacheConfig, ManualClock

START = datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return ManualClock(START)


@pytest.fixture
def cache(clock):
    return AgedCache(clock=clock, config=CacheConfig())
