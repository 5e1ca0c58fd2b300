"""Tests for clock implementations."""

from datetime import datetime, timedelta, timezone

import pytest

from aged_cache import CallableClock, Clock, ManualClock, SystemClock
from aged_cache.clock import resolve_clock


class TestSystemClock:
    """Tests for SystemClock."""

    def test_now_is_timezone_aware(self):
        now = SystemClock().now()
        assert now.tzinfo is not None

    def test_is_a_clock(self):
        assert isinstance(SystemClock(), Clock)


class TestManualClock:
    """Tests for ManualClock."""

    def test_stays_put(self):
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        clock = ManualClock(start)
        assert clock.now() == start
        assert clock.now() == start

    def test_advance(self):
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        clock = ManualClock(start)

        result = clock.advance(milliseconds=1500, seconds=2)

        assert result == start + timedelta(milliseconds=3500)
        assert clock.now() == result

    def test_set(self):
        clock = ManualClock(datetime(2026, 1, 1, tzinfo=timezone.utc))
        target = datetime(2030, 6, 1, tzinfo=timezone.utc)
        clock.set(target)
        assert clock.now() == target

    def test_default_start_is_aware(self):
        assert ManualClock().now().tzinfo is not None


class TestResolveClock:
    """Tests for resolve_clock."""

    def test_none_gives_system_clock(self):
        assert isinstance(resolve_clock(None), SystemClock)

    def test_clock_passes_through(self):
        clock = ManualClock()
        assert resolve_clock(clock) is clock

    def test_callable_is_wrapped(self):
        instant = datetime(2026, 2, 2, tzinfo=timezone.utc)
        clock = resolve_clock(lambda: instant)
        assert isinstance(clock, CallableClock)
        assert clock.now() == instant

    def test_rejects_other_values(self):
        with pytest.raises(TypeError):
            resolve_clock(42)


class TestCallableClock:
    """Tests for CallableClock."""

    def test_repr_names_source(self):
        def source():
            return datetime(2026, 2, 2, tzinfo=timezone.utc)

        assert repr(CallableClock(source)).startswith("CallableClock(<function")
