"""Uptime Clock — elapsed seconds from a fixed start instant."""

import time

from app.core.uptime import UptimeClock, get_process_clock, process_clock


class _Ticks:
    def __init__(self, *values: float):
        self._values = list(values)

    def __call__(self) -> float:
        return self._values.pop(0)


def test_uptime_is_zero_at_construction_instant():
    clock = UptimeClock(now=_Ticks(50.0, 50.0))
    assert clock.uptime() == 0.0


def test_uptime_is_elapsed_since_start():
    clock = UptimeClock(now=_Ticks(10.0, 12.5))
    assert clock.started_at == 10.0
    assert clock.uptime() == 2.5


def test_uptime_never_negative_if_source_steps_back():
    clock = UptimeClock(now=_Ticks(10.0, 9.0))
    assert clock.uptime() == 0.0


def test_started_at_is_fixed_across_reads():
    clock = UptimeClock(now=_Ticks(1.0, 2.0, 3.0))
    clock.uptime()
    clock.uptime()
    assert clock.started_at == 1.0


def test_default_clock_is_monotonic():
    clock = UptimeClock()
    first = clock.uptime()
    time.sleep(0.01)
    second = clock.uptime()
    assert second >= first + 0.005


def test_dependency_returns_process_clock():
    assert get_process_clock() is process_clock
    assert process_clock.uptime() >= 0
