"""Tests for the SimulationClock."""

import random
import threading
import time

import pytest

from procsim.clock import SimulationClock
from procsim.errors import ExecutionInterrupted


def test_draws_stay_in_range():
    """Integer and float draws stay within their closed ranges."""
    clock = SimulationClock(random.Random(7))
    for _ in range(200):
        assert 100 <= clock.draw_ms(100, 500) <= 500
        assert 100 <= clock.draw_int(100, 1000) <= 1000
        assert 0.0 <= clock.draw_float(0.0, 15.0) <= 15.0


def test_seeded_clocks_agree():
    """Two clocks with the same seed draw the same durations."""
    a = SimulationClock(random.Random(42))
    b = SimulationClock(random.Random(42))
    assert [a.draw_ms(100, 500) for _ in range(10)] == [b.draw_ms(100, 500) for _ in range(10)]


def test_wait_blocks_for_duration():
    clock = SimulationClock()
    start = time.perf_counter()
    clock.wait_ms(50)
    elapsed = time.perf_counter() - start
    assert elapsed >= 0.045


def test_now_ms_is_monotonic():
    clock = SimulationClock()
    first = clock.now_ms()
    clock.wait_ms(10)
    assert clock.now_ms() >= first + 9


def test_interrupt_before_wait():
    """Waits after interrupt() raise immediately until reset()."""
    clock = SimulationClock()
    clock.interrupt()
    assert clock.interrupted

    with pytest.raises(ExecutionInterrupted):
        clock.wait_ms(1000)

    clock.reset()
    assert not clock.interrupted
    clock.wait_ms(1)


def test_interrupt_during_wait():
    """interrupt() from another thread aborts an in-flight wait."""
    clock = SimulationClock()
    timer = threading.Timer(0.05, clock.interrupt)
    timer.start()

    start = time.perf_counter()
    try:
        with pytest.raises(ExecutionInterrupted):
            clock.wait_ms(5000)
    finally:
        timer.cancel()

    assert time.perf_counter() - start < 2.0
