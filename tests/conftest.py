"""Shared fixtures for procsim tests."""

import pytest

from procsim.clock import SimulationClock
from procsim.errors import ExecutionInterrupted
from procsim.registry import PidAllocator, Registry


class FakeClock(SimulationClock):
    """
    Deterministic clock that never sleeps.

    Draws return queued values first and fall back to the low bound. Waits
    advance a virtual time and are recorded. interrupt_after makes the wait
    with that index (0-based) raise ExecutionInterrupted.
    """

    def __init__(self, draws=None, floats=None, interrupt_after=None, drift_ms=0):
        super().__init__()
        self.draws = list(draws or [])
        self.floats = list(floats or [])
        self.interrupt_after = interrupt_after
        self.drift_ms = drift_ms
        self.waits: list[int] = []
        self.time_ms = 0

    def now_ms(self) -> int:
        return self.time_ms

    def draw_int(self, low: int, high: int) -> int:
        return self.draws.pop(0) if self.draws else low

    def draw_ms(self, low: int, high: int) -> int:
        return self.draw_int(low, high)

    def draw_float(self, low: float, high: float) -> float:
        return self.floats.pop(0) if self.floats else low

    def wait_ms(self, duration_ms: int) -> None:
        if self.interrupted or (
            self.interrupt_after is not None and len(self.waits) >= self.interrupt_after
        ):
            raise ExecutionInterrupted(f"Espera de {duration_ms}ms interrumpida")
        self.waits.append(duration_ms)
        self.time_ms += duration_ms + self.drift_ms


@pytest.fixture
def clock():
    """A fake clock with default draws."""
    return FakeClock()


@pytest.fixture
def registry(clock):
    """A registry with its own PID space starting at 1000 and a fake clock."""
    return Registry(allocator=PidAllocator(), clock=clock)
