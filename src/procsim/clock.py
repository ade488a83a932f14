"""Injectable timing source for simulated executions."""

import random
import threading
import time

from procsim.errors import ExecutionInterrupted


class SimulationClock:
    """
    Source of randomized durations and interruptible waits.

    Every process draws its durations and performs its waits through a clock,
    so tests can swap in a deterministic one and a front end can abort an
    in-flight execution with interrupt().
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """
        Initialize the SimulationClock.

        Args:
            rng: Random generator to draw durations from. A fresh unseeded
                generator is used when omitted.
        """
        self._rng = rng or random.Random()
        self._interrupt_event = threading.Event()

    @property
    def interrupted(self) -> bool:
        """Check if waits are currently being interrupted."""
        return self._interrupt_event.is_set()

    def interrupt(self) -> None:
        """Abort the current wait and every wait until reset() is called."""
        self._interrupt_event.set()

    def reset(self) -> None:
        """Allow waits to run to completion again."""
        self._interrupt_event.clear()

    def now_ms(self) -> int:
        """Monotonic wall-clock time in milliseconds."""
        return time.monotonic_ns() // 1_000_000

    def draw_ms(self, low: int, high: int) -> int:
        """Draw a duration uniformly from the closed range [low, high]."""
        return self._rng.randint(low, high)

    def draw_int(self, low: int, high: int) -> int:
        """Draw a count uniformly from the closed range [low, high]."""
        return self._rng.randint(low, high)

    def draw_float(self, low: float, high: float) -> float:
        """Draw a float uniformly from [low, high]."""
        return self._rng.uniform(low, high)

    def wait_ms(self, duration_ms: int) -> None:
        """
        Block the calling thread for duration_ms milliseconds.

        Raises:
            ExecutionInterrupted: If interrupt() was called before or during the wait.
        """
        if self._interrupt_event.wait(timeout=max(duration_ms, 0) / 1000):
            raise ExecutionInterrupted(f"Espera de {duration_ms}ms interrumpida")


default_clock = SimulationClock()
