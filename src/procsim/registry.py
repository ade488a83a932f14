"""Process registry: owns processes, allocates PIDs and drives execution."""

import logging
import threading

from procsim import config
from procsim.clock import SimulationClock, default_clock
from procsim.errors import DuplicateProcessError, ProcessValidationError
from procsim.models import ExecutionResult, Process, ProcessKind, ProcessState

logger = logging.getLogger(__name__)


class PidAllocator:
    """Thread-safe, monotonically increasing PID counter."""

    def __init__(self, start: int = config.PID_SEED) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next PID. Every call consumes one, used or not."""
        with self._lock:
            pid = self._next
            self._next += 1
            return pid

    def peek(self) -> int:
        """Return the PID the next call to next_id() would hand out."""
        with self._lock:
            return self._next


default_allocator = PidAllocator()


class Registry:
    """
    Insertion-ordered collection of simulated processes.

    Executions are strictly sequential on the calling thread. Every completed
    outcome is appended to an execution history. Collection and history are
    guarded by a re-entrant lock so a background runner and a UI thread can
    share one registry.
    """

    def __init__(
        self,
        allocator: PidAllocator | None = None,
        clock: SimulationClock | None = None,
    ) -> None:
        """
        Initialize the Registry.

        Args:
            allocator: PID source. Registries built without one share the
                module-level default, so their PIDs never collide.
            clock: Timing source handed to processes built for this registry.
        """
        self._allocator = allocator or default_allocator
        self.clock = clock or default_clock
        self._processes: list[Process] = []
        self._history: list[str] = []
        self._lock = threading.RLock()

    @property
    def count(self) -> int:
        """Number of registered processes."""
        return len(self._processes)

    @property
    def history(self) -> list[str]:
        """Copy of the execution history."""
        with self._lock:
            return list(self._history)

    def __len__(self) -> int:
        return len(self._processes)

    def __contains__(self, pid: int) -> bool:
        return self.lookup(pid) is not None

    def next_id(self) -> int:
        """Allocate a new PID."""
        return self._allocator.next_id()

    def submit(self, process: Process) -> bool:
        """
        Register a process at the end of the collection.

        Raises:
            ProcessValidationError: If process is None.
            DuplicateProcessError: If a process with the same PID is registered.
        """
        if process is None:
            raise ProcessValidationError("El proceso no puede ser None")
        with self._lock:
            if self.lookup(process.pid) is not None:
                raise DuplicateProcessError(process.pid)
            self._processes.append(process)
        logger.info("Registered %s PID %d (%s)", process.kind.value, process.pid, process.name)
        return True

    def remove(self, pid: int) -> bool:
        """Remove the process with the given PID. Returns False if absent."""
        with self._lock:
            for index, process in enumerate(self._processes):
                if process.pid == pid:
                    del self._processes[index]
                    logger.info("Removed PID %d", pid)
                    return True
        return False

    def lookup(self, pid: int) -> Process | None:
        """Find a process by PID."""
        with self._lock:
            for process in self._processes:
                if process.pid == pid:
                    return process
        return None

    def execute_all(self) -> list[str]:
        """
        Execute every process in insertion order.

        Stops at the first interrupted wait: outcomes recorded before it stay
        in the history and ExecutionInterrupted propagates.
        """
        results: list[str] = []
        for process in self.list_all():
            outcome = process.execute()
            results.append(outcome)
            self._record(outcome)
        logger.info("Executed %d processes", len(results))
        return results

    def run_all(self) -> list[ExecutionResult]:
        """
        Execute every process in insertion order, collecting one result each.

        Interrupted executions are reported as aborted results and are not
        added to the history; the remaining processes still run.
        """
        results: list[ExecutionResult] = []
        for process in self.list_all():
            result = process.run()
            if result.completed:
                self._record(result.message)
            else:
                logger.warning("PID %d aborted: %s", process.pid, result.message)
            results.append(result)
        return results

    def execute_by_id(self, pid: int) -> str:
        """Execute one process; returns a not-found message if it is absent."""
        process = self.lookup(pid)
        if process is None:
            return f"Proceso no encontrado con PID: {pid}"
        outcome = process.execute()
        self._record(outcome)
        return outcome

    def _record(self, outcome: str) -> None:
        with self._lock:
            self._history.append(outcome)

    def list_all(self) -> list[Process]:
        """Copy of the registered processes in insertion order."""
        with self._lock:
            return list(self._processes)

    def list_by_kind(self, kind: ProcessKind | str) -> list[Process]:
        """Processes of one kind, in insertion order."""
        kind = ProcessKind(kind)
        return [p for p in self.list_all() if p.kind is kind]

    def clear(self) -> None:
        """Drop every process. PIDs are not recycled and history is kept."""
        with self._lock:
            self._processes.clear()
        logger.info("Registry cleared")

    def clear_history(self) -> None:
        with self._lock:
            self._history.clear()

    def stats_by_kind(self) -> dict[str, int]:
        """Count processes per kind, plus a Total entry."""
        processes = self.list_all()
        stats = {"Total": len(processes)}
        for kind in ProcessKind:
            stats[kind.value] = 0
        for process in processes:
            stats[process.kind.value] += 1
        return stats

    def stats_by_state(self) -> dict[ProcessState, int]:
        """Count processes per state, zero-filled."""
        stats = {state: 0 for state in ProcessState}
        for process in self.list_all():
            stats[process.state] += 1
        return stats

    def sorted_by_priority(self) -> list[Process]:
        """Processes by descending priority; ties keep insertion order."""
        return sorted(self.list_all(), key=lambda p: p.priority, reverse=True)

    def average_priority(self) -> float | None:
        processes = self.list_all()
        if not processes:
            return None
        return sum(p.priority for p in processes) / len(processes)

    def summary(self) -> str:
        """Text block summarizing the registry."""
        lines = [
            "=== RESUMEN DEL SISTEMA ===",
            f"Procesos registrados: {self.count}",
            f"Ejecuciones realizadas: {len(self._history)}",
            f"Próximo PID disponible: {self._allocator.peek()}",
        ]
        average = self.average_priority()
        if average is not None:
            lines.append(f"Prioridad promedio: {average:.2f}")
        return "\n".join(lines) + "\n"
