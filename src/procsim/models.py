"""Process variants simulated by procsim."""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable

from procsim import config
from procsim.clock import SimulationClock, default_clock
from procsim.errors import ExecutionInterrupted, ProcessValidationError

logger = logging.getLogger(__name__)


class ProcessState(Enum):
    """Lifecycle states shared by every process variant."""

    NEW = "NEW"
    READY = "READY"
    RUNNING = "RUNNING"
    BLOCKED = "BLOCKED"
    TERMINATED = "TERMINATED"


# Lifecycle edges; READY is entered from RUNNING or BLOCKED only when a wait is interrupted
STATE_TRANSITIONS: dict[ProcessState, frozenset[ProcessState]] = {
    ProcessState.NEW: frozenset({ProcessState.RUNNING}),
    ProcessState.READY: frozenset({ProcessState.RUNNING}),
    ProcessState.TERMINATED: frozenset({ProcessState.RUNNING}),
    ProcessState.RUNNING: frozenset(
        {ProcessState.BLOCKED, ProcessState.TERMINATED, ProcessState.READY}
    ),
    ProcessState.BLOCKED: frozenset({ProcessState.RUNNING, ProcessState.READY}),
}


class ProcessKind(Enum):
    """Closed set of process variants, valued by their statistics tag."""

    CPU = "ProcesoCPU"
    IO = "ProcesoIO"
    DAEMON = "Daemon"
    NETWORK = "ProcesoRed"
    MEMORY = "ProcesoMemoria"
    BATCH = "ProcesoBatch"
    REALTIME = "ProcesoTiempoReal"


class ExecutionOutcome(Enum):
    """How a single execution ended."""

    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(slots=True, frozen=True)
class ExecutionResult:
    """Immutable record of one execution attempt."""

    pid: int
    outcome: ExecutionOutcome
    message: str

    @property
    def completed(self) -> bool:
        """Check if the execution ran to completion."""
        return self.outcome is ExecutionOutcome.COMPLETED


def _check_int(label: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProcessValidationError(f"{label} debe ser un entero. Valor recibido: {value!r}")
    return value


def _check_range(label: str, value: object, low: int, high: int | None = None) -> int:
    """Validate an integer against [low, high] (or [low, inf) when high is None)."""
    number = _check_int(label, value)
    if high is None:
        if number < low:
            raise ProcessValidationError(
                f"{label} debe ser mayor o igual a {low}. Valor recibido: {number}"
            )
    elif not low <= number <= high:
        raise ProcessValidationError(
            f"{label} debe estar entre {low} y {high}. Valor recibido: {number}"
        )
    return number


def _check_choice(label: str, value: object, choices: Iterable[str]) -> str:
    """Validate a case-insensitive choice and return it upper-cased."""
    options = tuple(choices)
    if not isinstance(value, str) or value.upper() not in options:
        raise ProcessValidationError(
            f"{label} no válido: {value!r}. Valores válidos: {', '.join(options)}"
        )
    return value.upper()


def _check_text(label: str, value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ProcessValidationError(f"{label} no puede estar vacío. Valor recibido: {value!r}")
    return value.strip()


class Process(ABC):
    """
    Abstract simulated process.

    Subclasses declare their kind and default priority and implement
    _perform(), which does the variant workload and returns the detail part
    of the outcome string. execute() wraps it in the shared state machine:
    RUNNING, the variant work, then TERMINATED.
    """

    kind: ClassVar[ProcessKind]
    default_priority: ClassVar[int] = config.PRIORITY_DEFAULT

    def __init__(self, pid: int, name: str, clock: SimulationClock | None = None) -> None:
        """
        Initialize the common process fields.

        Args:
            pid: Identifier, normally allocated by the registry.
            name: Descriptive name; stored trimmed, must not be blank.
            clock: Timing source for durations and waits.
        """
        self._pid = _check_int("PID", pid)
        self._name = _check_text("El nombre del proceso", name)
        self._state = ProcessState.NEW
        self._execution_time_ms = 0
        self._priority = self.default_priority
        self.clock = clock or default_clock

    @property
    def pid(self) -> int:
        """Get the process identifier."""
        return self._pid

    @property
    def name(self) -> str:
        """Get the process name."""
        return self._name

    @property
    def state(self) -> ProcessState:
        """Get the current lifecycle state."""
        return self._state

    def _set_state(self, value: ProcessState) -> None:
        """Move to value, rejecting edges outside STATE_TRANSITIONS."""
        if not isinstance(value, ProcessState):
            raise ProcessValidationError(f"Estado no válido: {value!r}")
        if value not in STATE_TRANSITIONS[self._state]:
            raise ProcessValidationError(
                f"Transición de estado no válida: {self._state.value} → {value.value}"
            )
        self._state = value

    @property
    def priority(self) -> int:
        """Get the priority (1-10, 10 is highest)."""
        return self._priority

    @priority.setter
    def priority(self, value: int) -> None:
        """Set the priority, bounds-checked to [1, 10]."""
        self._priority = _check_range(
            "La prioridad", value, config.PRIORITY_MIN, config.PRIORITY_MAX
        )

    @property
    def execution_time_ms(self) -> int:
        """Get the duration of the last execution in milliseconds."""
        return self._execution_time_ms

    @execution_time_ms.setter
    def execution_time_ms(self, value: int) -> None:
        """Set the execution duration; negative values are rejected."""
        self._execution_time_ms = _check_range("El tiempo de ejecución", value, 0)

    def execute(self) -> str:
        """
        Run the process through RUNNING to TERMINATED.

        Returns:
            The outcome string for this run.

        Raises:
            ExecutionInterrupted: If a simulated wait was interrupted. The
                process is left READY so it can be executed again.
        """
        self._set_state(ProcessState.RUNNING)
        try:
            detail = self._perform()
        except ExecutionInterrupted:
            self._set_state(ProcessState.READY)
            logger.warning("Execution of PID %d interrupted", self._pid)
            raise
        self._set_state(ProcessState.TERMINATED)
        logger.debug("PID %d (%s) finished in %dms", self._pid, self.kind.value, self._execution_time_ms)
        return self._format_outcome(detail)

    def run(self) -> ExecutionResult:
        """Execute and report the outcome as a result instead of raising on interruption."""
        try:
            message = self.execute()
        except ExecutionInterrupted as exc:
            return ExecutionResult(self._pid, ExecutionOutcome.ABORTED, str(exc))
        return ExecutionResult(self._pid, ExecutionOutcome.COMPLETED, message)

    @abstractmethod
    def _perform(self) -> str:
        """Do the variant workload and return the outcome detail."""

    def _simulate_time(self) -> int:
        """Draw a base duration, store it as the execution time and wait for it."""
        duration = self.clock.draw_ms(config.EXEC_TIME_MIN_MS, config.EXEC_TIME_MAX_MS)
        self._execution_time_ms = duration
        self.clock.wait_ms(duration)
        return duration

    def _format_outcome(self, detail: str) -> str:
        return f"[PID: {self._pid} | {self._name}] - Estado: {self._state.value} - {detail}"

    def _describe_fields(self) -> str:
        return ""

    def describe(self) -> str:
        """One-line description including the variant fields."""
        base = (
            f"{self.kind.value} [PID={self._pid}, Nombre={self._name}, "
            f"Estado={self._state.value}, Prioridad={self._priority}"
        )
        extra = self._describe_fields()
        return f"{base}, {extra}]" if extra else f"{base}]"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pid={self._pid}, name={self._name!r}, "
            f"state={self._state.value}, priority={self._priority})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Process):
            return NotImplemented
        return self._pid == other._pid

    def __hash__(self) -> int:
        return hash(self._pid)


class CpuProcess(Process):
    """CPU-bound process running a bounded loop of math operations."""

    kind = ProcessKind.CPU
    default_priority = config.PRIORITY_CPU

    def __init__(
        self,
        pid: int,
        name: str,
        operation_count: int,
        core_count: int,
        clock: SimulationClock | None = None,
    ) -> None:
        """
        Initialize a CPU process.

        Args:
            pid: Process identifier.
            name: Descriptive name.
            operation_count: Math operations to perform (>= 1).
            core_count: Cores used, 1-16.
            clock: Timing source.
        """
        super().__init__(pid, name, clock)
        self.operation_count = operation_count
        self.core_count = core_count

    @property
    def operation_count(self) -> int:
        """Get the number of math operations."""
        return self._operation_count

    @operation_count.setter
    def operation_count(self, value: int) -> None:
        """Set the number of math operations (>= 1)."""
        self._operation_count = _check_range("El número de operaciones", value, config.MIN_OPERATIONS)

    @property
    def core_count(self) -> int:
        """Get the number of cores used."""
        return self._core_count

    @core_count.setter
    def core_count(self, value: int) -> None:
        """Set the number of cores used (1-16)."""
        self._core_count = _check_range(
            "El número de núcleos", value, config.MIN_CORES, config.MAX_CORES
        )

    def _perform(self) -> str:
        self._simulate_time()
        self._crunch()
        return (
            f"Ejecutó {self._operation_count} operaciones en {self._core_count} núcleos. "
            f"Tiempo: {self._execution_time_ms}ms"
        )

    def _crunch(self) -> float:
        total = 0.0
        for i in range(min(self._operation_count, config.MAX_CPU_LOOP)):
            total += math.sqrt(i * math.pi) + math.pow(i, 2) + math.sin(math.radians(i))
        return total

    def _describe_fields(self) -> str:
        return f"Operaciones={self._operation_count}, Núcleos={self._core_count}"


class IoProcess(Process):
    """
    I/O-bound process that blocks on a device.

    Execution goes RUNNING, BLOCKED for the fixed device wait, back to
    RUNNING for the base wait, then TERMINATED.
    """

    kind = ProcessKind.IO
    default_priority = config.PRIORITY_IO

    def __init__(
        self,
        pid: int,
        name: str,
        device: str,
        byte_count: int,
        clock: SimulationClock | None = None,
    ) -> None:
        """
        Initialize an I/O process.

        Args:
            pid: Process identifier.
            name: Descriptive name.
            device: KEYBOARD, DISK or NETWORK (case-insensitive).
            byte_count: Bytes to transfer (>= 1).
            clock: Timing source.
        """
        super().__init__(pid, name, clock)
        self.device = device
        self.byte_count = byte_count

    @property
    def device(self) -> str:
        """Get the device name."""
        return self._device

    @device.setter
    def device(self, value: str) -> None:
        """Set the device; also updates the blocking wait."""
        self._device = _check_choice("Dispositivo", value, config.IO_WAIT_MS)

    @property
    def byte_count(self) -> int:
        """Get the number of bytes to transfer."""
        return self._byte_count

    @byte_count.setter
    def byte_count(self, value: int) -> None:
        """Set the number of bytes to transfer (>= 1)."""
        self._byte_count = _check_range("La cantidad de bytes", value, 1)

    @property
    def wait_ms(self) -> int:
        """Fixed blocking wait for the current device."""
        return config.IO_WAIT_MS[self._device]

    def _perform(self) -> str:
        self._set_state(ProcessState.BLOCKED)
        self.clock.wait_ms(self.wait_ms)
        self._set_state(ProcessState.RUNNING)
        self._simulate_time()
        return f"Transferidos {self._byte_count} bytes por {self._device}. Bloqueado: {self.wait_ms}ms"

    def _describe_fields(self) -> str:
        return f"Dispositivo={self._device}, Bytes={self._byte_count}"


class DaemonProcess(Process):
    """Background service process."""

    kind = ProcessKind.DAEMON
    default_priority = config.PRIORITY_DAEMON

    def __init__(
        self,
        pid: int,
        name: str,
        service_name: str,
        auto_start: bool = False,
        monitor_interval_s: int = config.DEFAULT_MONITOR_INTERVAL_S,
        clock: SimulationClock | None = None,
    ) -> None:
        """
        Initialize a daemon.

        Args:
            pid: Process identifier.
            name: Descriptive name.
            service_name: Name of the provided service, must not be blank.
            auto_start: Whether the daemon starts with the system.
            monitor_interval_s: Monitoring interval in seconds (> 0).
            clock: Timing source.
        """
        super().__init__(pid, name, clock)
        self.service_name = service_name
        self.auto_start = bool(auto_start)
        self.monitor_interval_s = monitor_interval_s

    @property
    def service_name(self) -> str:
        """Get the service name."""
        return self._service_name

    @service_name.setter
    def service_name(self, value: str) -> None:
        """Set the service name."""
        self._service_name = _check_text("El nombre del servicio", value)

    @property
    def monitor_interval_s(self) -> int:
        """Get the monitoring interval in seconds."""
        return self._monitor_interval_s

    @monitor_interval_s.setter
    def monitor_interval_s(self, value: int) -> None:
        """Set the monitoring interval (> 0)."""
        self._monitor_interval_s = _check_range("El intervalo de monitoreo", value, 1)

    def _perform(self) -> str:
        self._simulate_time()
        tag = " [Autoiniciable]" if self.auto_start else ""
        return (
            f"Servicio '{self._service_name}' ejecutándose en segundo plano.{tag} "
            f"Monitoreo cada {self._monitor_interval_s}s"
        )

    def _describe_fields(self) -> str:
        auto = "Sí" if self.auto_start else "No"
        return (
            f"Servicio={self._service_name}, Autoiniciable={auto}, "
            f"Monitoreo={self._monitor_interval_s}s"
        )


class NetworkProcess(Process):
    """Network process sending packets between two ports."""

    kind = ProcessKind.NETWORK
    default_priority = config.PRIORITY_NETWORK

    def __init__(
        self,
        pid: int,
        name: str,
        protocol: str,
        source_port: int,
        dest_port: int,
        clock: SimulationClock | None = None,
    ) -> None:
        """
        Initialize a network process.

        Args:
            pid: Process identifier.
            name: Descriptive name.
            protocol: TCP, UDP, HTTP or HTTPS (case-insensitive).
            source_port: Source port, 1-65535.
            dest_port: Destination port, 1-65535.
            clock: Timing source.
        """
        super().__init__(pid, name, clock)
        self.protocol = protocol
        self.source_port = source_port
        self.dest_port = dest_port
        self._packets_sent = 0

    @property
    def protocol(self) -> str:
        """Get the protocol."""
        return self._protocol

    @protocol.setter
    def protocol(self, value: str) -> None:
        """Set the protocol."""
        self._protocol = _check_choice("Protocolo", value, config.PROTOCOLS)

    @property
    def source_port(self) -> int:
        """Get the source port."""
        return self._source_port

    @source_port.setter
    def source_port(self, value: int) -> None:
        """Set the source port."""
        self._source_port = _check_range(
            "El puerto de origen", value, config.PORT_MIN, config.PORT_MAX
        )

    @property
    def dest_port(self) -> int:
        """Get the destination port."""
        return self._dest_port

    @dest_port.setter
    def dest_port(self, value: int) -> None:
        """Set the destination port."""
        self._dest_port = _check_range(
            "El puerto de destino", value, config.PORT_MIN, config.PORT_MAX
        )

    @property
    def packets_sent(self) -> int:
        """Packets sent during the last execution."""
        return self._packets_sent

    def _perform(self) -> str:
        self._simulate_time()
        self._packets_sent = self.clock.draw_int(config.PACKETS_MIN, config.PACKETS_MAX)
        return (
            f"Protocolo {self._protocol} | Puerto {self._source_port} → {self._dest_port} | "
            f"Paquetes enviados: {self._packets_sent}"
        )

    def _describe_fields(self) -> str:
        return (
            f"Protocolo={self._protocol}, Puerto {self._source_port}→{self._dest_port}, "
            f"Paquetes={self._packets_sent}"
        )


class MemoryProcess(Process):
    """Memory-management process that defragments on every run."""

    kind = ProcessKind.MEMORY
    default_priority = config.PRIORITY_MEMORY

    def __init__(
        self,
        pid: int,
        name: str,
        allocated_mb: int,
        memory_type: str,
        clock: SimulationClock | None = None,
    ) -> None:
        """
        Initialize a memory process.

        Fragmentation starts at a random value in [0, 15] percent.

        Args:
            pid: Process identifier.
            name: Descriptive name.
            allocated_mb: Managed memory in MB (>= 1).
            memory_type: RAM or VIRTUAL (case-insensitive).
            clock: Timing source.
        """
        super().__init__(pid, name, clock)
        self.allocated_mb = allocated_mb
        self.memory_type = memory_type
        self._fragmentation = self.clock.draw_float(
            config.FRAGMENTATION_MIN, config.FRAGMENTATION_MAX
        )

    @property
    def allocated_mb(self) -> int:
        """Get the managed memory in MB."""
        return self._allocated_mb

    @allocated_mb.setter
    def allocated_mb(self, value: int) -> None:
        """Set the managed memory in MB (>= 1)."""
        self._allocated_mb = _check_range("La cantidad de memoria", value, 1)

    @property
    def memory_type(self) -> str:
        """Get the memory type."""
        return self._memory_type

    @memory_type.setter
    def memory_type(self, value: str) -> None:
        """Set the memory type."""
        self._memory_type = _check_choice("Tipo de memoria", value, config.MEMORY_TYPES)

    @property
    def fragmentation(self) -> float:
        """Get the fragmentation percentage."""
        return self._fragmentation

    @fragmentation.setter
    def fragmentation(self, value: float) -> None:
        """Set the fragmentation percentage (0-100)."""
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not (
            0.0 <= value <= config.FRAGMENTATION_LIMIT
        ):
            raise ProcessValidationError(
                f"La fragmentación debe estar entre 0.0 y {config.FRAGMENTATION_LIMIT}. "
                f"Valor recibido: {value!r}"
            )
        self._fragmentation = float(value)

    def _perform(self) -> str:
        self._simulate_time()
        step = self.clock.draw_float(0.0, config.DEFRAG_STEP_MAX)
        self._fragmentation = max(0.0, self._fragmentation - step)
        return (
            f"Gestionando {self._allocated_mb} MB de memoria {self._memory_type} | "
            f"Fragmentación: {self._fragmentation:.2f}%"
        )

    def _describe_fields(self) -> str:
        return (
            f"Memoria={self._allocated_mb} MB, Tipo={self._memory_type}, "
            f"Fragmentación={self._fragmentation:.2f}%"
        )


class BatchProcess(Process):
    """Batch process running a script's task list in order."""

    kind = ProcessKind.BATCH
    default_priority = config.PRIORITY_BATCH

    def __init__(
        self,
        pid: int,
        name: str,
        tasks: Iterable[str],
        script_name: str,
        clock: SimulationClock | None = None,
    ) -> None:
        """
        Initialize a batch process.

        Args:
            pid: Process identifier.
            name: Descriptive name.
            tasks: Ordered task names, at least one.
            script_name: Script file name, must not be blank.
            clock: Timing source.
        """
        super().__init__(pid, name, clock)
        self.tasks = tasks
        self.script_name = script_name

    @property
    def tasks(self) -> list[str]:
        """Get a copy of the task list."""
        return list(self._tasks)

    @tasks.setter
    def tasks(self, value: Iterable[str]) -> None:
        """Replace the task list; resets the completed count."""
        if value is None or isinstance(value, str):
            raise ProcessValidationError(
                f"La lista de tareas debe ser una secuencia de textos. Valor recibido: {value!r}"
            )
        try:
            task_list = list(value)
        except TypeError as exc:
            raise ProcessValidationError(
                f"La lista de tareas debe ser una secuencia de textos. Valor recibido: {value!r}"
            ) from exc
        if not task_list:
            raise ProcessValidationError("La lista de tareas no puede estar vacía")
        self._tasks = task_list
        self._completed_tasks = 0

    @property
    def script_name(self) -> str:
        """Get the script name."""
        return self._script_name

    @script_name.setter
    def script_name(self, value: str) -> None:
        """Set the script name."""
        self._script_name = _check_text("El nombre del archivo de script", value)

    @property
    def completed_tasks(self) -> int:
        """Tasks completed by the last execution."""
        return self._completed_tasks

    @property
    def total_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, task: str) -> None:
        """Append a task to the list."""
        self._tasks.append(_check_text("La tarea", task))

    def all_tasks_completed(self) -> bool:
        return self._completed_tasks >= len(self._tasks)

    def _perform(self) -> str:
        self._completed_tasks = 0
        self._execution_time_ms = 0
        checklist = []
        for task in self._tasks:
            if not isinstance(task, str) or not task.strip():
                continue
            duration = self.clock.draw_ms(config.TASK_TIME_MIN_MS, config.TASK_TIME_MAX_MS)
            self.clock.wait_ms(duration)
            self._execution_time_ms += duration
            self._completed_tasks += 1
            checklist.append(f"  ✓ {task.strip()}")
        lines = "".join(f"\n{line}" for line in checklist)
        return (
            f"Script '{self._script_name}' completado. "
            f"Tareas: {self._completed_tasks}/{len(self._tasks)}{lines}"
        )

    def _describe_fields(self) -> str:
        return (
            f"Script={self._script_name}, "
            f"Tareas={self._completed_tasks}/{len(self._tasks)}"
        )


class RealTimeProcess(Process):
    """
    Real-time process with a deadline.

    The execution time of a real-time process is the measured wall-clock
    duration of the run, not the simulated draw; jitter is the absolute
    difference between the two.
    """

    kind = ProcessKind.REALTIME
    default_priority = config.PRIORITY_REALTIME

    def __init__(
        self,
        pid: int,
        name: str,
        deadline_ms: int,
        critical: bool = False,
        clock: SimulationClock | None = None,
    ) -> None:
        """
        Initialize a real-time process.

        Args:
            pid: Process identifier.
            name: Descriptive name.
            deadline_ms: Deadline in milliseconds (>= 1).
            critical: Critical processes get priority 10 instead of 9.
            clock: Timing source.
        """
        super().__init__(pid, name, clock)
        self.deadline_ms = deadline_ms
        self.critical = critical
        self._simulated_ms = 0
        self._jitter_ms = 0.0

    @property
    def deadline_ms(self) -> int:
        """Get the deadline in milliseconds."""
        return self._deadline_ms

    @deadline_ms.setter
    def deadline_ms(self, value: int) -> None:
        """Set the deadline (>= 1 ms)."""
        self._deadline_ms = _check_range("El deadline", value, 1)

    @property
    def critical(self) -> bool:
        """Check if the process is critical."""
        return self._critical

    @critical.setter
    def critical(self, value: bool) -> None:
        """Set criticality; the priority follows it."""
        self._critical = bool(value)
        self._priority = (
            config.PRIORITY_REALTIME_CRITICAL if self._critical else config.PRIORITY_REALTIME
        )

    @property
    def jitter_ms(self) -> float:
        """Absolute difference between measured and simulated duration."""
        return self._jitter_ms

    @property
    def simulated_ms(self) -> int:
        """Simulated duration drawn for the last run."""
        return self._simulated_ms

    def met_deadline(self) -> bool:
        """Check if the last measured execution time fits the deadline."""
        return self._execution_time_ms <= self._deadline_ms

    def deadline_utilisation(self) -> float:
        """Execution time as a percentage of the deadline."""
        return self._execution_time_ms / self._deadline_ms * 100.0

    def remaining_deadline_ms(self) -> int:
        return max(0, self._deadline_ms - self._execution_time_ms)

    def criticality(self) -> str:
        if self._critical:
            return "CRÍTICO - Fallo puede causar daño al sistema"
        return "NO CRÍTICO - Fallo solo afecta rendimiento"

    def _perform(self) -> str:
        started = self.clock.now_ms()
        self._simulated_ms = self._simulate_time()
        elapsed = self.clock.now_ms() - started
        self._execution_time_ms = elapsed
        self._jitter_ms = float(abs(elapsed - self._simulated_ms))

        verdict = "✓ CUMPLIDO" if self.met_deadline() else "✗ EXCEDIDO"
        tag = " [CRÍTICO]" if self._critical else ""
        return (
            f"Deadline: {self._deadline_ms}ms | Tiempo real: {elapsed}ms {verdict}{tag} | "
            f"Jitter: {self._jitter_ms:.2f}ms"
        )

    def _describe_fields(self) -> str:
        critical = "Sí" if self._critical else "No"
        return f"Deadline={self._deadline_ms}ms, Crítico={critical}, Jitter={self._jitter_ms:.2f}ms"


PROCESS_TYPES: dict[ProcessKind, type[Process]] = {
    cls.kind: cls
    for cls in (
        CpuProcess,
        IoProcess,
        DaemonProcess,
        NetworkProcess,
        MemoryProcess,
        BatchProcess,
        RealTimeProcess,
    )
}
