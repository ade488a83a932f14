"""Mediating layer between a front end and the process registry."""

import logging
from typing import Callable, Iterable, Protocol

from procsim import config
from procsim.errors import ProcessValidationError, ProcsimError
from procsim.models import (
    BatchProcess,
    CpuProcess,
    DaemonProcess,
    IoProcess,
    MemoryProcess,
    NetworkProcess,
    Process,
    ProcessKind,
    RealTimeProcess,
)
from procsim.registry import Registry

logger = logging.getLogger(__name__)

KIND_LABELS = {
    ProcessKind.CPU: "Procesos CPU",
    ProcessKind.IO: "Procesos I/O",
    ProcessKind.DAEMON: "Daemons",
    ProcessKind.NETWORK: "Procesos Red",
    ProcessKind.MEMORY: "Procesos Memoria",
    ProcessKind.BATCH: "Procesos Batch",
    ProcessKind.REALTIME: "Procesos Tiempo Real",
}


class View(Protocol):
    def show_message(self, message: str) -> None: ...

    def show_error(self, error: str) -> None: ...

    def show_processes(self, processes: list[Process]) -> None: ...

    def show_result(self, result: str) -> None: ...


def validate_name(name: str) -> str:
    """
    Validate a process name as entered by a user.

    Raises:
        ProcessValidationError: If the name is not text, or is blank or longer
            than 50 characters.
    """
    if not isinstance(name, str):
        raise ProcessValidationError(f"El nombre del proceso debe ser texto. Valor recibido: {name!r}")
    if not name.strip():
        raise ProcessValidationError("El nombre del proceso no puede estar vacío")
    if len(name) > config.MAX_NAME_LENGTH:
        raise ProcessValidationError(
            f"El nombre es demasiado largo (máx {config.MAX_NAME_LENGTH} caracteres). "
            f"Longitud recibida: {len(name)}"
        )
    return name.strip()


class Controller:
    """
    Coordinates user actions against a Registry and renders them on a View.

    Errors never escape to the view: they are logged and shown with
    show_error().
    """

    def __init__(self, registry: Registry, view: View) -> None:
        """
        Initialize the Controller.

        Args:
            registry: Registry holding the simulated processes.
            view: Front end that renders messages and process lists.
        """
        if registry is None:
            raise ValueError("El registro no puede ser None")
        if view is None:
            raise ValueError("La vista no puede ser None")
        self._registry = registry
        self._view = view

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def view(self) -> View:
        return self._view

    def welcome(self) -> None:
        self._view.show_message(
            "=== SIMULADOR DE PROCESOS DEL SISTEMA OPERATIVO ===\n"
            "Sistema iniciado correctamente.\n"
            "Registre procesos y ejecute el planificador."
        )
        self.refresh()

    def _register(self, label: str, name: str, build: Callable[[int, str], Process]) -> Process | None:
        try:
            clean_name = validate_name(name)
            pid = self._registry.next_id()
            process = build(pid, clean_name)
            self._registry.submit(process)
        except ProcsimError as exc:
            self._handle_error(exc)
            return None
        self._view.show_message(f"✓ {label} registrado: {process.name} (PID: {process.pid})")
        self.refresh()
        return process

    def register_cpu(self, name: str, operation_count: int, core_count: int) -> Process | None:
        return self._register(
            "Proceso CPU",
            name,
            lambda pid, n: CpuProcess(pid, n, operation_count, core_count, clock=self._registry.clock),
        )

    def register_io(self, name: str, device: str, byte_count: int) -> Process | None:
        return self._register(
            "Proceso I/O",
            name,
            lambda pid, n: IoProcess(pid, n, device, byte_count, clock=self._registry.clock),
        )

    def register_daemon(self, name: str, service_name: str, auto_start: bool) -> Process | None:
        return self._register(
            "Daemon",
            name,
            lambda pid, n: DaemonProcess(pid, n, service_name, auto_start, clock=self._registry.clock),
        )

    def register_network(
        self, name: str, protocol: str, source_port: int, dest_port: int
    ) -> Process | None:
        return self._register(
            "Proceso Red",
            name,
            lambda pid, n: NetworkProcess(
                pid, n, protocol, source_port, dest_port, clock=self._registry.clock
            ),
        )

    def register_memory(self, name: str, allocated_mb: int, memory_type: str) -> Process | None:
        return self._register(
            "Proceso Memoria",
            name,
            lambda pid, n: MemoryProcess(pid, n, allocated_mb, memory_type, clock=self._registry.clock),
        )

    def register_batch(self, name: str, tasks: Iterable[str], script_name: str) -> Process | None:
        return self._register(
            "Proceso Batch",
            name,
            lambda pid, n: BatchProcess(pid, n, tasks, script_name, clock=self._registry.clock),
        )

    def register_realtime(self, name: str, deadline_ms: int, critical: bool) -> Process | None:
        return self._register(
            "Proceso Tiempo Real",
            name,
            lambda pid, n: RealTimeProcess(pid, n, deadline_ms, critical, clock=self._registry.clock),
        )

    def execute_all(self) -> list[str]:
        """Execute every registered process and show each outcome."""
        if self._registry.count == 0:
            self._view.show_error("No hay procesos registrados para ejecutar")
            return []
        self._view.show_message("Ejecutando todos los procesos del sistema...")
        try:
            results = self._registry.execute_all()
        except ProcsimError as exc:
            self._handle_error(exc)
            self.refresh()
            return []
        for result in results:
            self._view.show_result(result)
        self.refresh()
        self._view.show_message("✓ Todos los procesos ejecutados exitosamente")
        return results

    def execute_by_id(self, pid: int) -> str | None:
        """Execute one process and show its outcome."""
        if self._registry.lookup(pid) is None:
            self._view.show_error(f"Proceso con PID {pid} no encontrado")
            return None
        self._view.show_message(f"Ejecutando proceso {pid}...")
        try:
            result = self._registry.execute_by_id(pid)
        except ProcsimError as exc:
            self._handle_error(exc)
            self.refresh()
            return None
        self._view.show_result(result)
        self.refresh()
        self._view.show_message(f"✓ Proceso {pid} ejecutado exitosamente")
        return result

    def remove(self, pid: int) -> bool:
        if self._registry.remove(pid):
            self._view.show_message(f"✓ Proceso {pid} eliminado exitosamente")
            self.refresh()
            return True
        self._view.show_error(f"No se pudo eliminar el proceso {pid}")
        return False

    def clear(self) -> None:
        self._registry.clear()
        self.refresh()
        self._view.show_message("✓ Todos los procesos eliminados")

    def refresh(self) -> None:
        """Push the current process list to the view."""
        self._view.show_processes(self._registry.list_all())

    def statistics(self) -> str:
        """Build the statistics block and show it on the view."""
        stats = self._registry.stats_by_kind()
        lines = [
            "=== ESTADÍSTICAS DEL SISTEMA ===",
            "",
            f"Total de procesos: {stats['Total']}",
            "",
            "Por tipo:",
        ]
        lines.extend(f"  • {KIND_LABELS[kind]}: {stats[kind.value]}" for kind in ProcessKind)
        lines.extend(["", self._registry.summary()])
        text = "\n".join(lines)
        self._view.show_message(text)
        return text

    def status(self) -> str:
        return f"Controlador - Procesos: {self._registry.count}, Vista: {type(self._view).__name__}"

    def _handle_error(self, exc: Exception) -> None:
        logger.exception("Operation failed: %s", exc)
        self._view.show_error(str(exc))
