"""procsim - Textual front end for the process simulator."""

import logging
from dataclasses import dataclass
from enum import Enum
from queue import Empty, Queue

import psutil
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.css.query import NoMatches
from textual.widgets import DataTable, Footer, Log, Static

from procsim import config
from procsim.clock import SimulationClock
from procsim.controller import Controller
from procsim.models import Process
from procsim.registry import Registry
from procsim.runner import ExecutionRunner

logger = logging.getLogger(__name__)


class SortKey(Enum):
    """Sort keys for the process table."""

    PID = "pid"
    PRIORITY = "priority"
    STATE = "state"
    KIND = "kind"


@dataclass(slots=True)
class HostStats:
    """Snapshot of the host machine, shown next to the simulation."""

    cpu_percent: float
    memory_used: int
    memory_total: int
    memory_percent: float


def collect_host_stats() -> HostStats:
    """Read host CPU and memory usage with psutil."""
    mem = psutil.virtual_memory()
    return HostStats(
        cpu_percent=psutil.cpu_percent(),
        memory_used=mem.used,
        memory_total=mem.total,
        memory_percent=mem.percent,
    )


def format_bar(percent: float, color: str, width: int = 20) -> str:
    """Render a percentage as a fixed-width markup bar."""
    filled = min(int(percent / 100 * width), width)
    return f"[{color}]█[/{color}]" * filled + "[dim]░[/dim]" * (width - filled)


class QueueView:
    """
    View that forwards everything it receives to a thread-safe queue.

    The controller may call it from the runner thread; the app drains the
    queue on its own thread.
    """

    def __init__(self, updates: Queue[tuple[str, object]]) -> None:
        self._updates = updates

    def show_message(self, message: str) -> None:
        self._updates.put(("message", message))

    def show_error(self, error: str) -> None:
        self._updates.put(("error", error))

    def show_processes(self, processes: list[Process]) -> None:
        self._updates.put(("processes", processes))

    def show_result(self, result: str) -> None:
        self._updates.put(("result", result))


class HeaderStats(Static):
    """Header widget showing registry and host statistics."""

    DEFAULT_CSS = """
    HeaderStats {
        height: auto;
        min-height: 5;
        padding: 1;
        background: $surface;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize HeaderStats."""
        super().__init__(*args, **kwargs)
        self._summary: str = ""
        self._host: HostStats | None = None

    def compose(self) -> ComposeResult:
        """Compose the header stats layout."""
        yield Horizontal(
            Static(self._get_summary_info(), id="summary-info"),
            Static(self._get_host_info(), id="host-info"),
        )

    def update_summary(self, summary: str) -> None:
        """Update the registry summary."""
        self._summary = summary
        self._refresh_display()

    def update_host(self, host: HostStats) -> None:
        """Update the host statistics."""
        self._host = host
        self._refresh_display()

    def _refresh_display(self) -> None:
        """Refresh the display with current data."""
        try:
            summary_info = self.query_one("#summary-info", Static)
            host_info = self.query_one("#host-info", Static)
        except NoMatches:
            return  # Widget not mounted yet
        summary_info.update(self._get_summary_info())
        host_info.update(self._get_host_info())

    def _get_summary_info(self) -> str:
        return self._summary.strip() or "Sin procesos registrados"

    def _get_host_info(self) -> str:
        if self._host is None:
            return "Loading host info..."
        host = self._host
        used_gb = host.memory_used / (1024**3)
        total_gb = host.memory_total / (1024**3)
        # Escaped brackets around the bars
        return (
            f"CPU \\[{format_bar(host.cpu_percent, 'green')}] {host.cpu_percent:5.1f}%\n"
            f"Mem \\[{format_bar(host.memory_percent, 'cyan')}] {used_gb:.1f}G/{total_gb:.1f}G"
        )


class ProcessTable(Container):
    """Container for the process data table."""

    DEFAULT_CSS = """
    ProcessTable {
        height: 1fr;
        border: solid $primary;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize ProcessTable."""
        super().__init__(*args, **kwargs)
        self._current_pids: list[int] = []
        self._processes: list[Process] = []
        self._sort_key: SortKey = SortKey.PID
        self._sort_reverse: bool = False

    @property
    def sort_key(self) -> SortKey:
        """Get current sort key."""
        return self._sort_key

    def cycle_sort(self) -> SortKey:
        """Cycle to the next sort key and return it."""
        keys = list(SortKey)
        current_index = keys.index(self._sort_key)
        self._sort_key = keys[(current_index + 1) % len(keys)]
        # Priority reads best highest-first
        self._sort_reverse = self._sort_key is SortKey.PRIORITY
        self.update_processes(self._processes)
        return self._sort_key

    def compose(self) -> ComposeResult:
        """Compose the process table."""
        yield DataTable(id="process-table")

    def on_mount(self) -> None:
        """Initialize the data table when mounted."""
        table = self.query_one("#process-table", DataTable)
        table.cursor_type = "row"

        table.add_column("PID", key="pid", width=8)
        table.add_column("Nombre", key="name", width=24)
        table.add_column("Tipo", key="kind", width=18)
        table.add_column("Estado", key="state", width=11)
        table.add_column("Prioridad", key="priority", width=9)

    def update_processes(self, processes: list[Process]) -> None:
        """Rebuild the table from the given processes in the current sort order."""
        self._processes = list(processes)
        sorted_processes = self._sort_processes(self._processes)
        self._current_pids = [proc.pid for proc in sorted_processes]
        try:
            table = self.query_one("#process-table", DataTable)
        except NoMatches:
            return  # Not mounted yet
        table.clear()
        for proc in sorted_processes:
            table.add_row(
                str(proc.pid),
                proc.name[:24],
                proc.kind.value,
                proc.state.value,
                str(proc.priority),
                key=str(proc.pid),
            )

    def _sort_processes(self, processes: list[Process]) -> list[Process]:
        """Sort processes based on the current sort key."""
        key_func = {
            SortKey.PID: lambda p: p.pid,
            SortKey.PRIORITY: lambda p: p.priority,
            SortKey.STATE: lambda p: p.state.value,
            SortKey.KIND: lambda p: p.kind.value,
        }
        return sorted(processes, key=key_func[self._sort_key], reverse=self._sort_reverse)

    def selected_pid(self) -> int | None:
        """PID of the highlighted row, if any."""
        table = self.query_one("#process-table", DataTable)
        if table.row_count == 0:
            return None
        return int(table.get_row_at(table.cursor_row)[0])


SAMPLES = {
    "1": lambda c, n: c.register_cpu(f"compilador-{n}", 5000, 4),
    "2": lambda c, n: c.register_io(f"lector-{n}", "DISK", 4096),
    "3": lambda c, n: c.register_daemon(f"sshd-{n}", "ssh", True),
    "4": lambda c, n: c.register_network(f"nginx-{n}", "HTTPS", 443, 8443),
    "5": lambda c, n: c.register_memory(f"gestor-mem-{n}", 512, "RAM"),
    "6": lambda c, n: c.register_batch(f"backup-{n}", ["comprimir", "cifrar", "subir"], "backup.sh"),
    "7": lambda c, n: c.register_realtime(f"control-{n}", 400, n % 2 == 0),
}


class ProcsimApp(App):
    """Main procsim application."""

    TITLE = "procsim"
    SUB_TITLE = "Simulador de procesos"

    CSS = """
    Screen {
        layout: vertical;
    }

    #header-stats {
        dock: top;
        height: auto;
        min-height: 6;
    }

    Horizontal {
        height: auto;
    }

    #summary-info {
        width: 1fr;
        padding-right: 2;
    }

    #host-info {
        width: 1fr;
        padding-left: 2;
    }

    #event-log {
        height: 12;
        border: solid $secondary;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("1", "sample('1')", "CPU"),
        ("2", "sample('2')", "I/O"),
        ("3", "sample('3')", "Daemon"),
        ("4", "sample('4')", "Red"),
        ("5", "sample('5')", "Memoria"),
        ("6", "sample('6')", "Batch"),
        ("7", "sample('7')", "T. Real"),
        ("e", "execute_all", "Ejecutar todos"),
        ("x", "execute_selected", "Ejecutar"),
        ("d", "delete_selected", "Eliminar"),
        ("c", "clear", "Limpiar"),
        ("s", "statistics", "Estadísticas"),
        ("f6", "sort", "Sort"),
    ]

    def __init__(self, registry: Registry | None = None) -> None:
        """
        Initialize the ProcsimApp.

        Args:
            registry: Registry to drive. A fresh one with its own clock is
                created when omitted.
        """
        super().__init__()
        self._updates: Queue[tuple[str, object]] = Queue()
        self._process_registry = registry if registry is not None else Registry(clock=SimulationClock())
        self._controller = Controller(self._process_registry, QueueView(self._updates))
        self._runner = ExecutionRunner(self._controller)
        self._sample_count = 0
        # Initialize CPU percent (first call returns 0.0)
        psutil.cpu_percent()

    @property
    def controller(self) -> Controller:
        return self._controller

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield HeaderStats(id="header-stats")
        yield ProcessTable()
        yield Log(id="event-log")
        yield Footer()

    def on_mount(self) -> None:
        """Start the runner and the polling timers when the app is mounted."""
        self._runner.start()
        self.set_interval(config.UI_POLL_INTERVAL, self._check_for_updates)
        self.set_interval(config.HOST_STATS_INTERVAL, self._refresh_host)
        self._refresh_host()
        self._controller.welcome()

    def _refresh_host(self) -> None:
        try:
            host = collect_host_stats()
        except psutil.Error:
            logger.exception("Could not read host statistics")
            return
        self.query_one("#header-stats", HeaderStats).update_host(host)

    def _check_for_updates(self) -> None:
        """Drain the view queue and apply every update to the UI."""
        while True:
            try:
                kind, payload = self._updates.get_nowait()
            except Empty:
                break
            self._apply_update(kind, payload)

    def _apply_update(self, kind: str, payload: object) -> None:
        log = self.query_one("#event-log", Log)
        if kind == "processes":
            self.query_one(ProcessTable).update_processes(payload)
            self.query_one("#header-stats", HeaderStats).update_summary(self._process_registry.summary())
        elif kind == "error":
            log.write_line(f"✗ {payload}")
        else:
            for line in str(payload).splitlines() or [""]:
                log.write_line(line)

    def action_sample(self, key: str) -> None:
        """Register a sample process of the kind bound to key."""
        self._sample_count += 1
        SAMPLES[key](self._controller, self._sample_count)

    def action_execute_all(self) -> None:
        self._runner.request_all()

    def action_execute_selected(self) -> None:
        pid = self.query_one(ProcessTable).selected_pid()
        if pid is None:
            self.notify("No hay procesos seleccionados")
            return
        self._runner.request(pid)

    def action_delete_selected(self) -> None:
        pid = self.query_one(ProcessTable).selected_pid()
        if pid is None:
            self.notify("No hay procesos seleccionados")
            return
        self._controller.remove(pid)

    def action_clear(self) -> None:
        self._controller.clear()

    def action_statistics(self) -> None:
        self._controller.statistics()

    def action_sort(self) -> None:
        """Handle sort action - cycle through sort keys."""
        new_sort_key = self.query_one(ProcessTable).cycle_sort()
        self.notify(f"Sort: {new_sort_key.value.upper()}")

    def action_quit(self) -> None:
        """Handle quit action with graceful cleanup."""
        self._runner.stop()
        self.exit()


def main() -> None:
    """Entry point for the procsim application."""
    logging.basicConfig(
        filename=config.LOG_FILE,
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = ProcsimApp()
    app.run()


if __name__ == "__main__":
    main()
