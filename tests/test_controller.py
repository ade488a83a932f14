"""Tests for the Controller mediating layer."""

import logging

import pytest

from conftest import FakeClock
from procsim.controller import Controller, validate_name
from procsim.errors import ProcessValidationError
from procsim.models import ProcessKind, ProcessState
from procsim.registry import PidAllocator, Registry


class RecordingView:
    """View that keeps everything it is asked to show."""

    def __init__(self):
        self.messages = []
        self.errors = []
        self.results = []
        self.process_lists = []

    def show_message(self, message):
        self.messages.append(message)

    def show_error(self, error):
        self.errors.append(error)

    def show_processes(self, processes):
        self.process_lists.append(processes)

    def show_result(self, result):
        self.results.append(result)


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def controller(registry, view):
    return Controller(registry, view)


def test_validate_name():
    """Names are trimmed, must not be blank and are at most 50 characters."""
    assert validate_name("  calc ") == "calc"
    assert validate_name("x" * 50) == "x" * 50
    with pytest.raises(ProcessValidationError):
        validate_name("   ")
    with pytest.raises(ProcessValidationError):
        validate_name("x" * 51)
    with pytest.raises(ProcessValidationError):
        validate_name(None)


def test_controller_requires_collaborators(registry, view):
    with pytest.raises(ValueError):
        Controller(None, view)
    with pytest.raises(ValueError):
        Controller(registry, None)


class TestRegistration:
    """Tests for the register_* operations."""

    def test_register_every_kind(self, controller, registry):
        """Each register method submits one process of its kind."""
        controller.register_cpu("cpu", 100, 4)
        controller.register_io("io", "DISK", 2048)
        controller.register_daemon("daemon", "ssh", True)
        controller.register_network("net", "TCP", 80, 8080)
        controller.register_memory("mem", 256, "VIRTUAL")
        controller.register_batch("batch", ["a", "b"], "job.sh")
        controller.register_realtime("rt", 100, True)

        stats = registry.stats_by_kind()
        assert stats["Total"] == 7
        for kind in ProcessKind:
            assert stats[kind.value] == 1

    def test_register_assigns_sequential_pids(self, controller):
        first = controller.register_cpu("a", 1, 1)
        second = controller.register_daemon("b", "svc", False)
        assert (first.pid, second.pid) == (1000, 1001)

    def test_register_reports_success(self, controller, view):
        process = controller.register_cpu("calc", 10, 2)

        assert view.messages == [f"✓ Proceso CPU registrado: calc (PID: {process.pid})"]
        assert view.process_lists[-1] == [process]
        assert view.errors == []

    def test_register_uses_registry_clock(self, controller, registry):
        process = controller.register_cpu("calc", 10, 2)
        assert process.clock is registry.clock

    def test_invalid_parameters_become_errors(self, controller, view, registry, caplog):
        """Validation failures are logged and shown, never raised."""
        with caplog.at_level(logging.ERROR, logger="procsim.controller"):
            result = controller.register_cpu("calc", 10, 17)

        assert result is None
        assert registry.count == 0
        assert len(view.errors) == 1
        assert "17" in view.errors[0]
        assert "Operation failed" in caplog.text

    def test_long_name_rejected(self, controller, view, registry):
        assert controller.register_daemon("n" * 51, "svc", False) is None
        assert "máx 50" in view.errors[0]
        assert registry.count == 0

    @pytest.mark.parametrize("name", [123, None, ["calc"]])
    def test_non_text_name_becomes_error(self, controller, view, registry, name):
        """A name that is not text is shown as an error instead of raising."""
        assert controller.register_cpu(name, 1, 1) is None
        assert registry.count == 0
        assert len(view.errors) == 1
        assert repr(name) in view.errors[0]

    def test_failed_registration_still_consumes_pid(self, controller, registry):
        """A PID is allocated before the variant validates its fields."""
        controller.register_io("io", "USB", 1)
        process = controller.register_io("io", "DISK", 1)
        assert process.pid == 1001


class TestExecution:
    """Tests for controller-driven execution."""

    def test_execute_all_empty(self, controller, view):
        assert controller.execute_all() == []
        assert view.errors == ["No hay procesos registrados para ejecutar"]

    def test_execute_all(self, controller, view, registry):
        controller.register_cpu("a", 1, 1)
        controller.register_daemon("b", "svc", False)

        results = controller.execute_all()

        assert view.results == results
        assert len(registry.history) == 2
        assert view.messages[-1] == "✓ Todos los procesos ejecutados exitosamente"
        assert all(p.state is ProcessState.TERMINATED for p in view.process_lists[-1])

    def test_execute_all_interrupted(self, view):
        """An interrupted run is reported as an error."""
        clock = FakeClock(interrupt_after=0)
        controller = Controller(Registry(allocator=PidAllocator(), clock=clock), view)
        controller.register_cpu("a", 1, 1)

        assert controller.execute_all() == []
        assert view.errors and "interrumpida" in view.errors[-1]

    def test_execute_by_id(self, controller, view):
        process = controller.register_cpu("a", 1, 1)

        result = controller.execute_by_id(process.pid)

        assert result == view.results[-1]
        assert view.messages[-1] == f"✓ Proceso {process.pid} ejecutado exitosamente"

    def test_execute_by_id_missing(self, controller, view):
        assert controller.execute_by_id(12345) is None
        assert view.errors == ["Proceso con PID 12345 no encontrado"]


class TestManagement:
    """Tests for removal, clearing and statistics."""

    def test_remove(self, controller, view, registry):
        process = controller.register_cpu("a", 1, 1)

        assert controller.remove(process.pid) is True
        assert registry.count == 0
        assert view.messages[-1] == f"✓ Proceso {process.pid} eliminado exitosamente"

    def test_remove_missing(self, controller, view):
        assert controller.remove(999) is False
        assert view.errors == ["No se pudo eliminar el proceso 999"]

    def test_clear(self, controller, view, registry):
        controller.register_cpu("a", 1, 1)
        controller.clear()
        assert registry.count == 0
        assert view.process_lists[-1] == []
        assert view.messages[-1] == "✓ Todos los procesos eliminados"

    def test_statistics(self, controller, view):
        controller.register_cpu("a", 1, 1)
        controller.register_cpu("b", 1, 1)
        controller.register_daemon("c", "svc", False)

        text = controller.statistics()

        assert view.messages[-1] == text
        assert "Total de procesos: 3" in text
        assert "  • Procesos CPU: 2" in text
        assert "  • Daemons: 1" in text
        assert "  • Procesos Tiempo Real: 0" in text
        assert "=== RESUMEN DEL SISTEMA ===" in text

    def test_status(self, controller):
        controller.register_cpu("a", 1, 1)
        assert controller.status() == "Controlador - Procesos: 1, Vista: RecordingView"

    def test_welcome(self, controller, view):
        controller.welcome()
        assert "SIMULADOR DE PROCESOS" in view.messages[0]
        assert view.process_lists == [[]]
