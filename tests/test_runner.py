"""Tests for the ExecutionRunner class."""

import threading
import time
from queue import Queue

import pytest

from procsim.app import QueueView
from procsim.clock import SimulationClock
from procsim.controller import Controller
from procsim.models import ProcessState
from procsim.registry import PidAllocator, Registry
from procsim.runner import ExecutionRunner


def drain(updates):
    items = []
    while not updates.empty():
        items.append(updates.get_nowait())
    return items


@pytest.fixture
def updates():
    return Queue()


@pytest.fixture
def controller(registry, updates):
    return Controller(registry, QueueView(updates))


class TestExecutionRunner:
    """Tests for ExecutionRunner class."""

    def test_runner_creation(self, controller):
        """Test ExecutionRunner can be instantiated."""
        runner = ExecutionRunner(controller)

        assert runner.poll_rate == 0.1
        assert not runner.is_running
        assert runner.pending == 0

    def test_poll_rate_minimum(self, controller):
        """Test poll rate has a minimum value."""
        runner = ExecutionRunner(controller)

        runner.poll_rate = 0.0001
        assert runner.poll_rate >= 0.01

    def test_runner_start_stop(self, controller):
        """Test ExecutionRunner can be started and stopped."""
        runner = ExecutionRunner(controller, poll_rate=0.05)

        runner.start()
        assert runner.is_running

        runner.stop()
        assert not runner.is_running

    def test_runner_start_idempotent(self, controller):
        """Test starting an already running runner is safe."""
        runner = ExecutionRunner(controller, poll_rate=0.05)

        runner.start()
        thread1 = runner._thread

        runner.start()  # Should not create a new thread
        thread2 = runner._thread

        assert thread1 is thread2
        runner.stop()

    def test_daemon_thread(self, controller):
        """Test runner thread is a daemon thread."""
        runner = ExecutionRunner(controller, poll_rate=0.05)

        runner.start()

        try:
            assert runner._thread is not None
            assert runner._thread.daemon is True
            assert runner._thread.name == "ExecutionRunner"
        finally:
            runner.stop()

    def test_request_all(self, controller, registry, updates):
        """Queued execute-all jobs run every process in the background."""
        first = controller.register_cpu("a", 1, 1)
        second = controller.register_daemon("b", "svc", False)
        drain(updates)

        runner = ExecutionRunner(controller, poll_rate=0.05)
        runner.start()
        try:
            runner.request_all()
            runner.join()
        finally:
            runner.stop()

        assert first.state is ProcessState.TERMINATED
        assert second.state is ProcessState.TERMINATED
        assert len(registry.history) == 2
        kinds = [kind for kind, _ in drain(updates)]
        assert kinds.count("result") == 2

    def test_request_single(self, controller, registry):
        first = controller.register_cpu("a", 1, 1)
        second = controller.register_cpu("b", 1, 1)

        runner = ExecutionRunner(controller, poll_rate=0.05)
        runner.start()
        try:
            runner.request(second.pid)
            runner.join()
        finally:
            runner.stop()

        assert first.state is ProcessState.NEW
        assert second.state is ProcessState.TERMINATED

    def test_jobs_run_in_request_order(self, controller, registry):
        a = controller.register_cpu("a", 1, 1)
        b = controller.register_cpu("b", 1, 1)

        runner = ExecutionRunner(controller, poll_rate=0.05)
        runner.start()
        try:
            runner.request(b.pid)
            runner.request(a.pid)
            runner.join()
        finally:
            runner.stop()

        assert [entry.split("]")[0] for entry in registry.history] == [
            f"[PID: {b.pid} | b",
            f"[PID: {a.pid} | a",
        ]

    def test_stop_aborts_inflight_wait(self, updates):
        """Stopping the runner interrupts a long simulated wait."""
        registry = Registry(allocator=PidAllocator(), clock=SimulationClock())
        controller = Controller(registry, QueueView(updates))
        process = controller.register_batch("slow", ["t"] * 50, "slow.sh")

        runner = ExecutionRunner(controller, poll_rate=0.05)
        runner.start()
        runner.request(process.pid)
        time.sleep(0.2)

        start = time.perf_counter()
        runner.stop(timeout=5.0)

        assert time.perf_counter() - start < 2.0
        assert not runner.is_running
        assert process.state is ProcessState.READY
        assert any(kind == "error" for kind, _ in drain(updates))

    def test_restart_resets_clock(self, controller, registry):
        """A restarted runner can execute again after stop() interrupted the clock."""
        process = controller.register_cpu("a", 1, 1)
        runner = ExecutionRunner(controller, poll_rate=0.05)
        runner.start()
        runner.stop()
        assert registry.clock.interrupted

        runner.start()
        try:
            runner.request(process.pid)
            runner.join()
        finally:
            runner.stop()

        assert process.state is ProcessState.TERMINATED

    def test_stop_discards_queued_jobs(self, controller, registry):
        """Jobs left in the queue at stop() are dropped so join() returns."""
        process = controller.register_cpu("a", 1, 1)
        runner = ExecutionRunner(controller, poll_rate=0.05)
        runner.request(process.pid)
        runner.request_all()
        assert runner.pending == 2

        runner.stop()

        assert runner.pending == 0
        waiter = threading.Thread(target=runner.join, daemon=True)
        waiter.start()
        waiter.join(timeout=2.0)
        assert not waiter.is_alive()
        assert process.state is ProcessState.NEW
        assert registry.history == []
