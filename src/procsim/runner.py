"""Background execution engine for procsim front ends."""

import logging
import threading
from queue import Empty, Queue

from procsim import config
from procsim.controller import Controller

logger = logging.getLogger(__name__)

EXECUTE_ALL = None


class ExecutionRunner:
    """
    Runs controller executions on a separate daemon thread.

    Simulated executions block for hundreds of milliseconds, so a UI hands
    them to the runner and keeps polling its own queue for what the view
    receives. Jobs run one at a time in request order.
    """

    def __init__(
        self,
        controller: Controller,
        poll_rate: float = config.RUNNER_POLL_RATE,
    ) -> None:
        """
        Initialize the ExecutionRunner.

        Args:
            controller: Controller whose executions are run.
            poll_rate: How long to wait for a job before re-checking for stop (seconds).
        """
        self._controller = controller
        self._poll_rate = poll_rate
        self._jobs: Queue[int | None] = Queue()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def poll_rate(self) -> float:
        """Get the current poll rate."""
        return self._poll_rate

    @poll_rate.setter
    def poll_rate(self, value: float) -> None:
        """Set the poll rate."""
        self._poll_rate = max(0.01, value)

    @property
    def is_running(self) -> bool:
        """Check if the runner thread is running."""
        return self._thread is not None and self._thread.is_alive()

    @property
    def pending(self) -> int:
        """Number of jobs waiting to run."""
        return self._jobs.qsize()

    def request_all(self) -> None:
        """Queue an execution of every registered process."""
        self._jobs.put(EXECUTE_ALL)

    def request(self, pid: int) -> None:
        """Queue an execution of one process."""
        self._jobs.put(pid)

    def start(self) -> None:
        """Start the runner thread."""
        if self.is_running:
            return

        self._stop_event.clear()
        self._controller.registry.clock.reset()
        self._thread = threading.Thread(
            target=self._run_loop,
            daemon=True,
            name="ExecutionRunner",
        )
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        """
        Stop the runner thread, aborting any in-flight simulated wait.

        Args:
            timeout: How long to wait for thread to stop (seconds). Jobs still
                queued afterwards are discarded.
        """
        self._stop_event.set()
        self._controller.registry.clock.interrupt()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None
        self._discard_pending()

    def _discard_pending(self) -> None:
        """Drop queued jobs so join() does not wait on work that will never run."""
        while True:
            try:
                job = self._jobs.get_nowait()
            except Empty:
                return
            logger.info("Discarding queued job %r", job)
            self._jobs.task_done()

    def _run_loop(self) -> None:
        """Main job loop running in the background thread."""
        while not self._stop_event.is_set():
            try:
                job = self._jobs.get(timeout=self._poll_rate)
            except Empty:
                continue

            try:
                self._run_job(job)
            except Exception:
                # Keep the loop alive for the next job
                logger.exception("Execution job %r failed", job)
            finally:
                self._jobs.task_done()

    def _run_job(self, job: int | None) -> None:
        if job is EXECUTE_ALL:
            self._controller.execute_all()
        else:
            self._controller.execute_by_id(job)

    def join(self) -> None:
        """Block until every queued job has been processed."""
        self._jobs.join()
