"""Exception types raised by the procsim core."""


class ProcsimError(Exception):
    """Base class for every error raised by procsim."""


class ProcessValidationError(ProcsimError, ValueError):
    """A constructor or setter received an invalid value."""


class DuplicateProcessError(ProcsimError):
    """A process with the same PID is already registered."""

    def __init__(self, pid: int) -> None:
        super().__init__(f"Ya existe un proceso con PID {pid}")
        self.pid = pid


class ExecutionInterrupted(ProcsimError):
    """A simulated wait was interrupted before it completed."""
