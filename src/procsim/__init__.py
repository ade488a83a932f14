"""procsim - simulation of operating-system process types."""

from procsim.clock import SimulationClock
from procsim.errors import (
    DuplicateProcessError,
    ExecutionInterrupted,
    ProcessValidationError,
    ProcsimError,
)
from procsim.models import (
    BatchProcess,
    CpuProcess,
    DaemonProcess,
    ExecutionOutcome,
    ExecutionResult,
    IoProcess,
    MemoryProcess,
    NetworkProcess,
    Process,
    ProcessKind,
    ProcessState,
    RealTimeProcess,
)
from procsim.registry import PidAllocator, Registry

__all__ = [
    "BatchProcess",
    "CpuProcess",
    "DaemonProcess",
    "DuplicateProcessError",
    "ExecutionInterrupted",
    "ExecutionOutcome",
    "ExecutionResult",
    "IoProcess",
    "MemoryProcess",
    "NetworkProcess",
    "PidAllocator",
    "Process",
    "ProcessKind",
    "ProcessState",
    "ProcessValidationError",
    "ProcsimError",
    "RealTimeProcess",
    "Registry",
    "SimulationClock",
]
