"""Simulation constants for procsim."""

import logging

# Priorities
PRIORITY_MIN = 1
PRIORITY_MAX = 10
PRIORITY_DEFAULT = 5

PRIORITY_CPU = 7
PRIORITY_IO = 4
PRIORITY_DAEMON = 3
PRIORITY_NETWORK = 6
PRIORITY_MEMORY = 8
PRIORITY_BATCH = 2
PRIORITY_REALTIME = 9
PRIORITY_REALTIME_CRITICAL = 10

# Base simulated execution window (ms)
EXEC_TIME_MIN_MS = 100
EXEC_TIME_MAX_MS = 500

# CPU
MIN_OPERATIONS = 1
MIN_CORES = 1
MAX_CORES = 16
MAX_CPU_LOOP = 1000

# I/O: fixed blocking wait per device (ms)
IO_WAIT_MS = {
    "KEYBOARD": 200,
    "DISK": 100,
    "NETWORK": 50,
}

# Daemon
DEFAULT_MONITOR_INTERVAL_S = 30

# Network
PORT_MIN = 1
PORT_MAX = 65535
PROTOCOLS = ("TCP", "UDP", "HTTP", "HTTPS")
PACKETS_MIN = 100
PACKETS_MAX = 1000

# Memory
MEMORY_TYPES = ("RAM", "VIRTUAL")
FRAGMENTATION_MIN = 0.0
FRAGMENTATION_MAX = 15.0
FRAGMENTATION_LIMIT = 100.0
DEFRAG_STEP_MAX = 2.0

# Batch: per-task wait window (ms)
TASK_TIME_MIN_MS = 50
TASK_TIME_MAX_MS = 150

# Registry
PID_SEED = 1000

# Controller
MAX_NAME_LENGTH = 50

# Front end
LOG_FILE = "procsim.log"
LOG_LEVEL = logging.INFO
UI_POLL_INTERVAL = 0.2
RUNNER_POLL_RATE = 0.1
HOST_STATS_INTERVAL = 2.0
