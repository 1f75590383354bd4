"""procutil

Process-wide runtime utilities: debug/production mode and log level
switches, profiling knobs (heap tracing, CPU sampling, lock contention),
call-stack name lookup, Kubernetes detection, JSON dumps and terminal
prompts.

Importing the package switches profiling off.
"""

from procutil.environment import is_kubernetes_pod
from procutil.introspection import caller_name, function_name, trace
from procutil.logging import get_process_logger
from procutil.mode import (
    ProcessMode,
    configure_from_env,
    debug_level,
    disable_profiling,
    enable_profiling,
    get_mode,
    is_development,
    is_production,
    log_level,
    profiling_enabled,
    set_debug_level,
    set_log_level,
    set_production,
    set_profiling,
)
from procutil.terminal import print_as_json, read_line, read_password

__all__ = [
    "__version__",
    "ProcessMode",
    "get_mode",
    "configure_from_env",
    "set_debug_level",
    "debug_level",
    "set_production",
    "is_production",
    "is_development",
    "set_log_level",
    "log_level",
    "enable_profiling",
    "disable_profiling",
    "set_profiling",
    "profiling_enabled",
    "caller_name",
    "function_name",
    "trace",
    "is_kubernetes_pod",
    "get_process_logger",
    "print_as_json",
    "read_password",
    "read_line",
]
__version__ = "0.1.0"
