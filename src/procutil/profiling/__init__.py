"""Profiling knobs: heap tracing, CPU sampling, block and mutex contention.

Importing this package switches profiling off on the process-wide profiler,
so every process starts with all four rates at zero (and `tracemalloc`
stopped, even if ``PYTHONTRACEMALLOC`` started it).

Public API:
    Profiler        : rates plus the backends that apply them
    get_profiler    : the process-wide profiler
    ProfilingRates  : named heap/block/cpu/mutex rates
    ENABLED_RATES   : rates applied by `Profiler.enable`
    DISABLED_RATES  : all zero
    ProfiledLock    : lock that reports contention to the profiler
"""

from .contention import ContentionEvent, ContentionRecorder, ProfiledLock
from .cpu import CpuSampler
from .heap import HeapTracer
from .profiler import Profiler, get_profiler
from .rates import DISABLED_RATES, ENABLED_RATES, ProfilingRates

__all__ = [
    "Profiler",
    "get_profiler",
    "ProfilingRates",
    "ENABLED_RATES",
    "DISABLED_RATES",
    "ProfiledLock",
    "ContentionEvent",
    "ContentionRecorder",
    "CpuSampler",
    "HeapTracer",
]

get_profiler().disable()
