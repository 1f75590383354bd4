"""Profiler: one structured configuration for the four profiling knobs.

The profiler owns the current `ProfilingRates` and pushes every change to the
backend responsible for each knob (`HeapTracer`, `CpuSampler`,
`ContentionRecorder`). `enable` and `disable` are shorthands for applying
`ENABLED_RATES` and `DISABLED_RATES`.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from .contention import ContentionRecorder
from .cpu import CpuSampler
from .heap import HeapTracer
from .rates import DISABLED_RATES, ENABLED_RATES, ProfilingRates

if TYPE_CHECKING:
    import tracemalloc
    from collections import Counter

    from .cpu import StackKey

logger = logging.getLogger(__name__)


class Profiler:
    """Holds profiling rates and applies them to their backends.

    Usage::

        profiler = Profiler()
        profiler.enable()
        profiler.set_rate("cpu", 250)
        profiler.rate("cpu")        # 250
        profiler.enabled            # True (heap rate is nonzero)
        profiler.disable()
    """

    def __init__(
        self,
        heap: HeapTracer | None = None,
        cpu: CpuSampler | None = None,
        contention: ContentionRecorder | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._rates = DISABLED_RATES
        self.heap = heap or HeapTracer()
        self.cpu = cpu or CpuSampler()
        self.contention = contention or ContentionRecorder()

    @property
    def rates(self) -> ProfilingRates:
        with self._lock:
            return self._rates

    def rate(self, knob: str) -> int:
        """Return the current rate of a single knob."""
        return self.rates.get(knob)

    def set_rate(self, knob: str, rate: int) -> None:
        """Set a single knob, leaving the others untouched.

        Raises:
            UnknownKnobError: If ``knob`` is not a known knob name.
            InvalidRateError: If ``rate`` is negative.
        """
        with self._lock:
            self.apply(self._rates.with_rate(knob, rate))

    def apply(self, rates: ProfilingRates) -> None:
        """Apply all four rates, pushing each one to its backend."""
        with self._lock:
            self.heap.apply(rates.heap)
            self.cpu.apply(rates.cpu)
            self.contention.configure(block_rate=rates.block, mutex_fraction=rates.mutex)
            self._rates = rates
        logger.debug("Profiling rates: %s", rates.as_dict())

    def enable(self) -> None:
        self.apply(ENABLED_RATES)

    def disable(self) -> None:
        self.apply(DISABLED_RATES)

    def set_enabled(self, on: bool) -> None:
        """Dispatch to `enable` or `disable`."""
        if on:
            self.enable()
        else:
            self.disable()

    @property
    def enabled(self) -> bool:
        """True iff the heap rate is nonzero."""
        return self.rates.heap != 0

    def active_knobs(self) -> tuple[str, ...]:
        return self.rates.active()

    def heap_snapshot(self) -> tracemalloc.Snapshot | None:
        return self.heap.snapshot()

    def cpu_samples(self) -> Counter[StackKey]:
        return self.cpu.samples()

    def contention_report(self) -> dict[str, dict[str, int]]:
        return self.contention.report()


# =============================================================================
# Module-level singleton
# =============================================================================

_profiler = Profiler()


def get_profiler() -> Profiler:
    """Return the process-wide profiler."""
    return _profiler
