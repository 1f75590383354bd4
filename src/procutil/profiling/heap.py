"""Heap allocation tracing backed by `tracemalloc`."""

import logging
import tracemalloc

logger = logging.getLogger(__name__)


class HeapTracer:
    """Start and stop `tracemalloc` according to the heap rate."""

    def apply(self, rate: int) -> None:
        """Trace allocations while ``rate`` is nonzero."""
        if rate and not tracemalloc.is_tracing():
            tracemalloc.start()
            logger.debug("tracemalloc started (heap rate %d)", rate)
        elif not rate and tracemalloc.is_tracing():
            tracemalloc.stop()
            logger.debug("tracemalloc stopped")

    @staticmethod
    def snapshot() -> tracemalloc.Snapshot | None:
        """Return a snapshot of traced allocations, or None when not tracing."""
        if not tracemalloc.is_tracing():
            return None
        return tracemalloc.take_snapshot()
