"""Block and mutex contention sampling for instrumented locks.

The interpreter keeps no runtime-wide record of time spent waiting on locks,
so contention is observed through `ProfiledLock`, a drop-in replacement for
`threading.Lock`. Every contended acquisition is offered to a
`ContentionRecorder`, which samples it against the current block and mutex
rates:

- block: waits of at least ``block_rate`` nanoseconds are always kept; shorter
  waits are kept with probability ``wait / block_rate``.
- mutex: one in ``mutex_fraction`` contention events is kept.
"""

from __future__ import annotations

import random
import threading
import time
from collections import defaultdict, deque
from dataclasses import dataclass

MAX_RECENT_EVENTS = 1024  # pragma: no mutate


def _empty_totals() -> dict[str, int]:
    return {"block_events": 0, "block_ns": 0, "mutex_events": 0, "mutex_ns": 0}


@dataclass(frozen=True)
class ContentionEvent:
    """A sampled contended acquisition."""

    lock: str
    kind: str  # "block" or "mutex"
    wait_ns: int


class ContentionRecorder:
    """Thread-safe store of sampled contention.

    Sampled events are folded into per-lock totals as they arrive; only the
    most recent ``max_events`` are kept individually.

    Args:
        rng: Random source for the samplers.
        max_events: Size of the recent-events window returned by `events`.
    """

    def __init__(
        self, rng: random.Random | None = None, max_events: int = MAX_RECENT_EVENTS
    ) -> None:
        self._lock = threading.Lock()
        self._recent: deque[ContentionEvent] = deque(maxlen=max_events)
        self._totals: defaultdict[str, dict[str, int]] = defaultdict(_empty_totals)
        self._rng = rng or random.Random()
        self.block_rate = 0
        self.mutex_fraction = 0

    def configure(self, block_rate: int, mutex_fraction: int) -> None:
        with self._lock:
            self.block_rate = block_rate
            self.mutex_fraction = mutex_fraction

    def _keep_block(self, wait_ns: int) -> bool:
        rate = self.block_rate
        if rate <= 0:
            return False
        return wait_ns >= rate or self._rng.randrange(rate) < wait_ns

    def _keep_mutex(self) -> bool:
        fraction = self.mutex_fraction
        return fraction > 0 and self._rng.randrange(fraction) == 0

    def _add(self, event: ContentionEvent) -> None:
        self._recent.append(event)
        totals = self._totals[event.lock]
        totals[f"{event.kind}_events"] += 1
        totals[f"{event.kind}_ns"] += event.wait_ns

    def record(self, lock: str, wait_ns: int) -> None:
        """Offer one contended acquisition of ``lock`` to the samplers."""
        with self._lock:
            if self._keep_block(wait_ns):
                self._add(ContentionEvent(lock, "block", wait_ns))
            if self._keep_mutex():
                self._add(ContentionEvent(lock, "mutex", wait_ns))

    def events(self) -> list[ContentionEvent]:
        """Return the most recent sampled events, oldest first."""
        with self._lock:
            return list(self._recent)

    def report(self) -> dict[str, dict[str, int]]:
        """Summarise every sampled event per lock name.

        Returns:
            dict: ``{lock: {"block_events", "block_ns", "mutex_events",
            "mutex_ns"}}`` with counts and summed wait times.
        """
        with self._lock:
            return {lock: dict(totals) for lock, totals in self._totals.items()}

    def clear(self) -> None:
        with self._lock:
            self._recent.clear()
            self._totals.clear()


class ProfiledLock:
    """A `threading.Lock` that reports contended acquisitions.

    Args:
        name: Label used in contention reports.
        recorder: Recorder to report to; defaults to the process-wide
            profiler's recorder, resolved on each contended acquisition.
    """

    def __init__(self, name: str = "lock", recorder: ContentionRecorder | None = None):
        self.name = name
        self._lock = threading.Lock()
        self._recorder = recorder

    def _get_recorder(self) -> ContentionRecorder:
        if self._recorder is not None:
            return self._recorder
        # Lazy import to avoid circular dependency
        from .profiler import get_profiler

        return get_profiler().contention

    def acquire(self, blocking: bool = True, timeout: float = -1) -> bool:
        if not blocking and timeout != -1:
            raise ValueError("can't specify a timeout for a non-blocking call")
        if self._lock.acquire(blocking=False):
            return True
        if not blocking:
            return False
        start = time.perf_counter_ns()
        acquired = self._lock.acquire(True, timeout)
        if acquired:
            self._get_recorder().record(self.name, time.perf_counter_ns() - start)
        return acquired

    def release(self) -> None:
        self._lock.release()

    def locked(self) -> bool:
        return self._lock.locked()

    def __enter__(self) -> ProfiledLock:
        self.acquire()
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()
