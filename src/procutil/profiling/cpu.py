"""Statistical CPU sampler driven by the ``ITIMER_PROF`` interval timer.

Every ``1 / rate`` seconds of process CPU time the kernel delivers
``SIGPROF``; the handler records the interrupted Python stack. Signal
handlers can only be installed from the main thread and interval timers are
POSIX-only, so `CpuSampler.apply` reports whether sampling actually started.
"""

from __future__ import annotations

import logging
import signal
import threading
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import FrameType

logger = logging.getLogger(__name__)

MAX_STACK_DEPTH = 64  # pragma: no mutate

StackKey = tuple[tuple[str, int, str], ...]


def supports_cpu_sampling() -> bool:
    """Return True if an interval-timer sampler can run in this thread."""
    return (
        hasattr(signal, "setitimer")
        and hasattr(signal, "SIGPROF")
        and threading.current_thread() is threading.main_thread()
    )


def stack_key(frame: FrameType | None) -> StackKey:
    """Return the stack rooted at ``frame`` as (file, line, function) tuples."""
    stack = []
    while frame is not None and len(stack) < MAX_STACK_DEPTH:
        code = frame.f_code
        stack.append((code.co_filename, frame.f_lineno, code.co_name))
        frame = frame.f_back
    return tuple(stack)


class CpuSampler:
    """Collect stack samples while the cpu rate is nonzero.

    The interval timer can be stopped from any thread, but the ``SIGPROF``
    handler can only be swapped on the main thread. A stop requested
    elsewhere disarms the timer at once and leaves the handler in place until
    the next call on the main thread.
    """

    def __init__(self) -> None:
        self._samples: Counter[StackKey] = Counter()
        self._previous_handler = None
        self._handler_installed = False
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def handler_installed(self) -> bool:
        """True while the sampling handler is still bound to ``SIGPROF``."""
        return self._handler_installed

    def apply(self, rate: int) -> bool:
        """Start, retune or stop sampling.

        Args:
            rate: Samples per second of CPU time; 0 stops sampling.

        Returns:
            bool: True if the sampler is running after the call.
        """
        if not rate:
            self._stop()
            return False
        if not supports_cpu_sampling():
            logger.warning(
                "CPU sampling unavailable here (needs POSIX and the main thread); "
                "cpu rate %d recorded but not applied",
                rate,
            )
            return self._running
        if not self._handler_installed:
            self._previous_handler = signal.signal(signal.SIGPROF, self._on_sample)
            self._handler_installed = True
        interval = 1.0 / rate
        signal.setitimer(signal.ITIMER_PROF, interval, interval)
        self._running = True
        logger.debug("CPU sampler running at %d Hz", rate)
        return True

    def _stop(self) -> None:
        if self._running:
            signal.setitimer(signal.ITIMER_PROF, 0)
            self._running = False
            logger.debug("CPU sampler stopped")
        if self._handler_installed and threading.current_thread() is threading.main_thread():
            signal.signal(signal.SIGPROF, self._previous_handler or signal.SIG_DFL)
            self._previous_handler = None
            self._handler_installed = False

    def _on_sample(self, signum: int, frame: FrameType | None) -> None:  # pylint: disable=unused-argument
        self._samples[stack_key(frame)] += 1

    def samples(self) -> Counter[StackKey]:
        """Return a copy of the collected stack samples."""
        return Counter(self._samples)

    def clear(self) -> None:
        self._samples.clear()
