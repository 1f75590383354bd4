"""Process mode: debug level, log level and the profiling switch.

`ProcessMode` is an explicit configuration object; every read and write goes
through one lock. A process-wide instance backs the module-level functions
(`set_debug_level`, `is_production`, `enable_profiling`, ...), which is what
most callers use.

Changing the debug level always switches profiling off, so profiling never
silently survives a mode change. The log level is independent of both.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from procutil.config import Settings, load_settings
from procutil.profiling import Profiler, get_profiler

logger = logging.getLogger(__name__)


class ProcessMode:
    """Debug level, log level and the profiler they control.

    Args:
        profiler: Profiler switched by the profiling operations; defaults to
            the process-wide profiler.
    """

    def __init__(self, profiler: Profiler | None = None) -> None:
        self._lock = threading.Lock()
        self._debug_level = 0
        self._log_level = 0
        self.profiler = profiler if profiler is not None else get_profiler()

    # ------------------------------------------------------------------
    # Debug level
    # ------------------------------------------------------------------

    @property
    def debug_level(self) -> int:
        with self._lock:
            return self._debug_level

    def set_debug_level(self, level: int) -> None:
        """Store ``level`` (unvalidated) and switch profiling off."""
        with self._lock:
            self._debug_level = level
        self.profiler.disable()
        logger.debug("Debug level set to %d; profiling disabled", level)

    def set_production(self) -> None:
        self.set_debug_level(0)

    def is_production(self) -> bool:
        return self.debug_level == 0

    def is_development(self) -> bool:
        # A negative level is neither production nor development.
        return self.debug_level > 0

    # ------------------------------------------------------------------
    # Log level
    # ------------------------------------------------------------------

    @property
    def log_level(self) -> int:
        with self._lock:
            return self._log_level

    def set_log_level(self, level: int) -> None:
        with self._lock:
            self._log_level = level

    # ------------------------------------------------------------------
    # Profiling
    # ------------------------------------------------------------------

    def enable_profiling(self) -> None:
        self.profiler.enable()

    def disable_profiling(self) -> None:
        self.profiler.disable()

    def set_profiling(self, on: bool) -> None:
        self.profiler.set_enabled(on)

    def profiling_enabled(self) -> bool:
        return self.profiler.enabled

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def apply_settings(self, settings: Settings) -> None:
        """Apply ``settings``; profiling is switched on last so it survives."""
        self.set_debug_level(settings.debug_level)
        self.set_log_level(settings.log_level)
        if settings.profiling:
            self.enable_profiling()

    @classmethod
    def from_settings(
        cls, settings: Settings, profiler: Profiler | None = None
    ) -> ProcessMode:
        mode = cls(profiler=profiler)
        mode.apply_settings(settings)
        return mode

    def snapshot(self) -> dict[str, Any]:
        """Return the current mode as JSON-serialisable data."""
        with self._lock:
            debug_level, log_level = self._debug_level, self._log_level
        return {
            "debug_level": debug_level,
            "log_level": log_level,
            "production": debug_level == 0,
            "development": debug_level > 0,
            "profiling": self.profiler.enabled,
            "profiling_rates": self.profiler.rates.as_dict(),
        }


# =============================================================================
# Module-level singleton
# =============================================================================

_mode = ProcessMode()


def get_mode() -> ProcessMode:
    """Return the process-wide `ProcessMode`."""
    return _mode


def configure_from_env(environ: Mapping[str, str] | None = None) -> ProcessMode:
    """Apply ``PROCUTIL_*`` environment settings to the process-wide mode.

    Raises:
        InvalidSettingError: If a variable is set to an unparsable value.
    """
    _mode.apply_settings(load_settings(environ))
    return _mode


def set_debug_level(level: int) -> None:
    _mode.set_debug_level(level)


def debug_level() -> int:
    return _mode.debug_level


def set_production() -> None:
    _mode.set_production()


def is_production() -> bool:
    return _mode.is_production()


def is_development() -> bool:
    return _mode.is_development()


def set_log_level(level: int) -> None:
    _mode.set_log_level(level)


def log_level() -> int:
    return _mode.log_level


def enable_profiling() -> None:
    _mode.enable_profiling()


def disable_profiling() -> None:
    _mode.disable_profiling()


def set_profiling(on: bool) -> None:
    _mode.set_profiling(on)


def profiling_enabled() -> bool:
    return _mode.profiling_enabled()
