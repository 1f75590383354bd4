"""Logging helpers used by procutil and its CLI.

This module provides utilities for configuring console logging with Rich
and an in-memory "flight recorder" that buffers log records and writes them
to disk on flush. It also provides a filter that annotates third-party
log records with a short prefix used by console formatting, and the mapping
from procutil's integer log level onto standard logging levels. For code
outside the CLI, `get_process_logger` returns a plain stdout logger stamped
with date, time and file:line.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version as dist_version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TextIO, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from procutil.mode import ProcessMode

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "procutil"
BASE_LEVEL = logging.WARNING

PROCESS_LOGGER_NAME = "procutil.process"
PROCESS_LOG_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"
PROCESS_LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"


def verbosity_to_logging_level(log_level: int) -> int:
    """Map an integer log level onto a standard logging level.

    0 is WARNING; each step up is one level louder (1 → INFO, 2 → DEBUG) and
    each step down one level quieter. The result is clamped to
    DEBUG..CRITICAL.

    Args:
        log_level: procutil log level (see `procutil.mode.set_log_level`).

    Returns:
        int: A numeric level from the `logging` module.
    """
    level = BASE_LEVEL - 10 * log_level
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def get_process_logger(
    name: str = PROCESS_LOGGER_NAME, stream: TextIO | None = None
) -> Logger:
    """Return a ready-made logger that writes plain lines to stdout.

    Each record is one line stamped with the local date, time and the
    calling file:line, e.g. ``2024/05/01 12:00:00 worker.py:42: started``.
    The logger does not propagate, so it prints the same way whether or not
    the CLI has configured the root logger. Repeated calls return the same
    logger without adding handlers.

    Args:
        name: Logger name.
        stream: Destination stream; defaults to stdout at the time of the
            first call.

    Returns:
        Logger: The configured logger.
    """
    process_logger = logging.getLogger(name)
    if not process_logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=PROCESS_LOG_FORMAT, datefmt=PROCESS_LOG_DATEFMT)
        )
        process_logger.addHandler(handler)
        process_logger.setLevel(logging.DEBUG)
        process_logger.propagate = False
    return process_logger


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr and supports optional color and a debug
    mode. In debug mode the handler is set to DEBUG and includes source
    file/line information; otherwise a short third-party prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    The flight recorder buffers up to `capacity` log records and flushes
    them to the provided file handler when a record at `flush_level` or
    higher is emitted (or on close if `flush_on_close` is True).

    Args:
        path: Destination file path for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer will be flushed.
        flush_on_close: If True, flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    mode: ProcessMode,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary and detailed diagnostics.

    Emits an INFO summary with the application version, console level, debug
    level and profiling state, followed by DEBUG lines with interpreter,
    platform, process, handler, flight-recorder and per-logger details.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        mode: Process mode whose levels and profiling state are reported.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        log_path: Path to the flight-recorder output file, or None.
        flight_recorder: Whether the in-memory flight recorder is enabled.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """
    logger.info(
        "procutil %s: console=%s, debug-level=%d, profiling=%s",
        app_version,
        logging.getLevelName(level),
        mode.debug_level,
        "ON" if mode.profiling_enabled() else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s", dist_version("click"))
    logger.debug("Log level: %d", mode.log_level)
    logger.debug("Profiling rates: %s", mode.profiler.rates.as_dict())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug("Flight recorder: path=%s", str(log_path) if log_path else "<none>")
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
