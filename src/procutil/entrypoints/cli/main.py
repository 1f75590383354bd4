"""procutil CLI entry point.

Defines the top-level ``procutil`` command (via Click-Extra). Global options
set the process mode (debug level, log level, profiling) and configure
logging before the subcommand runs.

Examples
    $ procutil --version
    $ procutil --debug-level 2 status
    $ procutil -v --profile status
    $ procutil ask "Username?"
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from procutil import __version__
from procutil.config import DEBUG_LEVEL_ENV, PROFILING_ENV, Settings
from procutil.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
    verbosity_to_logging_level,
)
from procutil.mode import get_mode

from .commands import ask, status
from .helpers.logger_levels import parse_logger_levels

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """procutil command-line interface.

    Inspect and exercise the process-wide runtime switches: production or
    development mode, log verbosity and profiling.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Raise the log level by one for each repetition of the option.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Lower the log level by one for each repetition of the option.",
    default=0,
)
@click.option(
    "--debug-level",
    type=int,
    default=0,
    envvar=DEBUG_LEVEL_ENV,
    show_default=True,
    show_envvar=True,
    help=(
        "Debug level: 0 is production, anything above is development mode "
        "(debug log formatting with source paths)."
    ),
)
@click.option(
    "--profile/--no-profile",
    "profiling",
    is_flag=True,
    default=False,
    envvar=PROFILING_ENV,
    show_envvar=True,
    help="Enable heap tracing, CPU sampling and lock contention profiling.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("procutil", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="PROCUTIL_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last log records at DEBUG granularity in memory and write them "
        "to --log-path when a WARNING/ERROR occurs, or on exit with --force-flush."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_logger_levels,
    envvar="PROCUTIL_LOGGER_LEVELS",
    help=(
        "Minimum level for a logger, as NAME=LEVEL. Repeatable "
        "(e.g. -L procutil.profiling=DEBUG) or via PROCUTIL_LOGGER_LEVELS "
        "(comma/space list). procutil.profiling is held at INFO unless overridden."
    ),
    show_envvar=True,
)
@clickx.pass_context
def procutil(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug_level: int,
    profiling: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """procutil command-line interface."""

    # 0) apply the process mode
    mode = get_mode()
    mode.apply_settings(
        Settings(
            debug_level=debug_level,
            log_level=verbose_count - quiet_count,
            profiling=profiling,
        )
    )
    level = verbosity_to_logging_level(mode.log_level)

    handlers: list[Handler] = []

    # 1) console handler
    use_color = ctx.color is not False
    handlers.append(
        config_console_handler(
            level=level, debug_mode=mode.is_development(), color=use_color
        )
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path, flush_on_close=force_flush_flight_recorder
            )
        )

    # 3) root logger
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        mode=mode,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    # 5) teardown after the subcommand returns
    ctx.call_on_close(logging.shutdown)
    ctx.call_on_close(mode.disable_profiling)


procutil.add_command(status)
procutil.add_command(ask)
