"""Configuration utilities for procutil.

This module centralizes the environment variables procutil understands and
the small helpers that parse them. Nothing is read at import time; callers
opt in through `load_settings` (or `procutil.mode.configure_from_env`).
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from procutil.errors import InvalidSettingError

DEBUG_LEVEL_ENV = "PROCUTIL_DEBUG_LEVEL"  # pragma: no mutate
LOG_LEVEL_ENV = "PROCUTIL_LOG_LEVEL"  # pragma: no mutate
PROFILING_ENV = "PROCUTIL_PROFILING"  # pragma: no mutate

TRUTHY = frozenset({"1", "true", "yes", "on"})
FALSY = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    """Process mode settings as read from the environment.

    Attributes:
        debug_level: 0 for production, >0 for development.
        log_level: Verbosity counter, independent of `debug_level`.
        profiling: Whether profiling should be switched on after the debug
            level has been applied.
    """

    debug_level: int = 0
    log_level: int = 0
    profiling: bool = False


def get_env_int(name: str, default: int, environ: Mapping[str, str] | None = None) -> int:
    """Read an integer from the environment.

    Args:
        name: Environment variable name.
        default: Value returned when the variable is unset or blank.
        environ: Mapping to read from; defaults to `os.environ`.

    Returns:
        The parsed integer, or `default`.

    Raises:
        InvalidSettingError: If the variable is set but not an integer.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise InvalidSettingError(name, raw, "an integer") from e


def get_env_flag(
    name: str, default: bool = False, environ: Mapping[str, str] | None = None
) -> bool:
    """Read a boolean flag (1/true/yes/on, 0/false/no/off) from the environment.

    Raises:
        InvalidSettingError: If the value is not a recognised flag.
    """
    environ = os.environ if environ is None else environ
    if (raw := environ.get(name)) is None:
        return default
    value = raw.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    raise InvalidSettingError(name, raw, "a boolean flag")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build `Settings` from `PROCUTIL_*` environment variables."""
    return Settings(
        debug_level=get_env_int(DEBUG_LEVEL_ENV, 0, environ),
        log_level=get_env_int(LOG_LEVEL_ENV, 0, environ),
        profiling=get_env_flag(PROFILING_ENV, False, environ),
    )
