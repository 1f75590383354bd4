"""CLI helpers for procutil.

Message emitters that write to stderr with emoji→ASCII fallbacks, and the
``-L NAME=LEVEL`` logger-level option callback.
"""

from .logger_levels import DEFAULT_LOGGER_LEVELS, parse_logger_levels
from .messages import error, warn

__all__ = ["DEFAULT_LOGGER_LEVELS", "error", "parse_logger_levels", "warn"]
