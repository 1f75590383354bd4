"""``-L NAME=LEVEL`` option: per-logger level overrides.

procutil's profiling backends log every rate change and timer transition at
DEBUG, which floods ``-vv`` output. They are held at INFO by default; pass
``-L procutil.profiling=DEBUG`` to see them again. Levels are given by name
(case-insensitive) or number.
"""

import logging
import re

import click

DEFAULT_LOGGER_LEVELS = {"procutil.profiling": logging.INFO}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten an option value (repeated flags or an env var list) into items."""
    if isinstance(value, str):
        value = (value,)
    return [item for chunk in value for item in _SEPARATORS.split(chunk) if item]


def parse_level(text: str) -> int:
    """Convert ``"warning"``, ``"WARNING"`` or ``"30"`` to a logging level.

    Raises:
        click.BadParameter: For unknown names and negative numbers.
    """
    text = text.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {text!r}")
    return level


def parse_logger_levels(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback returning `DEFAULT_LOGGER_LEVELS` updated with overrides.

    Later items win over earlier ones for the same logger name.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL``, the name is
            empty, or the level is invalid.
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _split_items(value):
        name, sep, level = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name] = parse_level(level)
    return levels
