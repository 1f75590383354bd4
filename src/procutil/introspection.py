"""Call-stack introspection helpers.

Names are resolved from live frames. Interpreters that do not expose frames
(`inspect.currentframe` returns None) get ``"unknown"`` instead.
"""

from __future__ import annotations

import inspect
import sys
from typing import TYPE_CHECKING, TextIO

import click

if TYPE_CHECKING:
    from types import FrameType

UNKNOWN = "unknown"


def short_function_name(name: str) -> str:
    """Return the last ``/``-separated segment of ``name``."""
    return name.rsplit("/", 1)[-1]


def qualified_name(frame: FrameType) -> str:
    """Return ``<module basename>.<qualified function name>`` for ``frame``."""
    module = frame.f_globals.get("__name__", UNKNOWN).rsplit(".", 1)[-1]
    code = frame.f_code
    return short_function_name(f"{module}.{code.co_qualname}")


def _frame_at(depth: int) -> FrameType | None:
    """Return the frame ``depth`` levels above the caller of this helper."""
    frame = inspect.currentframe()
    try:
        # skip _frame_at itself
        for _ in range(depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        return frame
    finally:
        del frame


def function_name() -> str:
    """Return the name of the function that called `function_name`."""
    frame = _frame_at(1)
    return qualified_name(frame) if frame is not None else UNKNOWN


def caller_name() -> str:
    """Return the name of the caller of the function that called `caller_name`."""
    frame = _frame_at(2)
    return qualified_name(frame) if frame is not None else UNKNOWN


def trace(file: TextIO | None = None) -> None:
    """Print ``<file>:<line> <function>`` for the point `trace` was called from.

    Args:
        file: Stream to write to; defaults to stdout.
    """
    frame = _frame_at(1)
    if frame is None:
        line = UNKNOWN
    else:
        line = f"{frame.f_code.co_filename}:{frame.f_lineno} {qualified_name(frame)}"
    click.echo(line, file=file or sys.stdout)
