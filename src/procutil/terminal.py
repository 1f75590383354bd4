"""Terminal input and output helpers.

Prompts go to **stderr** so stdout stays machine-readable; `print_as_json`
writes one compact JSON document per line to **stdout**.
"""

from __future__ import annotations

import getpass
import json
import logging
import sys
import warnings
from typing import Any, TextIO

import click

from procutil.errors import TerminalReadError

logger = logging.getLogger(__name__)

LINE_END_CHARS = " \r\n"  # pragma: no mutate


def print_as_json(value: Any, *, file: TextIO | None = None) -> None:
    """Write ``value`` as compact JSON followed by a newline.

    Values `json` cannot encode (unsupported types, circular references,
    out-of-range floats) are logged at DEBUG and nothing is written.

    Args:
        value: Any value the `json` module can encode.
        file: Stream to write to; defaults to stdout.
    """
    try:
        document = json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        logger.debug("Dropped JSON output: %s", e)
        return
    click.echo(document, file=file or sys.stdout)


def read_password(prompt: str) -> str:
    """Prompt on stderr and read one line with terminal echo disabled.

    The password is returned as typed (no trimming) and a newline always
    follows it on stderr, also when `getpass` falls back to an echoing read
    because no terminal is attached. Errors from the terminal driver
    (including `KeyboardInterrupt` and `EOFError`) propagate unchanged.
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", getpass.GetPassWarning)
        password = getpass.getpass(f"{prompt} ", stream=sys.stderr)
    fallback = [w for w in caught if issubclass(w.category, getpass.GetPassWarning)]
    if fallback:
        # getpass only writes the newline itself when it controls the terminal
        click.echo(err=True)
        logger.warning("Password input was echoed: %s", fallback[0].message)
    return password


def read_line(prompt: str, *, stream: TextIO | None = None) -> str:
    """Prompt on stderr and read one line from stdin.

    Trailing spaces, carriage returns and newlines are removed; leading
    whitespace is kept. Reaching end of input returns whatever was read
    before it (possibly an empty string).

    Args:
        prompt: Text written to stderr, followed by a space.
        stream: Stream to read from; defaults to stdin.

    Returns:
        str: The trimmed line.

    Raises:
        TerminalReadError: If the underlying read fails.
    """
    click.echo(f"{prompt} ", nl=False, err=True)
    try:
        line = (stream or sys.stdin).readline()
    except (OSError, UnicodeDecodeError) as e:
        raise TerminalReadError(prompt, str(e)) from e
    return line.rstrip(LINE_END_CHARS)
