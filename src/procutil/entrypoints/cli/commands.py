"""procutil subcommands.

- ``procutil status`` prints the process mode and environment as JSON.
- ``procutil ask PROMPT`` reads one line (``--hidden`` for passwords) and
  prints it as ``{"value": ...}``.
"""

import logging

import click

from procutil.environment import is_kubernetes_pod
from procutil.errors import TerminalReadError
from procutil.mode import get_mode
from procutil.terminal import print_as_json, read_line, read_password

from .helpers import error, warn

logger = logging.getLogger(__name__)


@click.command()
def status() -> None:
    """Print debug level, log level, profiling rates and environment as JSON."""
    mode = get_mode()
    if mode.is_development():
        warn(f"Development mode (debug level {mode.debug_level}).")
    data = mode.snapshot()
    data["kubernetes_pod"] = is_kubernetes_pod()
    print_as_json(data)


@click.command()
@click.argument("prompt")
@click.option(
    "--hidden",
    is_flag=True,
    default=False,
    help="Read without echoing input (password entry).",
)
@click.pass_context
def ask(ctx: click.Context, prompt: str, hidden: bool) -> None:
    """Prompt on stderr, read one line and print it as JSON."""
    try:
        value = read_password(prompt) if hidden else read_line(prompt)
    except TerminalReadError as e:
        logger.debug("read failed", exc_info=True)
        error(str(e))
        ctx.exit(1)
    print_as_json({"value": value})
