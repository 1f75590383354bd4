"""Fixtures for end-to-end CLI tests.

Provides a Click CliRunner and an isolated filesystem per test, and detaches
the console and flight-recorder handlers each invocation installs on the
root logger.
"""

import logging
from logging.handlers import MemoryHandler

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def detach_cli_handlers():
    """Remove root handlers left behind by ``procutil`` invocations."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
