"""End-to-end tests for the top-level ``procutil`` command options.

These tests invoke ``procutil status`` under various global flags and
environment variables and check the process mode it reports, the console
logging it produces and the flight-recorder file it writes.
"""

import logging
from pathlib import Path

import pytest

from procutil import __version__
from procutil.entrypoints.cli.main import procutil
from procutil.mode import get_mode
from procutil.profiling import ENABLED_RATES

from tests.helpers.cli_output import json_document

pytestmark = [pytest.mark.e2e]

# pylint: disable=unused-argument, redefined-outer-name


def test_status_defaults(runner, fs):
    """Without options the process is in production with profiling off."""
    result = runner.invoke(procutil, ["status"], env={"KUBERNETES_PORT": None})
    assert result.exit_code == 0, result.output
    data = json_document(result.output)
    assert data["debug_level"] == 0
    assert data["log_level"] == 0
    assert data["production"] is True
    assert data["profiling"] is False
    assert data["kubernetes_pod"] is False


def test_status_reports_kubernetes_pod(runner, fs):
    """An empty KUBERNETES_PORT still counts as running in a pod."""
    result = runner.invoke(procutil, ["status"], env={"KUBERNETES_PORT": ""})
    assert result.exit_code == 0, result.output
    assert json_document(result.output)["kubernetes_pod"] is True


@pytest.mark.parametrize(
    ("env", "cli_args"),
    [({}, ["--debug-level", "2"]), ({"PROCUTIL_DEBUG_LEVEL": "2"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_debug_level_enters_development(runner, fs, env, cli_args):
    """A positive debug level switches to development mode and warns about it."""
    result = runner.invoke(procutil, cli_args + ["status"], env=env)
    assert result.exit_code == 0, result.output
    data = json_document(result.output)
    assert data["debug_level"] == 2
    assert data["development"] is True
    assert "Development mode (debug level 2)." in result.output


@pytest.mark.parametrize(
    ("env", "cli_args"),
    [({}, ["--profile"]), ({"PROCUTIL_PROFILING": "1"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_profile_enables_all_knobs(runner, fs, env, cli_args):
    """--profile turns every knob on for the command and off afterwards."""
    result = runner.invoke(procutil, cli_args + ["status"], env=env)
    assert result.exit_code == 0, result.output
    data = json_document(result.output)
    assert data["profiling"] is True
    assert data["profiling_rates"] == ENABLED_RATES.as_dict()
    assert not get_mode().profiling_enabled()


def test_profile_survives_debug_level(runner, fs):
    """Profiling requested alongside a debug level stays on."""
    result = runner.invoke(procutil, ["--debug-level", "1", "--profile", "status"])
    assert result.exit_code == 0, result.output
    assert json_document(result.output)["profiling"] is True


@pytest.mark.parametrize(("cli_args", "expected"), [(["-vv"], 2), (["-q"], -1), (["-vv", "-q"], 1)])
def test_verbosity_sets_log_level(runner, fs, cli_args, expected):
    """-v raises and -q lowers the log level; they compose."""
    result = runner.invoke(procutil, cli_args + ["status"])
    assert result.exit_code == 0, result.output
    assert json_document(result.output)["log_level"] == expected


def test_vv_shows_startup_diagnostics(runner, fs):
    """-vv shows the DEBUG startup diagnostics on the console."""
    result = runner.invoke(procutil, ["-vv", "status"])
    assert result.exit_code == 0, result.output
    assert "Python:" in result.output


def test_default_hides_startup_summary(runner, fs):
    """The INFO startup summary is hidden at the default WARNING level."""
    result = runner.invoke(procutil, ["status"])
    assert result.exit_code == 0, result.output
    assert f"procutil {__version__}" not in result.output


def test_invalid_logger_level_is_usage_error(runner, fs):
    """A malformed -L value is rejected by Click."""
    result = runner.invoke(procutil, ["-L", "procutil.mode=LOUD", "status"])
    assert result.exit_code == 2


@pytest.fixture
def profiling_logger():
    """The profiling logger, with its level reset after the test."""
    target = logging.getLogger("procutil.profiling")
    yield target
    target.setLevel(logging.NOTSET)


def test_profiling_logs_held_at_info_by_default(runner, fs, profiling_logger):
    """Profiling debug chatter is muted unless -L asks for it."""
    result = runner.invoke(procutil, ["-vv", "status"])
    assert result.exit_code == 0, result.output
    assert profiling_logger.level == logging.INFO


def test_logger_level_override(runner, fs, profiling_logger):
    """-L replaces the default level for the named logger."""
    result = runner.invoke(procutil, ["-L", "procutil.profiling=DEBUG", "status"])
    assert result.exit_code == 0, result.output
    assert profiling_logger.level == logging.DEBUG


def test_logger_level_from_env(runner, fs, profiling_logger):
    """PROCUTIL_LOGGER_LEVELS accepts a comma separated list."""
    result = runner.invoke(
        procutil,
        ["status"],
        env={"PROCUTIL_LOGGER_LEVELS": "procutil.profiling=ERROR, procutil.mode=DEBUG"},
    )
    assert result.exit_code == 0, result.output
    assert profiling_logger.level == logging.ERROR
    logging.getLogger("procutil.mode").setLevel(logging.NOTSET)


def test_flight_recorder_force_flush(runner, fs):
    """--force-flush writes the buffered startup diagnostics on exit."""
    log_path = "flight_recorder.log"
    result = runner.invoke(
        procutil, ["--log-path", log_path, "--force-flush", "status"]
    )
    assert result.exit_code == 0, result.output
    content = Path(log_path).read_text(encoding="utf-8")
    assert f"procutil {__version__}: console=WARNING, debug-level=0" in content
    assert "Python:" in content


def test_flight_recorder_can_be_disabled(runner, fs):
    """--no-flight-recorder never creates the log file."""
    log_path = "flight_recorder.log"
    result = runner.invoke(
        procutil, ["--log-path", log_path, "--no-flight-recorder", "status"]
    )
    assert result.exit_code == 0, result.output
    assert not Path(log_path).exists()
