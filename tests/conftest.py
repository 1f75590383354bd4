"""Global pytest fixtures for procutil."""

import pytest

from procutil.mode import get_mode
from procutil.profiling import get_profiler


@pytest.fixture(autouse=True)
def reset_process_mode():
    """Return the process-wide mode and profiler to their startup state.

    The module-level API mutates process-wide state; every test starts and
    ends in production mode with profiling off and no recorded samples.
    """
    yield
    mode = get_mode()
    mode.set_debug_level(0)
    mode.set_log_level(0)
    profiler = get_profiler()
    profiler.disable()
    profiler.cpu.clear()
    profiler.contention.clear()
