"""Startup behavior: importing procutil switches profiling off.

Runs a fresh interpreter with ``PYTHONTRACEMALLOC`` set so tracemalloc is
already tracing before procutil is imported.
"""

import os
import subprocess
import sys


def test_import_forces_profiling_off():
    """After import, profiling reads as off and tracemalloc has been stopped."""
    code = (
        "import tracemalloc\n"
        "assert tracemalloc.is_tracing()\n"
        "import procutil\n"
        "print(procutil.profiling_enabled(), tracemalloc.is_tracing())\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        env={**os.environ, "PYTHONTRACEMALLOC": "1"},
        capture_output=True,
        text=True,
        check=True,
    )
    assert result.stdout.split() == ["False", "False"]
