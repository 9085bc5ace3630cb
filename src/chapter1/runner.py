"""Run an exercise in a fresh interpreter and capture its output."""

from __future__ import annotations

import subprocess
import sys


def run_exercise(module: str) -> str:
    """Run ``python -m module`` and return its standard output.

    Args:
        module: Dotted module path, e.g. ``chapter1.exercise_2``.

    Returns:
        Standard output from execution.

    Raises:
        subprocess.CalledProcessError: If the program exits non-zero.
    """
    result = subprocess.run(
        [sys.executable, "-m", module],
        check=True,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )
    return result.stdout
