"""Shared constants and logging setup for the chapter1 exercises."""

from __future__ import annotations

import logging
from pathlib import Path

APP_NAME = "chapter1"

# Section headers are logged at INFO; keep them off stderr unless asked.
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

CATALOG_PATH = Path(__file__).parent / "exercises.yaml"

# exercise_1
GREETING = "Hello Universe"
RUNTIME_OPERANDS = (1, 2)
COMPILE_TIME_CONSTANTS = {"a": 1, "b": 4}

# exercise_2: (low, high, divisor)
THREES = (1, 30, 3)
ELEVENS = (1, 100, 11)


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging to stderr.

    Args:
        level: Level name or number. Defaults to ``DEFAULT_LOG_LEVEL``.
    """
    if level is None:
        level = DEFAULT_LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
