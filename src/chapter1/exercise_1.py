"""Exercise 1: the smaller of two integers, at run time and at compile time."""

from __future__ import annotations

import logging
import sys

from chapter1.config import (
    COMPILE_TIME_CONSTANTS,
    GREETING,
    RUNTIME_OPERANDS,
    configure_logging,
)
from chapter1.constexpr import fold
from chapter1.minimum import select_min

logger = logging.getLogger(__name__)


def main() -> int:
    """Print the greeting and evaluate ``select_min`` both ways."""
    print(GREETING)

    x, y = RUNTIME_OPERANDS
    u = select_min(x, y)
    v = fold("select_min(a, b)", COMPILE_TIME_CONSTANTS)

    logger.info("select_min(%d, %d) = %d at run time", x, y, u)
    logger.info("select_min(a, b) = %d at compile time", v)
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
