"""Enumerate and report the multiples of a divisor within an inclusive range."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DivisibilityRun:
    """One reporting pass.

    Attributes:
        low: First value of the range (inclusive).
        high: Last value of the range (inclusive).
        divisor: Positive divisor each value is tested against.
    """

    low: int
    high: int
    divisor: int

    def __post_init__(self) -> None:
        _check_divisor(self.divisor)

    @property
    def header(self) -> str:
        return (
            f"All numbers divisible by {self.divisor} "
            f"within the interval [{self.low},{self.high}]"
        )


def _check_divisor(divisor: int) -> None:
    if divisor <= 0:
        msg = f"Divisor must be positive, got {divisor}"
        raise ValueError(msg)


def multiples(low: int, high: int, divisor: int) -> Iterator[int]:
    """Yield the values in ``[low, high]`` exactly divisible by ``divisor``.

    Values are produced lazily in ascending order.

    Raises:
        ValueError: If ``divisor`` is not positive.
    """
    _check_divisor(divisor)
    return _multiples(low, high, divisor)


def _multiples(low: int, high: int, divisor: int) -> Iterator[int]:
    for i in range(low, high + 1):
        if i % divisor == 0:
            yield i


def report(run: DivisibilityRun, write: Callable[[str], None] = print) -> int:
    """Write one line per match, then the total, and return the count."""
    logger.info(run.header)
    count = 0
    for i in multiples(run.low, run.high, run.divisor):
        write(f"{i} is divisible by {run.divisor}")
        count += 1
    write(f"At the end we have {count} numbers divisible by {run.divisor}")
    return count
