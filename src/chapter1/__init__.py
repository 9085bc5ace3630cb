"""chapter1: two small exercises on comparison and divisibility."""

from __future__ import annotations

from chapter1.constexpr import NotConstantError, constexpr, fold, is_constant
from chapter1.divisibility import DivisibilityRun, multiples, report
from chapter1.minimum import select_min

__all__ = [
    "DivisibilityRun",
    "NotConstantError",
    "constexpr",
    "fold",
    "is_constant",
    "multiples",
    "report",
    "select_min",
]
