"""The smaller of two integers."""

from __future__ import annotations

from chapter1.constexpr import constexpr


@constexpr
def select_min(a: int, b: int) -> int:
    """Return ``a`` if it is strictly less than ``b``, otherwise ``b``."""
    if a < b:
        return a
    else:
        return b
