"""
Ordering policies: three-way comparators over keys.

A comparator returns a negative number when ``a`` sorts before ``b``, zero
when they are equal and a positive number otherwise. It must describe a
total order and stay consistent for the lifetime of the tree using it;
violations are not detected.
"""

from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare keys by their own ``<`` and ``>`` operators."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def reverse_order(a: Any, b: Any) -> int:
    """Natural order, descending."""
    return natural_order(b, a)
