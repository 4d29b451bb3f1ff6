"""
Custom exceptions for the ordered-tree engine.
"""

from typing import Any


class InvariantViolationError(Exception):
    """
    Raised when a structural invariant of a tree does not hold.

    A correct tree never raises this; it indicates a defect in a balancer
    or in the bookkeeping of cached subtree metadata.
    """

    def __init__(self, invariant: str, key: Any, detail: str):
        """
        Initialize violation error.

        Args:
            invariant: Name of the violated invariant (e.g. "order", "size").
            key: Key of the node where the violation was detected.
            detail: Human readable description of the mismatch.
        """
        self.invariant = invariant
        self.key = key
        self.detail = detail
        super().__init__(f"{invariant} invariant violated at key {key!r}: {detail}")
