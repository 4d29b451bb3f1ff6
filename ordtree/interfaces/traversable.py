"""
Traversable protocol for trees that expose their keys in traversal orders.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class Traversable(ABC):
    """
    Protocol for trees whose keys can be read in a traversal order.

    Every order expands duplicate counts: a key stored with count ``n``
    appears ``n`` times consecutively.

    Implementations must support:
    - Full in-order iteration via __iter__
    - Async in-order iteration via __aiter__
    - Materialized in-order, pre-order, post-order and level-order lists
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all keys in sorted order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all keys in sorted order."""
        pass

    @abstractmethod
    def in_order(self) -> list[Any]:
        """
        Return keys in sorted (left, node, right) order.

        Returns:
            A new list; mutating it does not affect the tree.
        """
        pass

    @abstractmethod
    def pre_order(self) -> list[Any]:
        """Return keys in (node, left, right) order."""
        pass

    @abstractmethod
    def post_order(self) -> list[Any]:
        """Return keys in (left, right, node) order."""
        pass

    @abstractmethod
    def level_order(self) -> list[Any]:
        """Return keys breadth-first, left to right within a level."""
        pass
