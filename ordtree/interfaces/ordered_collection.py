"""
OrderedCollection abstract base class for order-statistic trees.
"""

from abc import abstractmethod
from typing import Any

from ordtree.interfaces.traversable import Traversable


class OrderedCollection(Traversable):
    """
    Abstract base class for ordered multiset containers.

    Provides insert, delete and search plus order statistics (rank/select).
    Inherits traversal capabilities from Traversable.

    Implementations:
    - BinarySearchTree: Unbalanced, O(N) worst case
    - AVLTree: Height-balanced, O(log N)
    - RedBlackTree: Color-balanced, O(log N)
    """

    @abstractmethod
    def insert(self, key: Any) -> None:
        """
        Insert a key.

        An equal key already present is ignored, or has its occurrence
        count incremented when duplicates are allowed.

        Args:
            key: The key to insert.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> None:
        """
        Remove one occurrence of a key.

        Deleting an absent key is a silent no-op.

        Args:
            key: The key to remove.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def search(self, key: Any) -> int:
        """
        Look up a key.

        Args:
            key: The key to look up.

        Returns:
            The number of stored occurrences, 0 if the key is absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def rank(self, key: Any) -> int:
        """
        Return the 1-based position of a key among all stored elements.

        A key stored ``n`` times occupies ``n`` consecutive ranks; the
        first of them is returned.

        Args:
            key: The key to rank.

        Returns:
            The rank, or 0 if the key is absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def select(self, k: int) -> Any | None:
        """
        Return the key at 1-based position ``k``.

        Args:
            k: Position in sorted order, counting duplicates.

        Returns:
            The key, or None if k is outside [1, size()].

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored elements, duplicates included.

        Time complexity: O(1)
        """
        pass
