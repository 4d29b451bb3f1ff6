"""
In-memory ordered-collection engine.

This package provides binary search trees with order statistics:
- insert(key) / delete(key) - duplicate-aware mutation
- search(key) - occurrence count, 0 when absent
- rank(key) / select(k) - 1-based order statistics over the multiset
- in_order / pre_order / post_order / level_order - traversals

Three balancing disciplines share one interface: unbalanced
(BinarySearchTree), height-balanced (AVLTree) and color-balanced
(RedBlackTree).
"""

from ordtree.engine.factory import TreeConfig, TreeKind, create_tree
from ordtree.models.exceptions import InvariantViolationError
from ordtree.models.ordering import natural_order, reverse_order
from ordtree.models.sortedcontainers import AVLTree, BinarySearchTree, RedBlackTree

__all__ = [
    "AVLTree",
    "BinarySearchTree",
    "InvariantViolationError",
    "RedBlackTree",
    "TreeConfig",
    "TreeKind",
    "create_tree",
    "natural_order",
    "reverse_order",
]
