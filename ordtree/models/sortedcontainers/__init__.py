"""
Ordered tree implementations for the collection engine.
"""

from ordtree.models.sortedcontainers.avl_tree import AVLTree
from ordtree.models.sortedcontainers.binary_search_tree import BinarySearchTree
from ordtree.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["AVLTree", "BinarySearchTree", "RedBlackTree"]
