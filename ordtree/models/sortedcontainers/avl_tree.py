"""
AVL Tree: height-balanced binary search tree with order statistics.
"""

from ordtree.models.ordering import Comparator
from ordtree.models.sortedcontainers.balancers import HeightBalancer
from ordtree.models.sortedcontainers.binary_search_tree import BinarySearchTree


class AVLTree(BinarySearchTree):
    """
    AVL Tree implementation of OrderedCollection.

    Properties maintained:
    1. The heights of the two child subtrees of any node differ by at most 1
    2. Cached heights and sizes match the subtree below each node

    Every insert and delete performs O(log N) rotations at most.
    """

    def __init__(
        self, compare: Comparator | None = None, allow_duplicates: bool = False
    ) -> None:
        super().__init__(compare, allow_duplicates, balancer=HeightBalancer())
