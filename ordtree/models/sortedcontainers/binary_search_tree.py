"""
Binary search tree with order statistics and a pluggable balancer.

Insert and delete descend iteratively, recording the visited path. After
the structural change the path is walked back up: the balancer refreshes
(and possibly rotates) each node, and the returned subtree root is linked
back into its parent. Without a balancer strategy the tree is unbalanced
and its depth follows the insertion order.
"""

import logging
from typing import Any

from ordtree.models.node import Node
from ordtree.models.ordering import Comparator
from ordtree.models.sortedcontainers.balancers import Balancer
from ordtree.models.sortedcontainers.base_tree import BaseTree

logger = logging.getLogger(__name__)


class BinarySearchTree(BaseTree):
    """
    Binary search tree implementation of OrderedCollection.

    Args:
        compare: Three-way comparator. Defaults to the keys' natural order.
        allow_duplicates: Fold equal keys into one node's count.
        balancer: Post-mutation hook restoring a structural invariant.
            Defaults to no rebalancing.
    """

    def __init__(
        self,
        compare: Comparator | None = None,
        allow_duplicates: bool = False,
        balancer: Balancer | None = None,
    ) -> None:
        super().__init__(compare, allow_duplicates)
        self._balancer = balancer or Balancer()

    def insert(self, key: Any) -> None:
        """Insert key. O(height)"""
        path: list[Node] = []
        node = self._root
        cmp = 0

        while node is not None:
            path.append(node)
            cmp = self._compare(key, node.key)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            elif self._allow_duplicates:
                node.count += 1
                break
            else:
                return
        else:
            new_node = Node(key=key)
            if not path:
                self._root = new_node
                return
            if cmp < 0:
                path[-1].left = new_node
            else:
                path[-1].right = new_node

        self._rebalance_path(path)

    def delete(self, key: Any) -> None:
        """Remove one occurrence of key. O(height)"""
        path: list[Node] = []
        node = self._root

        while node is not None:
            cmp = self._compare(key, node.key)
            if cmp == 0:
                break
            path.append(node)
            node = node.left if cmp < 0 else node.right

        if node is None:
            logger.debug(f"delete: key {key!r} not present, nothing to do")
            return

        if node.count > 1:
            node.count -= 1
            path.append(node)
        elif node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            self._replace_child(path[-1] if path else None, node, child)
        else:
            # Two children: take over the in-order successor's key and whole
            # count, then splice the successor out of the right subtree.
            path.append(node)
            successor = node.right
            while successor.left is not None:
                path.append(successor)
                successor = successor.left

            node.key = successor.key
            node.count = successor.count
            self._replace_child(path[-1], successor, successor.right)

        self._rebalance_path(path)

    def _replace_child(self, parent: Node | None, child: Node, replacement: Node | None) -> None:
        """Link replacement into the slot of parent that holds child."""
        if parent is None:
            self._root = replacement
        elif parent.left is child:
            parent.left = replacement
        else:
            parent.right = replacement

    def _rebalance_path(self, path: list[Node]) -> None:
        """Rebalance path nodes bottom-up, relinking each returned subtree root."""
        for depth in range(len(path) - 1, -1, -1):
            node = path[depth]
            subtree = self._balancer.rebalance(node)
            if subtree is not node:
                self._replace_child(path[depth - 1] if depth else None, node, subtree)

    def _check_node(self, node: Node) -> None:
        self._balancer.check(node)
