"""
Red-Black Tree with order statistics.

Uses parent pointers and a per-tree sentinel node standing for every absent
child. The sentinel is BLACK, holds no elements and points to itself, so
the fixup loops never need to test for a missing node.
"""

import logging
from typing import Any

from ordtree.models.exceptions import InvariantViolationError
from ordtree.models.node import Color, Node
from ordtree.models.ordering import Comparator
from ordtree.models.sortedcontainers.base_tree import BaseTree

logger = logging.getLogger(__name__)


class RedBlackTree(BaseTree):
    """
    Red-Black Tree implementation of OrderedCollection.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from root to leaf has same number of black nodes
    """

    def __init__(
        self, compare: Comparator | None = None, allow_duplicates: bool = False
    ) -> None:
        super().__init__(compare, allow_duplicates)
        self._nil = self._create_nil()
        self._root = self._nil

    def insert(self, key: Any) -> None:
        """Insert key. O(log N)"""
        parent = self._nil
        current = self._root

        # Find insertion point
        while current is not self._nil:
            parent = current
            cmp = self._compare(key, current.key)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                if self._allow_duplicates:
                    current.count += 1
                    self._update_size_up(current)
                return

        # Insert new node
        node = Node(key=key, left=self._nil, right=self._nil, parent=parent)
        if parent is self._nil:
            self._root = node
        elif self._compare(key, parent.key) < 0:
            parent.left = node
        else:
            parent.right = node

        self._update_size_up(node)
        self._fix_insert(node)

    def delete(self, key: Any) -> None:
        """Remove one occurrence of key. O(log N)"""
        target = self._find_node(key)
        if target is self._nil:
            logger.debug(f"delete: key {key!r} not present, nothing to do")
            return

        if target.count > 1:
            target.count -= 1
            self._update_size_up(target)
            return

        self._delete_node(target)

    def _create_nil(self) -> Node:
        nil = Node(key=None, count=0, size=0, height=0, color=Color.BLACK)
        nil.left = nil.right = nil.parent = nil
        return nil

    def _update_size_up(self, node: Node, stop: Node | None = None) -> None:
        """Refresh cached sizes from node up to the root, or up to (excluding) stop."""
        while node is not self._nil and node is not stop:
            self._update_size(node)
            node = node.parent

    def _rotate_left(self, node: Node) -> None:
        """Left rotation."""
        #    N                  S
        #   / \                / \
        #  L   S     ==>      N   R
        #     / \            / \
        #    M   R          L   M
        right_child = node.right

        node.right = right_child.left
        if right_child.left is not self._nil:
            right_child.left.parent = node

        right_child.parent = node.parent

        if node.parent is self._nil:
            self._root = right_child
        elif node is node.parent.left:
            node.parent.left = right_child
        else:
            node.parent.right = right_child

        right_child.left = node
        node.parent = right_child

        self._update_size(node)
        self._update_size(right_child)

    def _rotate_right(self, node: Node) -> None:
        """Right rotation."""
        left_child = node.left

        node.left = left_child.right
        if left_child.right is not self._nil:
            left_child.right.parent = node

        left_child.parent = node.parent

        if node.parent is self._nil:
            self._root = left_child
        elif node is node.parent.right:
            node.parent.right = left_child
        else:
            node.parent.left = left_child

        left_child.right = node
        node.parent = left_child

        self._update_size(node)
        self._update_size(left_child)

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        while node.parent.color == Color.RED:
            grandparent = node.parent.parent
            if node.parent is grandparent.left:
                uncle = grandparent.right

                if uncle.color == Color.RED:
                    # Case 1: Uncle is red, push red up
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is node.parent.right:
                        # Case 2: Node is the inner child
                        node = node.parent
                        self._rotate_left(node)

                    # Case 3: Node is the outer child
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grandparent.left

                if uncle.color == Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._rotate_right(node)

                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_left(node.parent.parent)

        self._root.color = Color.BLACK

    def _transplant(self, node: Node, child: Node) -> None:
        """Replace the subtree rooted at node with the one rooted at child."""
        if node.parent is self._nil:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child

        # Set even on the sentinel: the delete fixup walks up from it
        child.parent = node.parent

    def _delete_node(self, node: Node) -> None:
        """Unlink a node holding a single occurrence."""
        removed_color = node.color

        if node.left is self._nil:
            replacement = node.right
            self._transplant(node, node.right)
            self._update_size_up(replacement.parent)
        elif node.right is self._nil:
            replacement = node.left
            self._transplant(node, node.left)
            self._update_size_up(replacement.parent)
        else:
            # Node has two children - the successor takes its place
            successor = self._find_min(node.right)
            removed_color = successor.color
            replacement = successor.right

            if successor.parent is node:
                replacement.parent = successor
            else:
                self._transplant(successor, successor.right)
                self._update_size_up(replacement.parent, stop=node)
                successor.right = node.right
                successor.right.parent = successor

            self._transplant(node, successor)
            successor.left = node.left
            successor.left.parent = successor
            successor.color = node.color
            self._update_size_up(successor)

        if removed_color == Color.BLACK:
            self._fix_delete(replacement)

    def _fix_delete(self, node: Node) -> None:
        """Fix Red-Black Tree properties after delete."""
        while node is not self._root and node.color == Color.BLACK:
            if node is node.parent.left:
                sibling = node.parent.right

                if sibling.color == Color.RED:
                    # Case 1: Sibling is red
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._rotate_left(node.parent)
                    sibling = node.parent.right

                if sibling.left.color == Color.BLACK and sibling.right.color == Color.BLACK:
                    # Case 2: Both of sibling's children are black
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.right.color == Color.BLACK:
                        # Case 3: Near child red, far child black
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = node.parent.right

                    # Case 4: Far child red
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._rotate_left(node.parent)
                    node = self._root
            else:
                sibling = node.parent.left

                if sibling.color == Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._rotate_right(node.parent)
                    sibling = node.parent.left

                if sibling.left.color == Color.BLACK and sibling.right.color == Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.left.color == Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = node.parent.left

                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._rotate_right(node.parent)
                    node = self._root

        node.color = Color.BLACK

    def check_invariants(self) -> None:
        """
        Verify order, size and all Red-Black properties.

        Raises:
            InvariantViolationError: On the first violated invariant found.
        """
        if self._nil.color != Color.BLACK or self._nil.size != 0:
            raise InvariantViolationError("sentinel", None, "sentinel must be black and empty")
        if self._root.color != Color.BLACK:
            raise InvariantViolationError("root-color", self._root.key, "root is red")
        if self._root is not self._nil and self._root.parent is not self._nil:
            raise InvariantViolationError("parent", self._root.key, "root has a parent")

        super().check_invariants()
        self._black_height(self._root)

    def _check_node(self, node: Node) -> None:
        for child in (node.left, node.right):
            if child is self._nil:
                continue
            if child.parent is not node:
                raise InvariantViolationError(
                    "parent", child.key, f"parent pointer does not reference {node.key!r}"
                )
            if node.color == Color.RED and child.color == Color.RED:
                raise InvariantViolationError("red-red", node.key, f"red child {child.key!r}")

    def _black_height(self, root: Node) -> int:
        """Black nodes on every path below root, sentinel included."""
        # Black heights of finished subtrees, keyed by node identity
        heights: dict[int, int] = {}
        stack = [(root, False)]
        while stack:
            node, children_done = stack.pop()
            if node is self._nil:
                continue
            if not children_done:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
                continue

            left = heights.pop(id(node.left), 1)
            right = heights.pop(id(node.right), 1)
            if left != right:
                raise InvariantViolationError(
                    "black-height", node.key, f"left black height {left}, right {right}"
                )
            heights[id(node)] = left + (1 if node.color == Color.BLACK else 0)

        return heights.get(id(root), 1)
