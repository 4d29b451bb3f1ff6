"""
Query, traversal and validation layer shared by every tree variant.

Subclasses own the structural mutation (insert/delete) and decide what the
absent marker is: ``None`` for BinarySearchTree and AVLTree, a per-tree sentinel
node for the Red-Black Tree. Everything here reads cached ``size`` fields
and never recomputes them.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Any

from ordtree.interfaces.ordered_collection import OrderedCollection
from ordtree.models.exceptions import InvariantViolationError
from ordtree.models.node import Node
from ordtree.models.ordering import Comparator, natural_order
from ordtree.models.sortedcontainers import traversal


class BaseTree(OrderedCollection):
    """
    Base class for binary search trees with order statistics.

    Args:
        compare: Three-way comparator. Defaults to the keys' natural order.
        allow_duplicates: Fold equal keys into one node's count instead of
            ignoring repeated inserts.
    """

    def __init__(
        self, compare: Comparator | None = None, allow_duplicates: bool = False
    ) -> None:
        self._compare: Comparator = compare or natural_order
        self._allow_duplicates = allow_duplicates
        self._nil: Node | None = None
        self._root: Node | None = None

    @property
    def allow_duplicates(self) -> bool:
        return self._allow_duplicates

    def search(self, key: Any) -> int:
        """Return the occurrence count of key. O(log N)"""
        node = self._find_node(key)
        return node.count if node is not self._nil else 0

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not self._nil

    def size(self) -> int:
        return self._size_of(self._root)

    def rank(self, key: Any) -> int:
        """1-based rank of key counting duplicates, 0 if absent. O(log N)"""
        node = self._root
        preceding = 0
        while node is not self._nil:
            cmp = self._compare(key, node.key)
            if cmp == 0:
                return preceding + self._size_of(node.left) + 1
            if cmp < 0:
                node = node.left
            else:
                preceding += self._size_of(node.left) + node.count
                node = node.right
        return 0

    def select(self, k: int) -> Any | None:
        """Key at 1-based position k, None if out of range. O(log N)"""
        if k <= 0 or k > self.size():
            return None

        node = self._root
        while node is not self._nil:
            left_size = self._size_of(node.left)
            if k <= left_size:
                node = node.left
            elif k <= left_size + node.count:
                return node.key
            else:
                k -= left_size + node.count
                node = node.right
        return None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[Any]:
        return traversal.InOrderIterator(self._root, self._nil)

    def __aiter__(self) -> AsyncIterator[Any]:
        return traversal.AsyncInOrderIterator(self._root, self._nil)

    def in_order(self) -> list[Any]:
        return traversal.in_order(self._root, self._nil)

    def pre_order(self) -> list[Any]:
        return traversal.pre_order(self._root, self._nil)

    def post_order(self) -> list[Any]:
        return traversal.post_order(self._root, self._nil)

    def level_order(self) -> list[Any]:
        return traversal.level_order(self._root, self._nil)

    def check_invariants(self) -> None:
        """
        Verify every structural invariant of the tree.

        Checks BST order, cached sizes and duplicate folding for all
        variants, plus the variant-specific balance rules via
        ``_check_node``.

        Raises:
            InvariantViolationError: On the first violated invariant found.
        """
        self._check_subtree(self._root)

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key, or return the absent marker."""
        current = self._root
        while current is not self._nil:
            cmp = self._compare(key, current.key)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                return current
        return current

    def _find_min(self, node: Node | None) -> Node | None:
        """Find minimum node in a subtree (leftmost node)."""
        if node is self._nil:
            return node
        while node.left is not self._nil:
            node = node.left
        return node

    def _size_of(self, node: Node | None) -> int:
        return 0 if node is self._nil else node.size

    def _update_size(self, node: Node | None) -> None:
        if node is self._nil:
            return
        node.size = node.count + self._size_of(node.left) + self._size_of(node.right)

    def _check_subtree(self, root: Node | None) -> None:
        """
        Validate a subtree bottom-up with an explicit stack.

        Each entry carries the two ancestors its keys must sort strictly
        between. A node's size is checked on its second visit, once both
        children's cached sizes have been validated.
        """
        stack: list[tuple[Node | None, Node | None, Node | None, bool]] = [
            (root, None, None, False)
        ]
        while stack:
            node, low, high, children_done = stack.pop()
            if node is self._nil:
                continue

            if children_done:
                expected = (
                    node.count + self._size_of(node.left) + self._size_of(node.right)
                )
                if node.size != expected:
                    raise InvariantViolationError(
                        "size", node.key, f"cached {node.size}, actual {expected}"
                    )
                self._check_node(node)
                continue

            if low is not None and self._compare(node.key, low.key) <= 0:
                raise InvariantViolationError(
                    "order", node.key, f"not greater than ancestor {low.key!r}"
                )
            if high is not None and self._compare(node.key, high.key) >= 0:
                raise InvariantViolationError(
                    "order", node.key, f"not less than ancestor {high.key!r}"
                )
            if node.count < 1:
                raise InvariantViolationError("count", node.key, f"count is {node.count}")
            if not self._allow_duplicates and node.count != 1:
                raise InvariantViolationError(
                    "duplicates", node.key, f"count {node.count} with duplicates disallowed"
                )

            stack.append((node, low, high, True))
            stack.append((node.right, node, high, False))
            stack.append((node.left, low, node, False))

    def _check_node(self, node: Node) -> None:
        """Variant-specific checks, run after both subtrees validated."""
        pass
