"""
Traversal producers shared by every tree variant.

Each function takes the tree root and the tree's absent marker (``None``
for BinarySearchTree and AVLTree, the sentinel node for the Red-Black Tree) and
returns a new list of keys with duplicate counts expanded. All of them are
iterative, so degenerate unbalanced trees do not hit the recursion limit.
"""

from collections import deque
from collections.abc import AsyncIterator, Iterator
from typing import Any

from ordtree.models.node import Node


def in_order(root: Node | None, nil: Node | None) -> list[Any]:
    return list(InOrderIterator(root, nil))


def pre_order(root: Node | None, nil: Node | None) -> list[Any]:
    result: list[Any] = []
    if root is nil:
        return result

    stack = [root]
    while stack:
        node = stack.pop()
        result.extend([node.key] * node.count)
        # Right pushed first so the left subtree is emitted first
        if node.right is not nil:
            stack.append(node.right)
        if node.left is not nil:
            stack.append(node.left)
    return result


def post_order(root: Node | None, nil: Node | None) -> list[Any]:
    result: list[Any] = []
    if root is nil:
        return result

    # Collect (node, right, left) then reverse into (left, right, node)
    stack = [root]
    visited: list[Node] = []
    while stack:
        node = stack.pop()
        visited.append(node)
        if node.left is not nil:
            stack.append(node.left)
        if node.right is not nil:
            stack.append(node.right)

    for node in reversed(visited):
        result.extend([node.key] * node.count)
    return result


def level_order(root: Node | None, nil: Node | None) -> list[Any]:
    result: list[Any] = []
    if root is nil:
        return result

    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.extend([node.key] * node.count)
        if node.left is not nil:
            queue.append(node.left)
        if node.right is not nil:
            queue.append(node.right)
    return result


class InOrderIterator(Iterator[Any]):
    """Lazy in-order iterator repeating each key ``count`` times."""

    def __init__(self, root: Node | None, nil: Node | None) -> None:
        self._stack: list[Node] = []
        self._nil = nil
        self._current: Node | None = None
        self._remaining = 0

        self._push_left_path(root)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._remaining == 0:
            if not self._stack:
                raise StopIteration

            self._current = self._stack.pop()
            self._remaining = self._current.count

            # Push right subtree's left path
            self._push_left_path(self._current.right)

        self._remaining -= 1
        return self._current.key

    def _push_left_path(self, node: Node | None) -> None:
        while node is not self._nil:
            self._stack.append(node)
            node = node.left


class AsyncInOrderIterator(AsyncIterator[Any]):
    """Async in-order iterator (in-memory, no I/O)."""

    def __init__(self, root: Node | None, nil: Node | None) -> None:
        self._inner = InOrderIterator(root, nil)

    def __aiter__(self) -> "AsyncInOrderIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
