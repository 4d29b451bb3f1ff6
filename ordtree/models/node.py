"""
Tree node shared by every ordered-tree variant.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """
    Node in an ordered tree.

    Attributes:
        key: The stored key.
        count: Occurrences of the key folded into this node.
        size: Logical elements in the subtree rooted here (counts included).
        height: Subtree height, maintained by the AVL balancer only.
        color: Node color, maintained by the Red-Black Tree only.
        left: Left child, or the tree's absent marker.
        right: Right child, or the tree's absent marker.
        parent: Non-owning back-reference, used by the Red-Black Tree only.
    """

    key: Any
    count: int = 1
    size: int = 1
    height: int = 1
    color: Color = Color.RED
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)
    parent: "Node | None" = field(default=None, repr=False)


def subtree_size(node: Node | None) -> int:
    return node.size if node is not None else 0


def subtree_height(node: Node | None) -> int:
    return node.height if node is not None else 0
