"""
Tree construction and configuration.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum

from ordtree.models.ordering import Comparator
from ordtree.models.sortedcontainers import AVLTree, BinarySearchTree, RedBlackTree

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class TreeKind(str, Enum):
    """Balancing discipline, fixed for the lifetime of a tree."""

    BST = "bst"  # Unbalanced
    AVL = "avl"  # Height-balanced
    RBTREE = "rbtree"  # Color-balanced


_TREE_TYPES: dict[TreeKind, type[BinarySearchTree] | type[RedBlackTree]] = {
    TreeKind.BST: BinarySearchTree,
    TreeKind.AVL: AVLTree,
    TreeKind.RBTREE: RedBlackTree,
}


def _parse_kind(kind: "TreeKind | str") -> TreeKind:
    try:
        return TreeKind(kind.lower() if isinstance(kind, str) else kind)
    except ValueError:
        valid = ", ".join(k.value for k in TreeKind)
        raise ValueError(f"Unknown tree kind {kind!r}, expected one of: {valid}") from None


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def create_tree(
    kind: "TreeKind | str" = TreeKind.RBTREE,
    compare: Comparator | None = None,
    allow_duplicates: bool = False,
) -> BinarySearchTree | RedBlackTree:
    """
    Create an empty ordered tree.

    Args:
        kind: Balancing discipline ("bst", "avl" or "rbtree").
        compare: Three-way comparator. Defaults to natural ordering.
        allow_duplicates: Fold equal keys into an occurrence count.

    Returns:
        A new, empty tree of the requested kind.

    Raises:
        ValueError: If kind is not a known tree kind.
    """
    tree_kind = _parse_kind(kind)
    logger.debug(
        f"Creating {tree_kind.value} tree "
        f"(allow_duplicates={allow_duplicates}, custom_compare={compare is not None})"
    )
    return _TREE_TYPES[tree_kind](compare=compare, allow_duplicates=allow_duplicates)


@dataclass(frozen=True)
class TreeConfig:
    """
    Construction-time settings of a tree.

    Attributes:
        kind: Balancing discipline.
        allow_duplicates: Whether equal keys are counted or ignored.
    """

    kind: TreeKind = TreeKind.RBTREE
    allow_duplicates: bool = False

    # Environment variables read by from_env()
    KIND_ENV = "ORDTREE_KIND"
    DUPLICATES_ENV = "ORDTREE_ALLOW_DUPLICATES"

    def __post_init__(self) -> None:
        # Accept plain strings, store the enum
        object.__setattr__(self, "kind", _parse_kind(self.kind))
        if not isinstance(self.allow_duplicates, bool):
            raise ValueError(
                f"allow_duplicates must be a bool, got {type(self.allow_duplicates).__name__}"
            )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "TreeConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Config with unset variables left at their defaults.

        Raises:
            ValueError: If a variable holds an unparseable value.
        """
        env = os.environ if environ is None else environ
        config = cls(
            kind=env.get(cls.KIND_ENV, TreeKind.RBTREE.value),
            allow_duplicates=_parse_flag(cls.DUPLICATES_ENV, env.get(cls.DUPLICATES_ENV, "")),
        )
        logger.debug(f"Resolved tree config from environment: {config}")
        return config

    def build(self, compare: Comparator | None = None) -> BinarySearchTree | RedBlackTree:
        """Create an empty tree with these settings and an optional comparator."""
        return create_tree(self.kind, compare=compare, allow_duplicates=self.allow_duplicates)
