"""
Tree construction and configuration.
"""

from ordtree.engine.factory import TreeConfig, TreeKind, create_tree

__all__ = ["TreeConfig", "TreeKind", "create_tree"]
