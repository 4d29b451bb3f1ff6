"""
Abstract base classes and protocols for the ordered-tree engine.
"""

from ordtree.interfaces.ordered_collection import OrderedCollection
from ordtree.interfaces.traversable import Traversable

__all__ = ["OrderedCollection", "Traversable"]
