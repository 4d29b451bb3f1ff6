"""
Data models for the ordered-tree engine.
"""

from ordtree.models.exceptions import InvariantViolationError
from ordtree.models.node import Color, Node
from ordtree.models.ordering import Comparator, natural_order, reverse_order

__all__ = [
    "Color",
    "Comparator",
    "InvariantViolationError",
    "Node",
    "natural_order",
    "reverse_order",
]
