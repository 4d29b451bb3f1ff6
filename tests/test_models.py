"""
Tests for data models: Node, Color, ordering policies and exceptions.
"""

from ordtree.models.exceptions import InvariantViolationError
from ordtree.models.node import Color, Node, subtree_height, subtree_size
from ordtree.models.ordering import natural_order, reverse_order


class TestNode:
    """Tests for Node."""

    def test_defaults(self):
        """Test a fresh node holds one occurrence."""
        node = Node(key=7)
        assert node.count == 1
        assert node.size == 1
        assert node.height == 1
        assert node.color == Color.RED
        assert node.left is None and node.right is None and node.parent is None

    def test_identity_equality(self):
        """Test nodes with equal keys are distinct objects."""
        assert Node(key=1) != Node(key=1)

    def test_repr_does_not_follow_links(self):
        """Test repr stays finite with a parent/child cycle."""
        parent = Node(key=2)
        child = Node(key=1, parent=parent)
        parent.left = child
        text = repr(parent)
        assert "key=2" in text
        assert "left" not in text

    def test_absent_metadata(self):
        """Test size and height of an absent subtree are zero."""
        assert subtree_size(None) == 0
        assert subtree_height(None) == 0
        assert subtree_size(Node(key=1, count=3, size=5)) == 5
        assert subtree_height(Node(key=1, height=4)) == 4


class TestOrdering:
    """Tests for comparator helpers."""

    def test_natural_order(self):
        assert natural_order(1, 2) < 0
        assert natural_order(2, 1) > 0
        assert natural_order(3, 3) == 0
        assert natural_order("a", "b") < 0

    def test_reverse_order(self):
        assert reverse_order(1, 2) > 0
        assert reverse_order(2, 1) < 0
        assert reverse_order(3, 3) == 0


class TestInvariantViolationError:
    """Tests for InvariantViolationError."""

    def test_attributes_and_message(self):
        error = InvariantViolationError("size", 42, "cached 3, actual 2")
        assert error.invariant == "size"
        assert error.key == 42
        assert error.detail == "cached 3, actual 2"
        assert "size invariant violated at key 42" in str(error)
