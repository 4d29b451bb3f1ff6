"""
Balancer strategies for the BinarySearchTree engine.

A balancer is invoked on every node of the insert/delete path, bottom-up,
after the node's children have been restructured. It refreshes the node's
cached metadata and returns the root of the (possibly rotated) subtree,
which the caller links back into its parent.
"""

from ordtree.models.exceptions import InvariantViolationError
from ordtree.models.node import Node, subtree_height, subtree_size


class Balancer:
    """No rebalancing: only keeps subtree sizes current."""

    def update(self, node: Node) -> None:
        node.size = node.count + subtree_size(node.left) + subtree_size(node.right)

    def rebalance(self, node: Node | None) -> Node | None:
        if node is None:
            return None
        self.update(node)
        return node

    def check(self, node: Node) -> None:
        pass


class HeightBalancer(Balancer):
    """
    AVL balancing.

    Keeps ``|height(left) - height(right)| <= 1`` at every node by rotating
    on the way back up the insert/delete path.
    """

    def update(self, node: Node) -> None:
        super().update(node)
        node.height = max(subtree_height(node.left), subtree_height(node.right)) + 1

    def rebalance(self, node: Node | None) -> Node | None:
        if node is None:
            return None
        self.update(node)

        bf = self.balance_factor(node)
        if bf > 1:
            if self.balance_factor(node.left) < 0:
                # Left-Right case
                node.left = self.rotate_left(node.left)
            # Left-Left case
            node = self.rotate_right(node)
        elif bf < -1:
            if self.balance_factor(node.right) > 0:
                # Right-Left case
                node.right = self.rotate_right(node.right)
            # Right-Right case
            node = self.rotate_left(node)
        return node

    def check(self, node: Node) -> None:
        expected = max(subtree_height(node.left), subtree_height(node.right)) + 1
        if node.height != expected:
            raise InvariantViolationError(
                "height", node.key, f"cached {node.height}, actual {expected}"
            )
        bf = self.balance_factor(node)
        if abs(bf) > 1:
            raise InvariantViolationError("balance", node.key, f"balance factor {bf}")

    @staticmethod
    def balance_factor(node: Node) -> int:
        return subtree_height(node.left) - subtree_height(node.right)

    def rotate_left(self, node: Node) -> Node:
        #    N                  S
        #   / \                / \
        #  A   S     ==>      N   C
        #     / \            / \
        #    B   C          A   B
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        # Old root first: the new root's metadata depends on it
        self.update(node)
        self.update(pivot)
        return pivot

    def rotate_right(self, node: Node) -> Node:
        #      N              S
        #     / \            / \
        #    S   C   ==>    A   N
        #   / \                / \
        #  A   B              B   C
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        self.update(node)
        self.update(pivot)
        return pivot
