"""
Tests for tree construction and configuration.
"""

import logging

import pytest

from ordtree import (
    AVLTree,
    BinarySearchTree,
    RedBlackTree,
    TreeConfig,
    TreeKind,
    create_tree,
    reverse_order,
)


class TestCreateTree:
    """Tests for create_tree."""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (TreeKind.BST, BinarySearchTree),
            (TreeKind.AVL, AVLTree),
            (TreeKind.RBTREE, RedBlackTree),
            ("avl", AVLTree),
            ("RBTree", RedBlackTree),
        ],
    )
    def test_kinds(self, kind, expected):
        tree = create_tree(kind)
        assert type(tree) is expected
        assert tree.size() == 0

    def test_default_is_red_black(self):
        assert isinstance(create_tree(), RedBlackTree)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown tree kind"):
            create_tree("splay")

    def test_options_are_applied(self):
        tree = create_tree(TreeKind.AVL, compare=reverse_order, allow_duplicates=True)
        tree.insert(1)
        tree.insert(2)
        tree.insert(2)

        assert tree.allow_duplicates
        assert tree.in_order() == [2, 2, 1]

    def test_logs_creation(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="ordtree.engine.factory"):
            create_tree("bst")
        assert "Creating bst tree" in caplog.text


class TestTreeConfig:
    """Tests for TreeConfig."""

    def test_defaults(self):
        config = TreeConfig()
        assert config.kind is TreeKind.RBTREE
        assert config.allow_duplicates is False

    def test_string_kind_is_normalized(self):
        assert TreeConfig(kind="AVL").kind is TreeKind.AVL

    def test_invalid_kind(self):
        with pytest.raises(ValueError, match="Unknown tree kind"):
            TreeConfig(kind="btree")

    def test_invalid_duplicates_flag(self):
        with pytest.raises(ValueError, match="allow_duplicates must be a bool"):
            TreeConfig(allow_duplicates="yes")

    def test_from_env(self):
        config = TreeConfig.from_env(
            {"ORDTREE_KIND": "bst", "ORDTREE_ALLOW_DUPLICATES": "True"}
        )
        assert config == TreeConfig(kind=TreeKind.BST, allow_duplicates=True)

    def test_from_env_defaults(self):
        assert TreeConfig.from_env({}) == TreeConfig()

    def test_from_os_environ(self, monkeypatch):
        monkeypatch.setenv("ORDTREE_KIND", "avl")
        monkeypatch.setenv("ORDTREE_ALLOW_DUPLICATES", "off")
        assert TreeConfig.from_env() == TreeConfig(kind=TreeKind.AVL)

    def test_from_env_bad_flag(self):
        with pytest.raises(ValueError, match="ORDTREE_ALLOW_DUPLICATES"):
            TreeConfig.from_env({"ORDTREE_ALLOW_DUPLICATES": "maybe"})

    def test_build(self):
        config = TreeConfig(kind=TreeKind.AVL, allow_duplicates=True)
        tree = config.build(compare=reverse_order)

        assert isinstance(tree, AVLTree)
        for key in [1, 3, 3]:
            tree.insert(key)
        assert tree.in_order() == [3, 3, 1]
