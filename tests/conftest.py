"""
Shared pytest fixtures for ordered-tree tests.
"""

import random

import pytest

from ordtree import TreeKind, create_tree


@pytest.fixture(params=list(TreeKind), ids=lambda kind: kind.value)
def kind(request):
    """Run the test once per balancing discipline."""
    return request.param


@pytest.fixture
def tree(kind):
    """Provide an empty tree that ignores duplicate inserts."""
    return create_tree(kind)


@pytest.fixture
def multiset_tree(kind):
    """Provide an empty tree that counts duplicate inserts."""
    return create_tree(kind, allow_duplicates=True)


@pytest.fixture
def rng():
    """Provide a seeded random generator for reproducible workloads."""
    return random.Random(1234)


@pytest.fixture
def scenario_keys():
    """Keys inserted, then keys deleted, in the reference scenario."""
    return (
        [17, 18, 23, 34, 27, 15, 9, 6, 25, 13, 10, 37],
        [18, 25, 15, 6, 13, 37, 27, 17, 34, 9, 10],
    )
