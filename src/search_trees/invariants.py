"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by the
trees themselves (``AVLTree.check_balance``), the stats scripts and the
test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from search_trees.logging_config import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from search_trees.base import AbstractSearchTree
    from search_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "heights_consistent",
    "is_balanced",
    "size_consistent",
    "keys_in_order",
)


class InvariantError(Exception):
    """Raised when a search tree invariant is violated."""


def _fail(message: str) -> None:
    logger.error(message)
    raise InvariantError(message)


def assert_tree_invariants_raise(
    t: AbstractSearchTree,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure.

    The balance flag is only enforced for AVL trees; the other variants make
    no promise about their shape.
    """
    from search_trees.avl_tree import AVLTree

    for flag in TREE_FLAGS:
        if flag == "is_balanced" and not isinstance(t, AVLTree):
            continue
        if not getattr(stats, flag):
            _fail(f"Invariant failed: {flag} is False (tree={t})")

    if not t.is_empty():
        if stats.node_count <= 0:
            _fail(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
        if stats.height < 0:
            _fail(f"Invariant failed: height={stats.height} < 0 for non-empty tree")
        if stats.least_key is None:
            _fail("Invariant failed: least_key is None for non-empty tree")
        if stats.greatest_key is None:
            _fail("Invariant failed: greatest_key is None for non-empty tree")
    elif stats.node_count != 0:
        _fail(f"Invariant failed: node_count={stats.node_count} for empty tree")


def check_keys_in_order(
    tree: AbstractSearchTree,
    expected_keys: Optional[Iterable] = None,
) -> Tuple[List, bool, bool]:
    """Traverse the tree in order and validate its keys.

    Returns
    -------
    (keys, presence_ok, order_ok)
        ``presence_ok`` is True if no expected keys were given, or the tree
        holds exactly the expected key set. ``order_ok`` is True if the keys
        come out strictly ascending.
    """
    keys = tree.traverse()
    order_ok = all(a < b for a, b in zip(keys, keys[1:]))

    presence_ok = True
    if expected_keys is not None:
        expected = list(expected_keys)
        if len(keys) != len(set(expected)):
            presence_ok = False
        else:
            presence_ok = set(keys) == set(expected)

    return keys, presence_ok, order_ok
