"""Utility functions for testing search tree invariants."""

from typing import Optional

from search_trees.avl_tree import AVLTree
from search_trees.base import AbstractSearchTree
from search_trees.display import print_pretty
from search_trees.invariants import TREE_FLAGS
from search_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: AbstractSearchTree, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        if flag == "is_balanced" and not isinstance(t, AVLTree):
            # only AVL trees promise a bounded balance factor
            continue
        if not getattr(stats, flag):
            tc.fail(f"Invariant failed: {flag} is False \n\n{print_pretty(t)}\n\n{err_msg}")

    if not t.is_empty():
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertGreaterEqual(
            stats.height, 0,
            f"Invariant failed: height={stats.height} < 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_key,
            f"Invariant failed: least_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_key,
            f"Invariant failed: greatest_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertEqual(
            stats.height, t.height(),
            f"Invariant failed: recomputed height {stats.height} ≠ tree.height() {t.height()}\n\n{err_msg}"
        )
    else:
        tc.assertEqual(stats.node_count, 0)
        tc.assertEqual(len(t), 0)


def shape(node) -> Optional[tuple]:
    """Nested (key, left, right) tuples describing the exact tree shape."""
    if node is None:
        return None
    return (node.key, shape(node.left), shape(node.right))
