"""
search_trees: ordered-set binary search trees.

Quick-start imports::

    from search_trees import AVLTree, create_tree

``AVLTree`` is the height-balanced tree with worst-case O(log n)
operations; ``BinarySearchTree`` and ``SplayTree`` implement the same
interface without (resp. with amortized) balancing.
"""

# Shared primitives
from search_trees.base import AbstractSearchTree, BinaryNode, UnderflowError

# Trees
from search_trees.avl_tree import ALLOWED_IMBALANCE, AVLNode, AVLTree
from search_trees.bst import BinarySearchTree
from search_trees.splay_tree import SplayTree
from search_trees.factory import TREE_CLASSES, create_tree

# Stats & invariants
from search_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys_in_order,
)
from search_trees.tree_stats import Stats, tree_stats_
from search_trees.display import print_pretty

__all__ = [
    # Primitives
    "ALLOWED_IMBALANCE",
    "AbstractSearchTree",
    "BinaryNode",
    "UnderflowError",
    # Trees
    "AVLNode",
    "AVLTree",
    "BinarySearchTree",
    "SplayTree",
    "TREE_CLASSES",
    "create_tree",
    # Stats & invariants
    "InvariantError",
    "Stats",
    "assert_tree_invariants_raise",
    "check_keys_in_order",
    "print_pretty",
    "tree_stats_",
]
