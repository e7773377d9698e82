"""Search tree factory module."""

from typing import Dict, Type

from search_trees.avl_tree import AVLTree
from search_trees.base import AbstractSearchTree
from search_trees.bst import BinarySearchTree
from search_trees.splay_tree import SplayTree

TREE_CLASSES: Dict[str, Type[AbstractSearchTree]] = {
    "avl": AVLTree,
    "bst": BinarySearchTree,
    "splay": SplayTree,
}


def create_tree(kind: str = "avl", keys=None) -> AbstractSearchTree:
    """
    Create a new search tree of the given kind.

    Args:
        kind: One of the names in ``TREE_CLASSES`` ("avl", "bst", "splay")
        keys: Optional iterable of keys inserted one by one, in order

    Returns:
        A new tree holding ``keys`` (empty if none were given)

    Raises:
        ValueError: If kind is not a known tree kind
    """
    try:
        TreeClass = TREE_CLASSES[kind]
    except KeyError:
        raise ValueError(
            f"create_tree(): unknown kind {kind!r}, expected one of {sorted(TREE_CLASSES)}"
        ) from None

    tree = TreeClass()
    if keys is not None:
        tree_insert = tree.insert
        for key in keys:
            tree_insert(key)
    return tree
