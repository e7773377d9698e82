"""Unbalanced binary search tree"""

from __future__ import annotations
from typing import Optional, TypeVar

from search_trees.base import AbstractSearchTree, BinaryNode, debug_log

K = TypeVar("K")


class BinarySearchTree(AbstractSearchTree[K]):
    """
    Binary search tree without any rebalancing.

    Same contract as :class:`~search_trees.avl_tree.AVLTree`, but the shape
    depends entirely on insertion order, so every operation is O(n) in the
    worst case (e.g. ascending inserts build a linked list). Insert and remove
    walk the tree iteratively for that reason.
    """

    def insert(self, key: K) -> None:
        """Insert key into the tree; duplicates are ignored."""
        self._check_key(key, "insert")
        if self.root is None:
            self.root = BinaryNode(key)
            self._size += 1
            return

        cur = self.root
        while True:
            if key < cur.key:
                if cur.left is None:
                    cur.left = BinaryNode(key)
                    break
                cur = cur.left
            elif cur.key < key:
                if cur.right is None:
                    cur.right = BinaryNode(key)
                    break
                cur = cur.right
            else:
                debug_log("insert(): duplicate key %r ignored", key)
                return
        self._size += 1

    def remove(self, key: K) -> None:
        """
        Remove key from the tree. Nothing is done if key is not found.

        A node with two children takes the key of its in-order successor,
        which is then spliced out of the right subtree instead.
        """
        self._check_key(key, "remove")
        parent: Optional[BinaryNode] = None
        cur = self.root
        while cur is not None:
            if key < cur.key:
                parent, cur = cur, cur.left
            elif cur.key < key:
                parent, cur = cur, cur.right
            else:
                break
        else:
            debug_log("remove(): key %r not found", key)
            return

        if cur.left is not None and cur.right is not None:
            succ_parent, succ = cur, cur.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            debug_log("remove(): successor %r replaces %r", succ.key, cur.key)
            cur.key = succ.key
            parent, cur = succ_parent, succ

        child = cur.left if cur.left is not None else cur.right
        if parent is None:
            self.root = child
        elif parent.left is cur:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def contains(self, key: K) -> bool:
        self._check_key(key, "contains")
        t = self.root
        while t is not None:
            if key < t.key:
                t = t.left
            elif t.key < key:
                t = t.right
            else:
                return True
        return False
