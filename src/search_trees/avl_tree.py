"""AVL tree implementation"""

from __future__ import annotations
from typing import Optional, TypeVar

from search_trees.base import AbstractSearchTree, BinaryNode, debug_log

K = TypeVar("K")

# Largest height difference tolerated between the two subtrees of a node
ALLOWED_IMBALANCE = 1


class AVLNode(BinaryNode):
    """
    Binary node with a cached height. A leaf has height 0; an absent
    child counts as height -1.
    """
    __slots__ = ("height",)

    def __init__(
        self,
        key,
        left: Optional[AVLNode] = None,
        right: Optional[AVLNode] = None,
    ) -> None:
        super().__init__(key, left, right)
        self.height = 0

    def __repr__(self) -> str:
        return f"AVLNode(key={self.key!r}, height={self.height})"


def height(t: Optional[AVLNode]) -> int:
    """Return the cached height of node t, or -1 if it is None."""
    return -1 if t is None else t.height


def _update_height(t: AVLNode) -> None:
    t.height = max(height(t.left), height(t.right)) + 1


# ── Rotations ─────────────────────────────────────────────────────

def rotate_with_left_child(k2: AVLNode) -> AVLNode:
    """
    Single rotation for the left-left case: k2's left child k1 takes k2's
    place, k2 becomes k1's right child and adopts k1's old right subtree.
    Heights of k2 then k1 are updated. Returns the new subtree root.
    """
    k1 = k2.left
    k2.left = k1.right
    k1.right = k2
    _update_height(k2)
    k1.height = max(height(k1.left), k2.height) + 1
    debug_log("rotate_with_left_child: %r up, %r down", k1.key, k2.key)
    return k1


def rotate_with_right_child(k1: AVLNode) -> AVLNode:
    """Mirror image of :func:`rotate_with_left_child` (right-right case)."""
    k2 = k1.right
    k1.right = k2.left
    k2.left = k1
    _update_height(k1)
    k2.height = max(height(k2.right), k1.height) + 1
    debug_log("rotate_with_right_child: %r up, %r down", k2.key, k1.key)
    return k2


def double_with_left_child(k3: AVLNode) -> AVLNode:
    """
    Double rotation for the left-right case: rotate the left child with its
    right child, then k3 with its new left child.
    """
    k3.left = rotate_with_right_child(k3.left)
    return rotate_with_left_child(k3)


def double_with_right_child(k1: AVLNode) -> AVLNode:
    """
    Double rotation for the right-left case: rotate the right child with its
    left child, then k1 with its new right child.
    """
    k1.right = rotate_with_left_child(k1.right)
    return rotate_with_right_child(k1)


def balance(t: Optional[AVLNode]) -> Optional[AVLNode]:
    """
    Restore the AVL condition at t, assuming t was balanced (or within one of
    being balanced) before its most recent child change. Applies at most one
    single or double rotation, refreshes the height and returns the new
    subtree root.
    """
    if t is None:
        return t

    if height(t.left) - height(t.right) > ALLOWED_IMBALANCE:
        if height(t.left.left) >= height(t.left.right):
            t = rotate_with_left_child(t)
        else:
            t = double_with_left_child(t)
    elif height(t.right) - height(t.left) > ALLOWED_IMBALANCE:
        if height(t.right.right) >= height(t.right.left):
            t = rotate_with_right_child(t)
        else:
            t = double_with_right_child(t)

    _update_height(t)
    return t


class AVLTree(AbstractSearchTree[K]):
    """
    Height-balanced binary search tree.

    Every node caches its height and, after each insert or remove, all nodes
    on the search path are rebalanced bottom-up so that the heights of any
    node's two subtrees differ by at most ``ALLOWED_IMBALANCE``. This keeps
    lookups, min/max and both mutations at O(log n) worst case.
    """

    root: Optional[AVLNode]

    # Public API
    def insert(self, key: K) -> None:
        """
        Insert key into the tree; duplicates are ignored.

        Args:
            key: The key to insert.

        Raises:
            TypeError: If key is None or not comparable with stored keys.
        """
        self._check_key(key, "insert")
        self.root = self._insert(key, self.root)

    def remove(self, key: K) -> None:
        """
        Remove key from the tree. Nothing is done if key is not found.

        Args:
            key: The key to remove.

        Raises:
            TypeError: If key is None.
        """
        self._check_key(key, "remove")
        self.root = self._remove(key, self.root)

    def contains(self, key: K) -> bool:
        """
        Iteratively descends from the root comparing keys.

        Returns:
            bool: True if key is found.
        """
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

    def height(self) -> int:
        return height(self.root)

    def check_balance(self) -> None:
        """
        Recompute heights and balance factors for every node and raise
        :class:`~search_trees.invariants.InvariantError` if any invariant is
        violated. Never mutates the tree.
        """
        from search_trees.invariants import assert_tree_invariants_raise
        from search_trees.tree_stats import tree_stats_

        assert_tree_invariants_raise(self, tree_stats_(self))

    # Private Methods
    def _insert(self, key: K, t: Optional[AVLNode]) -> AVLNode:
        """Insert into the subtree rooted at t; return the new subtree root."""
        if t is None:
            self._size += 1
            return AVLNode(key)

        if key < t.key:
            t.left = self._insert(key, t.left)
        elif t.key < key:
            t.right = self._insert(key, t.right)
        else:
            debug_log("insert(): duplicate key %r ignored", key)
        return balance(t)

    def _remove(self, key: K, t: Optional[AVLNode]) -> Optional[AVLNode]:
        """Remove from the subtree rooted at t; return the new subtree root."""
        if t is None:
            debug_log("remove(): key %r not found", key)
            return t

        if key < t.key:
            t.left = self._remove(key, t.left)
        elif t.key < key:
            t.right = self._remove(key, t.right)
        elif t.left is not None and t.right is not None:
            # Two children: copy the successor up, then delete it below
            t.key = self._find_min(t.right).key
            debug_log("remove(): successor %r replaces %r", t.key, key)
            t.right = self._remove(t.key, t.right)
        else:
            self._size -= 1
            t = t.left if t.left is not None else t.right
        return balance(t)
