"""Top-down splay tree"""

from __future__ import annotations
from typing import TypeVar

from search_trees.base import AbstractSearchTree, BinaryNode, UnderflowError, debug_log

K = TypeVar("K")


def _rotate_with_left_child(k2: BinaryNode) -> BinaryNode:
    k1 = k2.left
    k2.left = k1.right
    k1.right = k2
    return k1


def _rotate_with_right_child(k1: BinaryNode) -> BinaryNode:
    k2 = k1.right
    k1.right = k2.left
    k2.left = k1
    return k2


class SplayTree(AbstractSearchTree[K]):
    """
    Self-adjusting binary search tree.

    Every access splays the touched node to the root, which gives amortized
    O(log n) per operation without storing any balance information. Note
    that ``contains``, ``find_min`` and ``find_max`` therefore change the
    shape of the tree (never its keys).
    """

    def insert(self, key: K) -> None:
        """Insert key into the tree; duplicates are ignored."""
        self._check_key(key, "insert")
        if self.root is None:
            self.root = BinaryNode(key)
            self._size += 1
            return

        root = self._splay(key, self.root)
        if key < root.key:
            new_node = BinaryNode(key, root.left, root)
            root.left = None
        elif root.key < key:
            new_node = BinaryNode(key, root, root.right)
            root.right = None
        else:
            debug_log("insert(): duplicate key %r ignored", key)
            self.root = root
            return
        self.root = new_node
        self._size += 1

    def remove(self, key: K) -> None:
        """Remove key from the tree. Nothing is done if key is not found."""
        self._check_key(key, "remove")
        # If key is present, contains() splays it to the root
        if not self.contains(key):
            debug_log("remove(): key %r not found", key)
            return

        root = self.root
        if root.left is None:
            new_tree = root.right
        else:
            # Splaying for key inside the left subtree brings its maximum to
            # the top; that node has no right child
            new_tree = self._splay(key, root.left)
            new_tree.right = root.right
        self.root = new_tree
        self._size -= 1

    def contains(self, key: K) -> bool:
        self._check_key(key, "contains")
        if self.is_empty():
            return False
        self.root = self._splay(key, self.root)
        return not (key < self.root.key or self.root.key < key)

    def find_min(self) -> K:
        """
        Return the smallest key and splay it to the root.

        Raises:
            UnderflowError: If the tree is empty.
        """
        if self.is_empty():
            raise UnderflowError("find_min(): tree is empty")
        key = self._find_min(self.root).key
        self.root = self._splay(key, self.root)
        return key

    def find_max(self) -> K:
        """
        Return the largest key and splay it to the root.

        Raises:
            UnderflowError: If the tree is empty.
        """
        if self.is_empty():
            raise UnderflowError("find_max(): tree is empty")
        key = self._find_max(self.root).key
        self.root = self._splay(key, self.root)
        return key

    @staticmethod
    def _splay(key: K, t: BinaryNode) -> BinaryNode:
        """
        Top-down splay of the non-empty subtree t around key. The last node
        on the search path becomes the new subtree root, which is returned.
        """
        # header.right collects the left tree, header.left the right tree
        header = BinaryNode(None)
        left_tree_max = right_tree_min = header

        while True:
            if key < t.key:
                if t.left is None:
                    break
                if key < t.left.key:
                    t = _rotate_with_left_child(t)
                    if t.left is None:
                        break
                # Link right
                right_tree_min.left = t
                right_tree_min = t
                t = t.left
            elif t.key < key:
                if t.right is None:
                    break
                if t.right.key < key:
                    t = _rotate_with_right_child(t)
                    if t.right is None:
                        break
                # Link left
                left_tree_max.right = t
                left_tree_max = t
                t = t.right
            else:
                break

        left_tree_max.right = t.left
        right_tree_min.left = t.right
        t.left = header.right
        t.right = header.left
        debug_log("splay(): %r is the new root", t.key)
        return t
