from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, Optional, TypeVar
import logging

from search_trees.logging_config import get_logger

# Get logger for this module
logger = get_logger("SearchTree")

K = TypeVar("K")


class UnderflowError(LookupError):
    """Raised when the minimum or maximum of an empty tree is requested."""


class BinaryNode:
    """Plain binary tree node: a key and two optional children."""
    __slots__ = ("key", "left", "right")

    def __init__(self, key, left: Optional["BinaryNode"] = None, right: Optional["BinaryNode"] = None):
        self.key = key
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(key={self.key!r})"


class AbstractSearchTree(ABC, Generic[K]):
    """
    Abstract base class for an ordered set of unique keys stored in a binary
    search tree.

    Subclasses own a single ``root`` reference (``None`` when empty) and keep
    ``_size`` in step with the number of nodes. Everything that can be
    expressed through the root alone (emptiness, min/max descent, in-order
    traversal, the Python container protocol) lives here.
    """

    def __init__(self) -> None:
        self.root: Optional[BinaryNode] = None
        self._size = 0

    # Mutating operations
    @abstractmethod
    def insert(self, key: K) -> None:
        """
        Insert a key into the tree. Inserting a key that is already present
        does nothing.

        Parameters:
            key: The key to insert. Must be totally ordered against the
                keys already stored.
        """
        pass

    @abstractmethod
    def remove(self, key: K) -> None:
        """
        Remove a key from the tree. Removing a key that is not present does
        nothing.

        Parameters:
            key: The key to remove.
        """
        pass

    @abstractmethod
    def contains(self, key: K) -> bool:
        """
        Return True if the key is stored in the tree.

        Parameters:
            key: The key to search for.
        """
        pass

    def find_min(self) -> K:
        """
        Return the smallest key.

        Raises:
            UnderflowError: If the tree is empty.
        """
        if self.is_empty():
            raise UnderflowError("find_min(): tree is empty")
        return self._find_min(self.root).key

    def find_max(self) -> K:
        """
        Return the largest key.

        Raises:
            UnderflowError: If the tree is empty.
        """
        if self.is_empty():
            raise UnderflowError("find_max(): tree is empty")
        return self._find_max(self.root).key

    def is_empty(self) -> bool:
        return self.root is None

    def make_empty(self) -> None:
        """Drop every node. A no-op on an empty tree."""
        if self.root is not None:
            debug_log("make_empty(): releasing %d nodes", self._size)
        self.root = None
        self._size = 0

    def traverse(self) -> List[K]:
        """Return all keys in ascending order."""
        return list(self.iter_keys())

    def iter_keys(self) -> Iterator[K]:
        """
        Lazily yields keys in ascending order (in-order walk with an explicit
        stack). Each call starts a fresh walk.
        """
        stack: List[BinaryNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self) -> int:
        """Height of the tree; -1 if empty, 0 for a single node."""
        return _subtree_height(self.root)

    # Internal helpers
    @staticmethod
    def _find_min(t: Optional[BinaryNode]) -> Optional[BinaryNode]:
        if t is None:
            return t
        while t.left is not None:
            t = t.left
        return t

    @staticmethod
    def _find_max(t: Optional[BinaryNode]) -> Optional[BinaryNode]:
        if t is None:
            return t
        while t.right is not None:
            t = t.right
        return t

    @staticmethod
    def _check_key(key, op: str) -> None:
        if key is None:
            raise TypeError(f"{op}(): key must not be None")

    # Container protocol
    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:
        return self.iter_keys()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.traverse()!r})"

    def __str__(self) -> str:
        if self.is_empty():
            return f"Empty {self.__class__.__name__}"
        return f"{self.__class__.__name__}(size={self._size}, height={self.height()})"


def _subtree_height(t: Optional[BinaryNode]) -> int:
    """Recomputed height of a subtree; -1 for an absent one."""
    if t is None:
        return -1
    # Iterative level walk so degenerate (unbalanced) trees don't hit the recursion limit
    height = -1
    level = [t]
    while level:
        height += 1
        level = [c for n in level for c in (n.left, n.right) if c is not None]
    return height


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
