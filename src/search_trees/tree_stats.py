"""Statistics and invariant checking for binary search tree structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from search_trees.avl_tree import ALLOWED_IMBALANCE
from search_trees.logging_config import get_logger

if TYPE_CHECKING:
    from search_trees.base import AbstractSearchTree, BinaryNode

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for a binary search tree."""

    node_count: int
    height: int
    least_key: Any | None
    greatest_key: Any | None
    max_imbalance: int
    is_search_tree: bool
    heights_consistent: bool
    is_balanced: bool
    size_consistent: bool
    keys_in_order: bool


def tree_stats_(t: Optional[AbstractSearchTree]) -> Stats:
    """
    Returns aggregated statistics for a search tree in **O(n)** time.

    Heights are recomputed from the structure bottom-up and compared with
    the heights cached in the nodes (where nodes cache one). The walk uses
    an explicit stack so that degenerate trees of any depth can be checked.
    The tree is never modified.
    """
    # ---------- empty tree return ---------------------------------
    if t is None or t.is_empty():
        return Stats(
            node_count=0,
            height=-1,
            least_key=None,
            greatest_key=None,
            max_imbalance=0,
            is_search_tree=True,
            heights_consistent=True,
            is_balanced=True,
            size_consistent=t is None or len(t) == 0,
            keys_in_order=True,
        )

    is_search_tree = True
    heights_consistent = True
    max_imbalance = 0

    # id(node) -> (height, count, least, greatest) of the subtree rooted there
    done: Dict[int, Tuple[int, int, Any, Any]] = {}
    empty = (-1, 0, None, None)

    stack: List[Tuple[BinaryNode, bool]] = [(t.root, False)]
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))
            continue

        l_height, l_count, l_least, l_greatest = (
            done.pop(id(node.left)) if node.left is not None else empty
        )
        r_height, r_count, r_least, r_greatest = (
            done.pop(id(node.right)) if node.right is not None else empty
        )

        # ---------- search tree property ---------------------------
        key = node.key
        if node.left is not None and not l_greatest < key:
            is_search_tree = False
        if node.right is not None and not key < r_least:
            is_search_tree = False

        # ---------- heights ------------------------------------------
        node_height = 1 + max(l_height, r_height)
        cached = getattr(node, "height", None)
        if cached is not None and cached != node_height:
            heights_consistent = False
        max_imbalance = max(max_imbalance, abs(l_height - r_height))

        done[id(node)] = (
            node_height,
            1 + l_count + r_count,
            l_least if node.left is not None else key,
            r_greatest if node.right is not None else key,
        )

    height, node_count, least_key, greatest_key = done.pop(id(t.root))

    # ---------- in-order walk ONCE at the root -----------------------
    keys_in_order = True
    prev_key = None
    first = True
    for key in t.iter_keys():
        if not first and not prev_key < key:
            keys_in_order = False
            break
        prev_key = key
        first = False

    return Stats(
        node_count=node_count,
        height=height,
        least_key=least_key,
        greatest_key=greatest_key,
        max_imbalance=max_imbalance,
        is_search_tree=is_search_tree,
        heights_consistent=heights_consistent,
        is_balanced=max_imbalance <= ALLOWED_IMBALANCE,
        size_consistent=len(t) == node_count,
        keys_in_order=keys_in_order,
    )
