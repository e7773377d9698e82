"""Pretty-printing and display utilities for search tree structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from search_trees.base import AbstractSearchTree, BinaryNode


def print_pretty(tree: Optional[AbstractSearchTree]) -> str:
    """
    Renders a search tree level by level:
      • Lines go from the root (depth 0) down to the deepest level.
      • Absent children show as "·" so each node stays above its parent's
        slot; all cells have the same width.
      • AVL nodes are shown as ``key(h)`` with their cached height.
    """
    from search_trees.base import AbstractSearchTree

    if tree is None:
        return f"{type(tree).__name__}: None"

    if not isinstance(tree, AbstractSearchTree):
        raise TypeError(f"print_pretty() expects AbstractSearchTree, got {type(tree).__name__}")

    if tree.is_empty():
        return f"{type(tree).__name__}: Empty"

    def label(node: BinaryNode) -> str:
        h = getattr(node, "height", None)
        return str(node.key) if h is None else f"{node.key}({h})"

    # 1) Collect each level, including gaps below absent nodes
    levels: List[List[Optional[BinaryNode]]] = []
    level: List[Optional[BinaryNode]] = [tree.root]
    while any(n is not None for n in level):
        levels.append(level)
        level = [c for n in level for c in ((n.left, n.right) if n is not None else (None, None))]

    width = max(len(label(n)) for lvl in levels for n in lvl if n is not None)

    # 2) Each cell in the bottom level gets width+1 columns
    bottom = 2 ** (len(levels) - 1)
    lines = [f"{type(tree).__name__} (size={len(tree)}, height={tree.height()})"]
    for lvl in levels:
        span = (width + 1) * bottom // len(lvl)
        cells = [(label(n) if n is not None else "·").center(span) for n in lvl]
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)
