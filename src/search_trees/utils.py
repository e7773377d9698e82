"""
Utility functions for reasoning about search tree heights.
"""


def min_nodes_for_height(h: int) -> int:
    """
    Calculate the smallest number of nodes an AVL tree of height h can hold.

    The sparsest AVL tree of height h has one subtree of height h-1 and one
    of height h-2, so N(h) = N(h-1) + N(h-2) + 1 with N(-1) = 0, N(0) = 1.

    Parameters:
        h (int): The tree height, -1 for the empty tree.

    Returns:
        int: The minimum node count.

    Raises:
        ValueError: If h < -1.
    """
    if h < -1:
        raise ValueError("h must be >= -1")
    if h == -1:
        return 0
    prev, cur = 0, 1  # N(-1), N(0)
    for _ in range(h):
        prev, cur = cur, prev + cur + 1
    return cur


def max_avl_height(n: int) -> int:
    """
    Calculate the largest height an AVL tree with n nodes can have.

    Parameters:
        n (int): The number of nodes.

    Returns:
        int: The largest h with min_nodes_for_height(h) <= n, -1 for n == 0.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    h = -1
    prev, cur = 0, 1  # N(h), N(h + 1)
    while cur <= n:
        h += 1
        prev, cur = cur, prev + cur + 1
    return h


def perfect_height(n: int) -> int:
    """Height of a perfectly balanced binary tree with n nodes, i.e.
    ceil(log2(n + 1)) - 1 (-1 if n == 0)."""
    if n < 0:
        raise ValueError("n must be >= 0")
    return n.bit_length() - 1
