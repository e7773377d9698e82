"""Tests for the AVL rotation primitives and the balance decision.

Covers:

- ``rotate_with_left_child`` / ``rotate_with_right_child`` on hand-built nodes
- ``double_with_left_child`` / ``double_with_right_child``
- ``balance`` choosing single vs. double rotations
- every rotation case reached through ``insert`` and ``remove``
"""

import unittest

from search_trees.avl_tree import (
    AVLNode,
    balance,
    double_with_left_child,
    double_with_right_child,
    height,
    rotate_with_left_child,
    rotate_with_right_child,
)

from tests.test_base import AVLTreeTestCase
from tests.utils import shape


def _node(key, left=None, right=None) -> AVLNode:
    """Build an AVLNode with a correct cached height."""
    n = AVLNode(key, left, right)
    n.height = max(height(left), height(right)) + 1
    return n


def _leaf(key) -> AVLNode:
    return _node(key)


# ── primitives ────────────────────────────────────────────────────

class TestHeight(unittest.TestCase):

    def test_absent_subtree_has_height_minus_one(self):
        self.assertEqual(height(None), -1)

    def test_leaf_has_height_zero(self):
        self.assertEqual(height(AVLNode(1)), 0)


class TestSingleRotations(unittest.TestCase):

    def test_rotate_with_left_child(self):
        #       k2=4            k1=2
        #      /    \          /    \
        #    k1=2    5   ->   1     k2=4
        #   /   \                   /  \
        #  1     3                 3    5
        k2 = _node(4, _node(2, _leaf(1), _leaf(3)), _leaf(5))
        k1 = rotate_with_left_child(k2)

        self.assertEqual(k1.key, 2)
        self.assertIs(k1.right, k2)
        self.assertEqual(
            shape(k1),
            (2, (1, None, None), (4, (3, None, None), (5, None, None))),
        )
        self.assertEqual(k2.height, 1)
        self.assertEqual(k1.height, 2)

    def test_rotate_with_right_child(self):
        k1 = _node(2, _leaf(1), _node(4, _leaf(3), _leaf(5)))
        k2 = rotate_with_right_child(k1)

        self.assertEqual(k2.key, 4)
        self.assertIs(k2.left, k1)
        self.assertEqual(
            shape(k2),
            (4, (2, (1, None, None), (3, None, None)), (5, None, None)),
        )
        self.assertEqual(k1.height, 1)
        self.assertEqual(k2.height, 2)

    def test_rotation_heights_for_chain(self):
        k2 = _node(3, _node(2, _leaf(1)))
        k1 = rotate_with_left_child(k2)
        self.assertEqual(shape(k1), (2, (1, None, None), (3, None, None)))
        self.assertEqual((k1.height, k1.left.height, k1.right.height), (1, 0, 0))


class TestDoubleRotations(unittest.TestCase):

    def test_double_with_left_child(self):
        # zig-zag: 3 -> left 1 -> right 2
        k3 = _node(3, _node(1, None, _leaf(2)))
        root = double_with_left_child(k3)
        self.assertEqual(shape(root), (2, (1, None, None), (3, None, None)))
        self.assertEqual(root.height, 1)

    def test_double_with_right_child(self):
        k1 = _node(1, None, _node(3, _leaf(2)))
        root = double_with_right_child(k1)
        self.assertEqual(shape(root), (2, (1, None, None), (3, None, None)))
        self.assertEqual(root.height, 1)

    def test_double_with_left_child_moves_grandchild_subtrees(self):
        #        6                 4
        #       / \              /   \
        #      2   7            2     6
        #     / \       ->     / \   / \
        #    1   4            1   3 5   7
        #       / \
        #      3   5
        k3 = _node(6, _node(2, _leaf(1), _node(4, _leaf(3), _leaf(5))), _leaf(7))
        root = double_with_left_child(k3)
        self.assertEqual(
            shape(root),
            (4, (2, (1, None, None), (3, None, None)), (6, (5, None, None), (7, None, None))),
        )
        self.assertEqual([root.height, root.left.height, root.right.height], [2, 1, 1])


class TestBalance(unittest.TestCase):

    def test_none_passes_through(self):
        self.assertIsNone(balance(None))

    def test_balanced_node_only_refreshes_height(self):
        n = AVLNode(2, _leaf(1), _leaf(3))
        n.height = 7
        self.assertIs(balance(n), n)
        self.assertEqual(n.height, 1)

    def test_left_left_uses_single_rotation(self):
        root = balance(_node(3, _node(2, _leaf(1))))
        self.assertEqual(shape(root), (2, (1, None, None), (3, None, None)))

    def test_left_right_uses_double_rotation(self):
        root = balance(_node(3, _node(1, None, _leaf(2))))
        self.assertEqual(shape(root), (2, (1, None, None), (3, None, None)))

    def test_right_right_uses_single_rotation(self):
        root = balance(_node(1, None, _node(2, None, _leaf(3))))
        self.assertEqual(shape(root), (2, (1, None, None), (3, None, None)))

    def test_right_left_uses_double_rotation(self):
        root = balance(_node(1, None, _node(3, _leaf(2))))
        self.assertEqual(shape(root), (2, (1, None, None), (3, None, None)))

    def test_equal_grandchildren_prefer_single_rotation(self):
        # Only reachable through deletion: the heavy child's subtrees are
        # equally high, so a single rotation is required
        root = balance(_node(5, _node(3, _leaf(2), _leaf(4))))
        self.assertEqual(
            shape(root),
            (3, (2, None, None), (5, (4, None, None), None)),
        )
        self.assertEqual(root.height, 2)


# ── rotations triggered through the public API ────────────────────

class TestInsertRotations(AVLTreeTestCase):

    def test_ascending_three_rotates_twenty_to_root(self):
        self.build([10, 20, 30])
        self.assertEqual(self.tree.root.key, 20)
        self.assertEqual(self.tree.find_min(), 10)
        self.assertEqual(self.tree.find_max(), 30)
        self.assertEqual(self.tree.height(), 1)

    def test_descending_three_rotates_twenty_to_root(self):
        self.build([30, 20, 10])
        self.assertEqual(shape(self.tree.root), (20, (10, None, None), (30, None, None)))

    def test_zig_zag_left_right(self):
        self.build([30, 10, 20])
        self.assertEqual(shape(self.tree.root), (20, (10, None, None), (30, None, None)))

    def test_zig_zag_right_left(self):
        self.build([10, 30, 20])
        self.assertEqual(shape(self.tree.root), (20, (10, None, None), (30, None, None)))

    def test_rotation_below_the_root(self):
        self.build([50, 25, 75, 10, 5])
        self.assertEqual(
            shape(self.tree.root),
            (50, (10, (5, None, None), (25, None, None)), (75, None, None)),
        )
        self.expected_keys = [5, 10, 25, 50, 75]

    def test_double_rotation_at_the_root(self):
        self.build([50, 25, 75, 10, 30, 27])
        self.assertEqual(
            shape(self.tree.root),
            (30, (25, (10, None, None), (27, None, None)), (50, None, (75, None, None))),
        )


class TestRemoveRotations(AVLTreeTestCase):

    def test_remove_triggers_single_rotation(self):
        self.build([5, 3, 8, 2, 4])
        self.tree.remove(8)
        self.assertEqual(
            shape(self.tree.root),
            (3, (2, None, None), (5, (4, None, None), None)),
        )
        self.expected_keys = [2, 3, 4, 5]

    def test_remove_triggers_double_rotation(self):
        self.build([5, 2, 8, 4])
        self.tree.remove(8)
        self.assertEqual(shape(self.tree.root), (4, (2, None, None), (5, None, None)))
        self.expected_keys = [2, 4, 5]

    def test_remove_rebalances_every_ancestor(self):
        # Sparsest AVL tree of height 4: removing 9 rotates at 10, which
        # shortens the right side and forces a second rotation at the root
        left = _node(5, _node(3, _node(2, _leaf(1)), _leaf(4)), _node(6, None, _leaf(7)))
        right = _node(10, _leaf(9), _node(11, None, _leaf(12)))
        self.tree.root = _node(8, left, right)
        self.tree._size = 12
        self.validate_tree()

        self.tree.remove(9)
        self.assertEqual(
            shape(self.tree.root),
            (5,
             (3, (2, (1, None, None), None), (4, None, None)),
             (8, (6, None, (7, None, None)), (11, (10, None, None), (12, None, None)))),
        )
        self.assertEqual(self.tree.height(), 3)
        self.expected_keys = [1, 2, 3, 4, 5, 6, 7, 8, 10, 11, 12]


if __name__ == "__main__":
    unittest.main()
