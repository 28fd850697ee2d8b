import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from avl_node import (
    AVLNode,
    balance,
    height,
    is_greater,
    is_less,
    max_node,
    min_node,
    update_height,
)


def chain(*values):
    """Build a left-leaning chain, tallest node first."""
    root = AVLNode(values[0])
    node = root
    for value in values[1:]:
        node.left = AVLNode(value)
        node = node.left
    return root


class TestAVLNode(unittest.TestCase):

    def test_new_node_is_leaf(self):
        node = AVLNode(5)
        self.assertEqual(node.value, 5)
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.assertEqual(node.height, 1)

    def test_height_of_absent_node_is_zero(self):
        self.assertEqual(height(None), 0)

    def test_balance_of_absent_node_is_zero(self):
        self.assertEqual(balance(None), 0)

    def test_update_height_uses_taller_child(self):
        root = AVLNode(10)
        root.left = AVLNode(5)
        root.left.left = AVLNode(2)
        update_height(root.left)
        update_height(root)
        self.assertEqual(root.height, 3)

    def test_balance_is_left_minus_right(self):
        root = AVLNode(10)
        root.right = AVLNode(15)
        update_height(root)
        self.assertEqual(balance(root), -1)
        root.left = AVLNode(5)
        root.left.left = AVLNode(1)
        update_height(root.left)
        self.assertEqual(balance(root), 1)

    def test_is_less_and_is_greater(self):
        node = AVLNode(10)
        self.assertTrue(is_less(5, node))
        self.assertFalse(is_less(10, node))
        self.assertTrue(is_greater(15, node))
        self.assertFalse(is_greater(10, node))

    def test_comparisons_with_absent_node_are_false(self):
        self.assertFalse(is_less(5, None))
        self.assertFalse(is_greater(5, None))

    def test_min_node_follows_left_edge(self):
        root = chain(30, 20, 10)
        self.assertEqual(min_node(root).value, 10)

    def test_max_node_follows_right_edge(self):
        root = AVLNode(10)
        root.right = AVLNode(20)
        root.right.right = AVLNode(30)
        self.assertEqual(max_node(root).value, 30)

    def test_min_and_max_of_leaf_is_itself(self):
        leaf = AVLNode(7)
        self.assertIs(min_node(leaf), leaf)
        self.assertIs(max_node(leaf), leaf)

    def test_repr(self):
        self.assertEqual(repr(AVLNode("a")), "AVLNode('a', height=1)")


if __name__ == "__main__":
    unittest.main()
