"""
Tests for expression tree nodes and visitor traversal.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from prattcalc.lexer import TokenType
from prattcalc.parser import parse_string, ASTVisitor, Constant, Unary, Binary


class RecordingVisitor(ASTVisitor):
    """Records the order nodes are visited in and counts them."""

    def __init__(self):
        self.order = []

    def visit_constant(self, node):
        self.order.append(str(node.value))
        return 1

    def visit_unary(self, node, operand):
        self.order.append(f"unary {node.operator.name}")
        return operand + 1

    def visit_binary(self, node, left, right):
        self.order.append(f"binary {node.operator.name}")
        return left + right + 1


class TestVisitor(unittest.TestCase):

    def test_children_before_parents_left_before_right(self):
        visitor = RecordingVisitor()
        count = parse_string("( 1 - 2 ) * - 3").accept(visitor)

        self.assertEqual(count, 6)
        self.assertEqual(visitor.order, ["1", "2", "binary MINUS", "3", "unary MINUS", "binary MULTIPLY"])

    def test_leaf(self):
        self.assertEqual(Constant(4).accept(RecordingVisitor()), 1)

    def test_deep_tree_does_not_recurse(self):
        tree = Constant(1)
        for _ in range(10000):
            tree = Binary(tree, TokenType.MULTIPLY, Unary(TokenType.MINUS, Constant(1)))

        self.assertEqual(tree.accept(RecordingVisitor()), 1 + 10000 * 3)

    def test_visitor_is_abstract(self):
        with self.assertRaises(TypeError):
            ASTVisitor()


class TestNodes(unittest.TestCase):

    def test_structural_equality(self):
        self.assertEqual(parse_string("( 1 + 2 ) * 3"), parse_string("( ( 1 + 2 ) ) * 3"))
        self.assertNotEqual(parse_string("1 + 2 * 3"), parse_string("( 1 + 2 ) * 3"))

    def test_children(self):
        tree = parse_string("- 1 + 2")
        self.assertEqual(tree.children(), [Unary(TokenType.MINUS, Constant(1)), Constant(2)])
        self.assertEqual(Constant(1).children(), [])

    def test_operator_must_be_arithmetic(self):
        with self.assertRaises(ValueError):
            Binary(Constant(1), TokenType.LEFT_PAREN, Constant(2))
        with self.assertRaises(ValueError):
            Unary(TokenType.NUMBER, Constant(2))

    def test_compact_string_of_long_chain(self):
        tree = parse_string(" - ".join(["1"] * 3000))
        self.assertEqual(str(tree), "(" * 2999 + "1" + "-1)" * 2999)


if __name__ == '__main__':
    unittest.main()
