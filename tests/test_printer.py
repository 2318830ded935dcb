"""
Tests for rendering expression trees back to text.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from prattcalc.lexer import TokenType
from prattcalc.parser import parse_string, to_infix, to_sexpr, Constant, Unary, Binary
from prattcalc.parser.printer import format_number


ROUND_TRIP_CORPUS = [
    "1",
    "1 + 2 + 3",
    "1 + ( 2 + 3 )",
    "1 - ( 2 - 3 )",
    "2 ^ 3 ^ 2",
    "( 2 ^ 3 ) ^ 2",
    "- 2 ^ 2",
    "( - 2 ) ^ 2",
    "- 2 + 2",
    "- ( 2 + 2 )",
    "2 * - 3",
    "1 - - 2",
    "2 ^ - 1 ^ 2",
    "( 2 + 3 ) * 3",
    "8 / ( 4 / 2 )",
    "- - - 1.5",
    "( ( 1 + 2 ) * ( 3 - 4 ) ) / - ( 5 ^ .5 )",
    "1 * - 2 + 3",
]


class TestInfixPrinter(unittest.TestCase):

    def test_minimal_parentheses(self):
        cases = {
            "( 2 + 3 ) * 3": "( 2 + 3 ) * 3",
            "( 1 + 2 ) + 3": "1 + 2 + 3",
            "1 + ( 2 + 3 )": "1 + ( 2 + 3 )",
            "2 ^ ( 3 ^ 2 )": "2 ^ 3 ^ 2",
            "( 2 ^ 3 ) ^ 2": "( 2 ^ 3 ) ^ 2",
            "- 2 ^ 2": "- 2 ^ 2",
            "( - 2 ) ^ 2": "( - 2 ) ^ 2",
            "( ( 1 ) )": "1",
            "1 - - 2": "1 - - 2",
            "2 ^ - 1": "2 ^ ( - 1 )",
            "2 * ( 3 * 4 )": "2 * ( 3 * 4 )",
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                self.assertEqual(to_infix(parse_string(source)), expected)

    def test_reparse_reproduces_tree(self):
        for source in ROUND_TRIP_CORPUS:
            with self.subTest(source=source):
                tree = parse_string(source)
                self.assertEqual(parse_string(to_infix(tree)), tree)

    def test_negative_constant(self):
        tree = Binary(Constant(-3), TokenType.POWER, Constant(2))
        self.assertEqual(to_infix(tree), "( - 3 ) ^ 2")

    def test_unary_plus(self):
        self.assertEqual(to_infix(Unary(TokenType.PLUS, Constant(1))), "+ 1")


class TestSexprPrinter(unittest.TestCase):

    def test_shapes(self):
        self.assertEqual(to_sexpr(parse_string("1 + 2 + 3")), "(+ (+ 1 2) 3)")
        self.assertEqual(to_sexpr(parse_string("2 ^ 3 ^ 2")), "(^ 2 (^ 3 2))")
        self.assertEqual(to_sexpr(parse_string("- 2 ^ 2")), "(- (^ 2 2))")
        self.assertEqual(to_sexpr(parse_string("- 2 + 2")), "(+ (- 2) 2)")

    def test_unknown_node(self):
        with self.assertRaises(TypeError):
            to_sexpr("1 + 2")


class TestLongChains(unittest.TestCase):
    """Printing does not recurse once per node."""

    TERMS = 5000

    def setUp(self):
        self.source = " + ".join(["1"] * self.TERMS)
        self.tree = parse_string(self.source)

    def test_infix(self):
        self.assertEqual(to_infix(self.tree), self.source)

    def test_sexpr(self):
        links = self.TERMS - 1
        self.assertEqual(to_sexpr(self.tree), "(+ " * links + "1" + " 1)" * links)

    def test_right_nested_power_chain(self):
        tree = parse_string(" ^ ".join(["2"] * 250))
        self.assertEqual(to_infix(tree), " ^ ".join(["2"] * 250))


class TestFormatNumber(unittest.TestCase):

    def test_integers_and_floats(self):
        self.assertEqual(format_number(42), "42")
        self.assertEqual(format_number(2.5), "2.5")
        self.assertEqual(format_number(2.0), "2.0")

    def test_no_exponent_notation(self):
        self.assertEqual(format_number(1e20), "100000000000000000000")
        self.assertEqual(format_number(1e-7), "0.0000001")

    def test_non_finite(self):
        with self.assertRaises(ValueError):
            format_number(float("inf"))
        with self.assertRaises(ValueError):
            format_number(float("nan"))


if __name__ == '__main__':
    unittest.main()
