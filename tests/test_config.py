"""
Tests for CalcConfig.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from prattcalc.config import CalcConfig, DEFAULT_CONFIG
from prattcalc.lexer import TokenType


class TestCalcConfig(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(DEFAULT_CONFIG.prefix_operators, frozenset({TokenType.MINUS}))
        self.assertEqual(DEFAULT_CONFIG.max_depth, 200)
        self.assertEqual(DEFAULT_CONFIG.filename, "<input>")

    def test_prefix_operators_are_frozen(self):
        config = CalcConfig(prefix_operators=[TokenType.MINUS, TokenType.PLUS])
        self.assertIsInstance(config.prefix_operators, frozenset)
        self.assertEqual(hash(config), hash(CalcConfig().with_unary_plus()))

    def test_rejects_non_operator_prefix(self):
        with self.assertRaises(ValueError):
            CalcConfig(prefix_operators={TokenType.LEFT_PAREN})
        with self.assertRaises(ValueError):
            CalcConfig(prefix_operators={TokenType.NUMBER})

    def test_rejects_non_positive_depth(self):
        with self.assertRaises(ValueError):
            CalcConfig(max_depth=0)

    def test_with_unary_plus_keeps_other_fields(self):
        config = CalcConfig(max_depth=7, filename="a.calc").with_unary_plus()
        self.assertIn(TokenType.PLUS, config.prefix_operators)
        self.assertIn(TokenType.MINUS, config.prefix_operators)
        self.assertEqual(config.max_depth, 7)
        self.assertEqual(config.filename, "a.calc")

    def test_from_env_empty(self):
        self.assertEqual(CalcConfig.from_env({}), CalcConfig())

    def test_from_env_unary_plus(self):
        for value in ["1", "true", "YES", " on "]:
            with self.subTest(value=value):
                config = CalcConfig.from_env({"PRATTCALC_UNARY_PLUS": value})
                self.assertIn(TokenType.PLUS, config.prefix_operators)

        config = CalcConfig.from_env({"PRATTCALC_UNARY_PLUS": "0"})
        self.assertNotIn(TokenType.PLUS, config.prefix_operators)

    def test_from_env_max_depth(self):
        config = CalcConfig.from_env({"PRATTCALC_MAX_DEPTH": "10", "PRATTCALC_UNARY_PLUS": "1"})
        self.assertEqual(config.max_depth, 10)
        self.assertIn(TokenType.PLUS, config.prefix_operators)

    def test_from_env_invalid_depth(self):
        with self.assertRaises(ValueError):
            CalcConfig.from_env({"PRATTCALC_MAX_DEPTH": "deep"})
        with self.assertRaises(ValueError):
            CalcConfig.from_env({"PRATTCALC_MAX_DEPTH": "-1"})


if __name__ == '__main__':
    unittest.main()
