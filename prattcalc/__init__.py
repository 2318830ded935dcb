"""
PrattCalc Package

A Pratt (top-down operator precedence) parser and evaluator for arithmetic
expressions.

Architecture:
    prattcalc/
    ├── lexer/           # Whitespace tokenization and token classification
    ├── parser/          # Precedence table, Pratt parser, expression tree
    ├── evaluator/       # Tree-walking evaluation
    ├── config.py        # Parser options
    └── cli.py           # prattcalc command line

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .config import CalcConfig, DEFAULT_CONFIG
from .lexer import Lexer, Token, TokenType, SourceLocation, tokenize_string
from .parser import (
    Parser, Expression, Constant, Unary, Binary, Precedence, precedence_of,
    parse_string, to_infix, to_sexpr, ParseError
)
from .evaluator import Evaluator, value_of, evaluate_string, EvaluationError

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Evaluator",
    "CalcConfig",
    "DEFAULT_CONFIG",

    # Tokens and tree
    "Token", "TokenType", "SourceLocation",
    "Expression", "Constant", "Unary", "Binary",
    "Precedence", "precedence_of",

    # Convenience functions
    "tokenize_string", "parse_string", "value_of", "evaluate_string",
    "to_infix", "to_sexpr",

    # Errors
    "ParseError", "EvaluationError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
