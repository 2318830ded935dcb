"""
PrattCalc Parser Package

Implements a Pratt-based precedence-climbing parser for arithmetic
expressions and the immutable expression tree it produces.

Key Features:
- Top-down operator precedence (Pratt parsing)
- Left-associative + - * /, right-associative ^
- Unary minus binding looser than ^ (- 2 ^ 2 is -(2 ^ 2))
- Typed, position-carrying syntax errors
- Infix and s-expression printers

Author: xwest
"""

from .ast_nodes import ASTVisitor, Expression, Constant, Unary, Binary
from .precedence import (
    Precedence, Associativity, precedence_of, associativity_of, operand_precedence
)
from .parser import Parser, parse_string, parse_tokens
from .printer import to_infix, to_sexpr
from .errors import (
    ParseError, UnexpectedToken, UnmatchedParenthesis, TrailingInput,
    IllegalToken, NestingTooDeep
)

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_tokens",

    # Precedence table
    "Precedence", "Associativity", "precedence_of", "associativity_of",
    "operand_precedence",

    # Expression tree
    "ASTVisitor", "Expression", "Constant", "Unary", "Binary",

    # Printing
    "to_infix", "to_sexpr",

    # Error handling
    "ParseError", "UnexpectedToken", "UnmatchedParenthesis", "TrailingInput",
    "IllegalToken", "NestingTooDeep",
]
