"""
Render expression trees back to text.

to_infix produces whitespace-separated text with only the parentheses the
parser needs to rebuild the same tree; to_sexpr produces a fully
parenthesized prefix form that makes the tree shape explicit.

Author: xwest
"""

import math
from decimal import Decimal

from ..lexer.tokens import SYMBOLS
from .ast_nodes import ASTVisitor, Expression
from .precedence import Precedence, Associativity, precedence_of, associativity_of


# Atoms never need parentheses
ATOM = Precedence.CALL + 1


def format_number(value) -> str:
    """Spell a number the way the lexer reads it (no exponent notation)."""
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot print non-finite number {value!r}")
        text = repr(value)
        if "e" in text or "E" in text:
            text = format(Decimal(text), "f")
        return text
    return str(value)


def _wrap(text: str, needs_parens: bool) -> str:
    return f"( {text} )" if needs_parens else text


class InfixPrinter(ASTVisitor):
    """
    Renders each subtree as a (text, binding) pair.

    The binding is the weakest precedence visible at the top of the text;
    a parent parenthesizes a child whose binding would let the parser
    regroup it.
    """

    def visit_constant(self, node):
        if node.value < 0:
            return f"- {format_number(-node.value)}", Precedence.PREFIX
        return format_number(node.value), ATOM

    def visit_unary(self, node, operand):
        text, binding = operand
        return f"{SYMBOLS[node.operator]} {_wrap(text, binding < Precedence.PREFIX)}", Precedence.PREFIX

    def visit_binary(self, node, left, right):
        rank = precedence_of(node.operator)
        right_assoc = associativity_of(node.operator) is Associativity.RIGHT

        left_text, left_rank = left
        left_parens = left_rank < rank or (left_rank == rank and right_assoc)

        right_text, right_rank = right
        right_parens = right_rank < rank or (right_rank == rank and not right_assoc)

        text = f"{_wrap(left_text, left_parens)} {SYMBOLS[node.operator]} {_wrap(right_text, right_parens)}"
        return text, rank


class SexprPrinter(ASTVisitor):

    def visit_constant(self, node):
        return format_number(node.value)

    def visit_unary(self, node, operand):
        return f"({SYMBOLS[node.operator]} {operand})"

    def visit_binary(self, node, left, right):
        return f"({SYMBOLS[node.operator]} {left} {right})"


def _check_node(expr):
    if not isinstance(expr, Expression):
        raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def to_infix(expr: Expression) -> str:
    """Render an expression as text that re-parses to an equal tree."""
    _check_node(expr)
    text, _ = expr.accept(InfixPrinter())
    return text


def to_sexpr(expr: Expression) -> str:
    """Fully parenthesized prefix form, e.g. (+ (+ 1 2) 3)."""
    _check_node(expr)
    return expr.accept(SexprPrinter())
