"""
Tree-walking evaluator for PrattCalc expressions.

Evaluation is a bottom-up fold over the tree: constants yield their value,
prefix operators negate or pass through, binary nodes apply the matching
Python operator. Integer arithmetic stays exact for + - *; division and
exponentiation produce floats. Python's arithmetic exceptions are turned
into ArithmeticFailure at the node that raised them.

Author: xwest
"""

import logging
import math
import operator
from typing import Optional

from ..config import CalcConfig, DEFAULT_CONFIG
from ..lexer.tokens import TokenType
from ..parser.ast_nodes import ASTVisitor, Expression, Number
from .errors import ArithmeticFailure

logger = logging.getLogger(__name__)


BINARY_OPERATORS = {
    TokenType.PLUS: operator.add,
    TokenType.MINUS: operator.sub,
    TokenType.MULTIPLY: operator.mul,
    TokenType.DIVIDE: operator.truediv,
    TokenType.POWER: math.pow,
}

UNARY_OPERATORS = {
    TokenType.MINUS: operator.neg,
    TokenType.PLUS: operator.pos,
}

FAILURE_REASONS = {
    ZeroDivisionError: "division by zero",
    ValueError: "math domain error",
    OverflowError: "numeric overflow",
}


class Evaluator(ASTVisitor):
    """
    Evaluates expression trees to numbers.

    Only the prefix operators enabled in the config are evaluated, matching
    what the parser accepts. The evaluator keeps no state between calls;
    one instance may be shared.
    """

    def __init__(self, config: Optional[CalcConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.unary_operators = {
            token_type: function
            for token_type, function in UNARY_OPERATORS.items()
            if token_type in self.config.prefix_operators
        }

    def evaluate(self, expr: Expression) -> Number:
        """
        Evaluate an expression tree.

        Raises:
            ArithmeticFailure: On division by zero, domain errors or overflow
            TypeError: If a prefix operator is not enabled in the config
        """
        result = expr.accept(self)
        logger.debug("Evaluated expression to %r", result)
        return result

    def visit_constant(self, node):
        return node.value

    def visit_unary(self, node, operand):
        function = self.unary_operators.get(node.operator)
        if function is None:
            raise TypeError(f"{node.operator.name} is not an enabled prefix operator")
        return function(operand)

    def visit_binary(self, node, left, right):
        function = BINARY_OPERATORS[node.operator]

        try:
            result = function(left, right)
        except (ZeroDivisionError, ValueError, OverflowError) as e:
            raise ArithmeticFailure(FAILURE_REASONS.get(type(e), str(e)), node, e) from e

        if isinstance(result, float) and not math.isfinite(result) and _finite(left) and _finite(right):
            raise ArithmeticFailure("numeric overflow", node, OverflowError(f"{result} from finite operands"))
        return result


def value_of(expr: Expression, config: Optional[CalcConfig] = None) -> Number:
    """Evaluate an expression tree."""
    return Evaluator(config).evaluate(expr)


def evaluate_string(source: str, config: Optional[CalcConfig] = None) -> Number:
    """
    Lex, parse and evaluate a source string.

    Raises:
        ParseError: If the text is not a well-formed expression
        EvaluationError: If evaluation fails
    """
    from ..parser import parse_string

    expr = parse_string(source, config=config)
    return Evaluator(config).evaluate(expr)


def _finite(value: Number) -> bool:
    return not isinstance(value, float) or math.isfinite(value)
