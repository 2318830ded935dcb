"""
Operator precedence table for the PrattCalc parser.

Author: xwest
"""

from enum import Enum, IntEnum
from types import MappingProxyType

from ..lexer.tokens import TokenType


class Precedence(IntEnum):
    """Operator precedence levels for Pratt parsing."""
    NONE = 0            # cannot continue an expression: ), EOF, numbers
    SUM = 1             # +, -
    PRODUCT = 2         # *, /
    PREFIX = 3          # unary -, +
    EXPONENT = 4        # ^
    CALL = 5            # ( as infix, reserved for function calls


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


PRECEDENCES = MappingProxyType({
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.MULTIPLY: Precedence.PRODUCT,
    TokenType.DIVIDE: Precedence.PRODUCT,
    TokenType.POWER: Precedence.EXPONENT,
    TokenType.LEFT_PAREN: Precedence.CALL,
})

RIGHT_ASSOCIATIVE = frozenset({TokenType.POWER})


def precedence_of(token_type: TokenType) -> Precedence:
    """Rank of a token in infix position; NONE when it has no infix meaning."""
    return PRECEDENCES.get(token_type, Precedence.NONE)


def associativity_of(token_type: TokenType) -> Associativity:
    if token_type in RIGHT_ASSOCIATIVE:
        return Associativity.RIGHT
    return Associativity.LEFT


def operand_precedence(token_type: TokenType) -> Precedence:
    """
    Minimum precedence for the right operand of an infix operator.

    Left-associative operators parse their operand one level up so that an
    equal-rank operator is left for the enclosing loop: 1 + 2 + 3 becomes
    (1 + 2) + 3. Right-associative operators parse at their own level so the
    operand absorbs the rest of the chain: 2 ^ 3 ^ 2 becomes 2 ^ (3 ^ 2).
    """
    precedence = precedence_of(token_type)
    if associativity_of(token_type) is Associativity.RIGHT:
        return precedence
    return Precedence(precedence + 1)
