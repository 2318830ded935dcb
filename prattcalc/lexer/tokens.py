"""
Token definitions for the PrattCalc lexer.

This module defines the token types understood by the calculator:
- Numeric literals (integers and decimals)
- Arithmetic operators (+ - * / ^)
- Grouping parentheses
- End-of-input and illegal (unrecognized) symbols

Author: xwest
"""

import re
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


class TokenType(Enum):
    """
    Enumeration of all token types in PrattCalc.
    """

    # Special tokens
    EOF = auto()                    # End of input
    ILLEGAL = auto()                # Unrecognized symbol

    # Literals
    NUMBER = auto()                 # 42, 3.14, .5

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    POWER = auto()                  # ^

    # Grouping
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting and token tables in the CLI.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its type, the raw lexeme, the parsed numeric value
    (NUMBER tokens only) and where it came from.
    """
    type: TokenType
    lexeme: str
    value: Optional[Union[int, float]]
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None and str(self.value) != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type in ARITHMETIC_OPERATORS

    @property
    def is_terminator(self) -> bool:
        """True for tokens that can only end an expression."""
        return self.type in (TokenType.RIGHT_PAREN, TokenType.EOF)


# Single-character symbols recognized by the lexer
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "^": TokenType.POWER,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

# Operator kinds that may appear inside Unary/Binary nodes
ARITHMETIC_OPERATORS = frozenset({
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
    TokenType.POWER,
})

# Digits with at most one decimal point: 42, 3.14, 7., .5
NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

# Reverse lookup used by the printer and diagnostics
SYMBOLS = {token_type: symbol for symbol, token_type in OPERATORS.items()}
