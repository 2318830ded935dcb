"""
PrattCalc Lexer Package

Splits arithmetic expression text into classified tokens.

Key Features:
- Whitespace-delimited symbols: + - * / ^ ( ) and decimal numbers
- Unrecognized symbols become ILLEGAL tokens instead of errors
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerWarning, LexicalAnomaly

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerWarning",
    "LexicalAnomaly",
]
