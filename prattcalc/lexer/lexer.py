"""
PrattCalc Lexer - turns expression text into tokens

Deliberately naive: the input is split on whitespace and each symbol is
classified on its own, so "( 1 + 2 )" works but "(1+2)" is a single
illegal symbol. Nothing here raises; bad symbols become ILLEGAL tokens
and the parser decides what to do with them.

xwest
"""

import logging
import re
from typing import List

from .tokens import Token, TokenType, SourceLocation, OPERATORS, NUMBER_PATTERN
from .errors import LexicalAnomaly

logger = logging.getLogger(__name__)


class Lexer:
    """
    PrattCalc lexical analyzer.

    Converts source text into a list of tokens terminated by a single EOF
    token. Unrecognized symbols are collected as warnings.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression text
            filename: Name used in source locations
        """
        self.source = source
        self.filename = filename
        self.tokens: List[Token] = []
        self.warnings: List[LexicalAnomaly] = []

        self.symbol_pattern = re.compile(r'\S+')

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens including the trailing EOF token
        """
        self.tokens = []
        self.warnings = []

        for match in self.symbol_pattern.finditer(self.source):
            location = self._location_at(match.start())
            self.tokens.append(self._classify(match.group(), location))

        eof_location = self._location_at(len(self.source))
        self.tokens.append(Token(TokenType.EOF, "", None, eof_location))

        logger.debug("Lexed %d token(s) from %s", len(self.tokens), self.filename)
        return self.tokens

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def _classify(self, symbol: str, location: SourceLocation) -> Token:
        """Map one whitespace-delimited symbol to a token."""
        token_type = OPERATORS.get(symbol)
        if token_type is not None:
            return Token(token_type, symbol, None, location)

        if NUMBER_PATTERN.fullmatch(symbol):
            return Token(TokenType.NUMBER, symbol, self._number_value(symbol), location)

        warning = LexicalAnomaly(symbol, location)
        self.warnings.append(warning)
        logger.warning("Unrecognized symbol %r at %s", symbol, location)
        return Token(TokenType.ILLEGAL, symbol, None, location)

    @staticmethod
    def _number_value(symbol: str):
        if "." in symbol:
            return float(symbol)
        return int(symbol)

    def _location_at(self, offset: int) -> SourceLocation:
        """Compute a 1-based line/column location for a character offset."""
        line = self.source.count("\n", 0, offset) + 1
        line_start = self.source.rfind("\n", 0, offset) + 1
        return SourceLocation(self.filename, line, offset - line_start + 1, offset)


def tokenize_string(source: str, filename: str = "<input>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        List of tokens
    """
    lexer = Lexer(source, filename)
    return lexer.tokenize()
