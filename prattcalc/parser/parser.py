"""
PrattCalc Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser for arithmetic
expressions. Each token kind may have a prefix rule (how it starts an
expression) and an infix rule (how it continues one); the precedence
table decides whether an infix operator belongs to the current call or
to an enclosing one.

Author: xwest
"""

import logging
from typing import List, Optional, Dict, Callable

from ..config import CalcConfig, DEFAULT_CONFIG
from ..lexer.tokens import Token, TokenType
from .ast_nodes import Expression, Constant, Unary, Binary
from .precedence import Precedence, precedence_of, operand_precedence
from .errors import (
    UnexpectedToken, UnmatchedParenthesis, TrailingInput, IllegalToken,
    NestingTooDeep
)

logger = logging.getLogger(__name__)


class Parser:
    """
    PrattCalc precedence-climbing parser.

    A parser owns a cursor into a fully lexed token list. Parsing either
    returns a complete expression tree or raises a ParseError; there is no
    recovery and no partial result.
    """

    def __init__(self, tokens: List[Token], config: Optional[CalcConfig] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, ending with EOF
            config: Parser options (prefix operators, nesting limit)
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token list must end with an EOF token")

        self.tokens = tokens
        self.config = config or DEFAULT_CONFIG
        self.current = 0
        self.depth = 0

        self._init_parsing_tables()

    def _init_parsing_tables(self):
        """Initialize the prefix and infix parsing function tables."""

        # Prefix parsing functions (for tokens that can start expressions)
        self.prefix_parsers: Dict[TokenType, Callable[[], Expression]] = {
            TokenType.NUMBER: self._parse_number,
            TokenType.LEFT_PAREN: self._parse_grouping,
            TokenType.ILLEGAL: self._parse_illegal,
        }
        for operator in self.config.prefix_operators:
            self.prefix_parsers[operator] = self._parse_unary

        # Infix parsing functions (for binary operators)
        self.infix_parsers: Dict[TokenType, Callable[[Expression], Expression]] = {
            TokenType.PLUS: self._parse_binary,
            TokenType.MINUS: self._parse_binary,
            TokenType.MULTIPLY: self._parse_binary,
            TokenType.DIVIDE: self._parse_binary,
            TokenType.POWER: self._parse_binary,
        }

    def parse(self) -> Expression:
        """
        Parse the whole token list into an expression tree.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: If the tokens do not form exactly one expression
        """
        self.current = 0
        self.depth = 0

        try:
            expression = self._parse_expression()
        except RecursionError:
            # Long ^ chains or a max_depth above what the interpreter stack holds
            raise NestingTooDeep(self._peek(), self.current) from None

        if not self._check(TokenType.EOF):
            self._reject_illegal()
            raise TrailingInput(self._peek(), self.current)

        logger.debug("Parsed %d token(s)", len(self.tokens))
        return expression

    def _parse_expression(self) -> Expression:
        """Parse an expression at the lowest real precedence."""
        return self._parse_precedence(Precedence.SUM)

    def _parse_precedence(self, precedence: Precedence) -> Expression:
        """Parse expression with given minimum precedence."""
        token = self._peek()
        prefix_parser = self.prefix_parsers.get(token.type)
        if prefix_parser is None:
            raise UnexpectedToken(token, self.current)

        logger.debug("prefix %s at %d (min %s)", token.type.name, self.current, precedence.name)
        left = prefix_parser()

        # Parse infix operators
        while precedence <= precedence_of(self._peek().type):
            infix_parser = self.infix_parsers.get(self._peek().type)
            if infix_parser is None:
                break
            left = infix_parser(left)

        return left

    # Prefix parsers (tokens that can start expressions)

    def _parse_number(self) -> Constant:
        token = self._advance()
        return Constant(token.value)

    def _parse_unary(self) -> Unary:
        """Parse prefix operator and its operand."""
        operator_token = self._advance()
        self._enter_nesting(operator_token)

        # Binds tighter than * and /, looser than ^: - 2 ^ 2 is -(2 ^ 2)
        operand = self._parse_precedence(Precedence.PREFIX)

        self.depth -= 1
        return Unary(operator_token.type, operand)

    def _parse_grouping(self) -> Expression:
        """Parse parenthesized expression."""
        opening = self._advance()  # Consume (
        self._enter_nesting(opening)

        expr = self._parse_expression()

        if not self._check(TokenType.RIGHT_PAREN):
            self._reject_illegal()
            raise UnmatchedParenthesis(self._peek(), self.current, opening)
        self._advance()  # Consume )

        self.depth -= 1
        return expr

    def _parse_illegal(self) -> Expression:
        raise IllegalToken(self._peek(), self.current)

    # Infix parsers

    def _parse_binary(self, left: Expression) -> Binary:
        """Parse binary operation."""
        operator_token = self._advance()
        logger.debug("infix %s at %d", operator_token.type.name, self.current - 1)

        right = self._parse_precedence(operand_precedence(operator_token.type))

        return Binary(left, operator_token.type, right)

    # Utility methods

    def _enter_nesting(self, token: Token):
        """Count one group or prefix level; `token` opened it."""
        self.depth += 1
        if self.depth > self.config.max_depth:
            raise NestingTooDeep(token, self.current - 1, self.config.max_depth)

    def _reject_illegal(self):
        """Report an ILLEGAL token ahead of a more generic syntax error."""
        if self._check(TokenType.ILLEGAL):
            raise IllegalToken(self._peek(), self.current)

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._peek()
        if token.type != TokenType.EOF:
            self.current += 1
        return token

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]


def parse_tokens(tokens: List[Token], config: Optional[CalcConfig] = None) -> Expression:
    return Parser(tokens, config).parse()


def parse_string(source: str, filename: Optional[str] = None,
                 config: Optional[CalcConfig] = None) -> Expression:
    """
    Convenience function to parse a source string.

    Args:
        source: Expression text
        filename: Filename for error reporting, defaults to config.filename
        config: Parser options

    Returns:
        Expression tree

    Raises:
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    config = config or DEFAULT_CONFIG
    tokens = tokenize_string(source, filename or config.filename)
    return Parser(tokens, config).parse()
