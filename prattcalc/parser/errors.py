"""
Error handling for the PrattCalc parser.

Every syntax error aborts the parse. Errors carry the offending token, the
cursor position it was found at, and a compiler-style diagnostic.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation, SYMBOLS
from ..lexer.errors import Diagnostic, suggest_split


class ParseError(Exception):
    """
    Exception raised when the parser encounters a fatal syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    code = "P000"

    def __init__(
        self,
        message: str,
        token: Token,
        position: int,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        self.position = position
        self.diagnostic = Diagnostic(
            message=message,
            location=token.location,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.token.location

    @property
    def lexeme(self) -> str:
        return self.token.lexeme

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedToken(ParseError):
    """A token appeared where no prefix rule applies."""

    code = "P001"

    def __init__(self, token: Token, position: int):
        if token.type == TokenType.EOF:
            message = "Unexpected end of input, expected an expression"
            help_text = "The input ended where a number, '-' or '(' was expected."
            suggestions = ["Add the missing operand"]
        else:
            message = f"Unexpected token '{token.lexeme}': no prefix rule for {token.type.name}"
            help_text = "An expression must start with a number, a prefix operator or '('."
            suggestions = _operand_suggestions(token)
        super().__init__(message, token, position, help_text, suggestions)


class UnmatchedParenthesis(ParseError):
    """An opening parenthesis was never closed."""

    code = "P002"

    def __init__(self, token: Token, position: int, opening: Token):
        self.opening = opening
        super().__init__(
            f"Unmatched parenthesis '{opening.lexeme}'",
            token,
            position,
            help_text=f"The opening '(' at {opening.location} was never closed; "
                      f"found {_describe(token)} instead.",
            suggestions=["Add a closing ')'"],
        )


class TrailingInput(ParseError):
    """Tokens remain after a complete expression."""

    code = "P003"

    def __init__(self, token: Token, position: int):
        if token.type == TokenType.RIGHT_PAREN:
            help_text = "This ')' has no matching '('."
            suggestions = ["Remove the ')'", "Add a matching '(' earlier"]
        else:
            help_text = "A complete expression was parsed before this token."
            suggestions = ["Join the pieces with an operator"]
        super().__init__(
            f"Unexpected trailing input '{token.lexeme}'",
            token,
            position,
            help_text=help_text,
            suggestions=suggestions,
        )


class IllegalToken(ParseError):
    """The lexer could not classify a symbol."""

    code = "P004"

    def __init__(self, token: Token, position: int):
        suggestions = suggest_split(token.lexeme)
        if suggestions:
            help_text = "Every token must be separated from its neighbours by whitespace."
        else:
            help_text = "Only numbers and the symbols + - * / ^ ( ) are understood."
        super().__init__(
            f"Illegal token '{token.lexeme}'",
            token,
            position,
            help_text=help_text,
            suggestions=suggestions,
        )


class NestingTooDeep(ParseError):
    """Groups or prefix operators nest beyond the configured limit or the interpreter stack."""

    code = "P005"

    def __init__(self, token: Token, position: int, limit: Optional[int] = None):
        self.limit = limit
        if limit is None:
            # The interpreter stack ran out before the configured limit
            message = "Expression nested too deeply to parse"
            help_text = "Shorten long '^' chains or simplify the expression."
        else:
            message = f"Expression nested deeper than {limit} levels"
            help_text = "Raise the nesting limit or simplify the expression."
        super().__init__(message, token, position, help_text=help_text)


def _describe(token: Token) -> str:
    if token.type == TokenType.EOF:
        return "end of input"
    return f"'{token.lexeme}'"


def _operand_suggestions(token: Token) -> List[str]:
    if token.type in SYMBOLS and token.type not in (TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN):
        return [f"Add an operand before '{token.lexeme}'"]
    if token.type == TokenType.RIGHT_PAREN:
        return ["Add an expression inside the parentheses"]
    return []
