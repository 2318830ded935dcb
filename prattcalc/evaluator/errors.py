"""
Evaluation error handling for PrattCalc.

Author: xwest
"""

from typing import Optional, List

from ..lexer.errors import Diagnostic
from ..parser.ast_nodes import Expression


class EvaluationError(Exception):
    """
    Exception raised when an expression tree cannot be evaluated.

    Holds the node that failed so callers can print the subexpression.
    """

    code = "E000"

    def __init__(
        self,
        message: str,
        node: Optional[Expression] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.node = node
        self.diagnostic = Diagnostic(
            message=message,
            location=None,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        result = str(self.diagnostic)
        if self.node is not None:
            from ..parser.printer import to_infix
            result += f"  in: {to_infix(self.node)}\n"
        return result


class ArithmeticFailure(EvaluationError):
    """Division by zero, a power outside its domain, or overflow."""

    code = "E001"

    def __init__(self, reason: str, node: Expression, cause: Exception):
        self.reason = reason
        self.cause = cause
        super().__init__(
            f"Arithmetic failure: {reason}",
            node,
            help_text=str(cause) or None,
        )
