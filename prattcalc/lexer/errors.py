"""
Diagnostics for the PrattCalc lexer.

The lexer itself never fails: unrecognized symbols become ILLEGAL tokens and
are reported as warnings, leaving the fatal error to the parser.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, OPERATORS, NUMBER_PATTERN


@dataclass
class Diagnostic:
    """
    Compiler-style report shared by lexer warnings, parse errors and
    evaluation errors.

    Renders as:

        ERROR: Unmatched parenthesis '('
          --> <input>:1:1
          help: The opening '(' at <input>:1:1 was never closed.

    Evaluation diagnostics have no source location and skip the arrow line.
    """
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        lines = [f"{self.severity.upper()}: {self.message}"]
        if self.location is not None:
            lines.append(f"  --> {self.location}")
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines) + "\n"


class LexerWarning:
    """A lexer finding that does not stop lexing."""

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(message, location, "warning", self.code, help_text, suggestions)

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexicalAnomaly(LexerWarning):
    """An unrecognized symbol that was emitted as an ILLEGAL token."""

    code = "L001"

    def __init__(self, lexeme: str, location: SourceLocation):
        self.lexeme = lexeme
        suggestions = suggest_split(lexeme)
        if suggestions:
            help_text = "Every token must be separated from its neighbours by whitespace."
        else:
            help_text = f"'{lexeme}' is neither a number nor one of + - * / ^ ( )."
        super().__init__(
            f"Unrecognized symbol '{lexeme}'",
            location,
            help_text=help_text,
            suggestions=suggestions,
        )


def suggest_split(lexeme: str) -> List[str]:
    """
    Suggest a whitespace-separated spelling for glued symbols like '(1'.

    Returns an empty list when splitting on operator characters would not
    produce only valid symbols.
    """
    if not any(char in OPERATORS for char in lexeme) or len(lexeme) < 2:
        return []

    parts = []
    current = ""
    for char in lexeme:
        if char in OPERATORS:
            if current:
                parts.append(current)
                current = ""
            parts.append(char)
        else:
            current += char
    if current:
        parts.append(current)

    for part in parts:
        if part not in OPERATORS and not NUMBER_PATTERN.fullmatch(part):
            return []

    return [f"Write it as '{' '.join(parts)}'"]
