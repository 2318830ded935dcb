"""
Configuration for the PrattCalc parser and evaluator.

Author: xwest
"""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional

from .lexer.tokens import TokenType, ARITHMETIC_OPERATORS


TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CalcConfig:
    """
    Options shared by the parser, evaluator and CLI.

    Attributes:
        prefix_operators: Operator kinds that may start an expression
        max_depth: Deepest allowed nesting of groups and prefix operators
        filename: Name used in source locations
    """
    prefix_operators: FrozenSet[TokenType] = field(
        default_factory=lambda: frozenset({TokenType.MINUS})
    )
    max_depth: int = 200
    filename: str = "<input>"

    def __post_init__(self):
        invalid = set(self.prefix_operators) - ARITHMETIC_OPERATORS
        if invalid:
            names = ", ".join(sorted(t.name for t in invalid))
            raise ValueError(f"Not arithmetic operators, cannot be prefix: {names}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        # Accept any iterable of token types from callers
        object.__setattr__(self, "prefix_operators", frozenset(self.prefix_operators))

    def with_unary_plus(self) -> "CalcConfig":
        return CalcConfig(
            prefix_operators=self.prefix_operators | {TokenType.PLUS},
            max_depth=self.max_depth,
            filename=self.filename,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalcConfig":
        """
        Build a config from PRATTCALC_* environment variables.

        PRATTCALC_UNARY_PLUS enables '+' as a prefix operator and
        PRATTCALC_MAX_DEPTH overrides the nesting limit.
        """
        if environ is None:
            environ = os.environ

        config = cls()
        if environ.get("PRATTCALC_UNARY_PLUS", "").strip().lower() in TRUTHY:
            config = config.with_unary_plus()

        raw_depth = environ.get("PRATTCALC_MAX_DEPTH")
        if raw_depth:
            try:
                max_depth = int(raw_depth)
            except ValueError:
                raise ValueError(f"PRATTCALC_MAX_DEPTH must be an integer, got {raw_depth!r}")
            config = cls(
                prefix_operators=config.prefix_operators,
                max_depth=max_depth,
                filename=config.filename,
            )

        return config


DEFAULT_CONFIG = CalcConfig()
