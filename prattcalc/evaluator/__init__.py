"""
PrattCalc Evaluator Package

Folds expression trees into numbers with standard Python arithmetic,
reporting division by zero, domain errors and overflow as
ArithmeticFailure.

Author: xwest
"""

from .evaluator import Evaluator, value_of, evaluate_string
from .errors import EvaluationError, ArithmeticFailure

__all__ = [
    "Evaluator",
    "value_of",
    "evaluate_string",
    "EvaluationError",
    "ArithmeticFailure",
]
