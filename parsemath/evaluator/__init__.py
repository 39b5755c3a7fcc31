"""
parsemath Evaluator Package

Reduces ASTs to floating point values.

Author: xwest
"""

from .evaluator import Evaluator, evaluate_ast
from .errors import (
    EvaluationError, DivisionByZeroError, InvalidPowerError, NumericOverflowError
)

__all__ = [
    "Evaluator",
    "evaluate_ast",
    "EvaluationError",
    "DivisionByZeroError",
    "InvalidPowerError",
    "NumericOverflowError",
]
