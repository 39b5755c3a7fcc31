"""
Evaluation error handling for parsemath.

Arithmetic failures are reported as errors rather than being turned into
infinities, NaNs or default values.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic
from ..parser.ast_nodes import Node


class EvaluationError(Exception):
    """
    Exception raised when an expression cannot be reduced to a number.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        node: Optional[Node] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.node = node

    @property
    def position(self) -> int:
        return self.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class DivisionByZeroError(EvaluationError):
    """Divisor (or base of a negative power) evaluated to zero."""


class InvalidPowerError(EvaluationError):
    """Power whose real result does not exist."""


class NumericOverflowError(EvaluationError):
    """Result too large to represent as a float."""


EVALUATION_ERROR_CODES = {
    "E001": "Division by zero",
    "E002": "Invalid power operation",
    "E003": "Numeric overflow",
}


def create_division_by_zero_error(divisor: Node) -> DivisionByZeroError:
    """Create an error located at the divisor that evaluated to zero."""
    return DivisionByZeroError(
        "Division by zero",
        divisor.span.start,
        node=divisor,
        code="E001",
        help_text="The right-hand side of this division evaluates to zero.",
    )


def create_zero_negative_power_error(node: Node) -> DivisionByZeroError:
    """Create an error for zero raised to a negative power."""
    return DivisionByZeroError(
        "Division by zero: zero raised to a negative power",
        node.span.start,
        node=node,
        code="E001",
        help_text="A negative exponent divides by the base, which is zero here.",
    )


def create_invalid_power_error(node: Node, base: float, exponent: float) -> InvalidPowerError:
    """Create an error for a negative base with a fractional exponent."""
    return InvalidPowerError(
        f"Invalid power operation: {base!r} ^ {exponent!r}",
        node.span.start,
        node=node,
        code="E002",
        help_text="A negative number raised to a non-integer power has no real result.",
    )


def create_numeric_overflow_error(node: Node) -> NumericOverflowError:
    """Create an error for a result too large for a float."""
    return NumericOverflowError(
        "Numeric overflow",
        node.span.start,
        node=node,
        code="E003",
        help_text="The result of this operation is too large to represent.",
    )
